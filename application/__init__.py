"""
Application layer for the fitness data sync engine.

This package contains:
- ports/: Interfaces the engine depends on (entity sources, progress observer)
- sync/: Chunking, progress, cancellation, snapshot codec and integrity check
- use_cases/: Export and import coordinators
- exceptions: Error taxonomy shared by use cases and adapters
"""
