"""Service wiring, settings and command line for the fitness data sync engine."""
