"""
Command line entry point for exporting and importing profile snapshots.

    python -m backend export PROFILE_ID -o snapshot.json
    python -m backend import snapshot.json
    python -m backend check snapshot.json

Exit codes: 0 on success, 1 when the operation failed, 2 when it finished
but some records need attention (failed imports, integrity issues).
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from application.exceptions import ApplicationError
from application.sync import (
    OperationStatus,
    check_snapshot_integrity,
    dump_snapshot,
    load_snapshot,
)
from backend.observability import configure_logging, init_sentry
from backend.services.data_sync_service import DataSyncService, create_data_sync_service
from backend.settings import get_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NEEDS_ATTENTION = 2


def _print_progress(status: OperationStatus) -> None:
    print(
        f"\r{status.processed_records}/{status.total_records} "
        f"({status.progress:.0%}) failed={status.failed_records}",
        end="\n" if status.is_complete else "",
        file=sys.stderr,
        flush=True,
    )


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


async def _export(service: DataSyncService, args: argparse.Namespace) -> int:
    result = await service.export_profile(args.profile_id, _print_progress)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_FAILED

    text = dump_snapshot(result.snapshot)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote {result.status.total_records} records to {args.output}", file=sys.stderr)
    else:
        print(text)
    return EXIT_OK


async def _import(service: DataSyncService, args: argparse.Namespace) -> int:
    try:
        payload = json.loads(_read_text(args.input))
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return EXIT_FAILED

    result = await service.import_snapshot(payload, _print_progress)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_FAILED

    status = result.status
    print(json.dumps(status.to_dict(), indent=2))
    if result.cancelled or status.failed_records:
        return EXIT_NEEDS_ATTENTION
    return EXIT_OK


def _check(args: argparse.Namespace) -> int:
    report = check_snapshot_integrity(load_snapshot(_read_text(args.input)))
    print(json.dumps(report.to_dict(), indent=2))
    return EXIT_OK if report.is_valid else EXIT_NEEDS_ATTENTION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m backend",
        description="Export and import fitness profile snapshots",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL for this run")
    subcommands = parser.add_subparsers(dest="command", required=True)

    export_cmd = subcommands.add_parser("export", help="Export a profile to a snapshot")
    export_cmd.add_argument("profile_id", help="Profile to export")
    export_cmd.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")

    import_cmd = subcommands.add_parser("import", help="Import a snapshot file")
    import_cmd.add_argument("input", help="Snapshot JSON file path")

    check_cmd = subcommands.add_parser("check", help="Check a snapshot file for integrity issues")
    check_cmd.add_argument("input", help="Snapshot JSON file path")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings, level=args.log_level)
    init_sentry(settings)

    try:
        if args.command == "check":
            return _check(args)

        service = create_data_sync_service(settings)
        if args.command == "export":
            return asyncio.run(_export(service, args))
        return asyncio.run(_import(service, args))

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return EXIT_FAILED
    except ApplicationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED
    except Exception as e:
        logger.exception("Command failed")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
