#!/usr/bin/env python3
"""
Day Book management CLI.

Usage:
    python manage.py migrate     Apply pending database migrations
    python manage.py status      Show migration status and schema checks
    python manage.py serve       Start the API server
"""

import argparse
import asyncio
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending migrations."""
    from src.infrastructure.storage.sqlite.migrations import run_migrations

    db_path = Path(args.db_path) if args.db_path else None
    results = asyncio.run(
        run_migrations(db_path=db_path, create_backup_before=not args.no_backup)
    )

    if not results:
        print("Database is up to date.")
        return

    for result in results:
        mark = "OK  " if result.success else "FAIL"
        print(f"  [{mark}] v{result.version} {result.name} ({result.execution_time_ms} ms)")
        if result.error:
            print(f"         {result.error}")

    if not all(r.success for r in results):
        sys.exit(1)


def cmd_status(args: argparse.Namespace) -> None:
    """Print migration status and integrity checks."""
    from src.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        verify_schema_integrity,
    )

    db_path = Path(args.db_path) if args.db_path else None
    status = asyncio.run(get_migration_status(db_path))

    if not status["exists"]:
        print("Database does not exist yet. Run 'migrate' first.")
        print(f"  Pending: {', '.join(status['pending_migrations']) or '-'}")
        sys.exit(1)

    print(f"Current version: {status['current_version'] or '-'}")
    print(f"  Applied: {', '.join(status['applied_migrations']) or '-'}")
    print(f"  Pending: {', '.join(status['pending_migrations']) or '-'}")

    failed = False
    for check in asyncio.run(verify_schema_integrity(db_path)):
        print(f"  {check['check']}: {check['status']}")
        failed = failed or check["status"] != "PASS"

    if failed:
        sys.exit(1)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start uvicorn in the foreground."""
    import uvicorn

    from src.config import get_settings

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port

    print(f"Starting server on {host}:{port}...")
    print(f"  API docs:  http://{host}:{port}/docs")
    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        app_dir=str(ROOT_DIR),
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Day Book management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply pending migrations")
    p_migrate.add_argument("--db-path", default=None, help="Database file (default: from settings)")
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip the pre-migration backup")
    p_migrate.set_defaults(func=cmd_migrate)

    # status
    p_status = sub.add_parser("status", help="Show migration status")
    p_status.add_argument("--db-path", default=None, help="Database file (default: from settings)")
    p_status.set_defaults(func=cmd_status)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: from settings)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: from settings)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
