"""CLI for exporting and importing the client archive directly against the database."""

import argparse
import asyncio
import sys

from dependency_injector import providers

from src.app.config import Settings
from src.app.containers import Container
from src.app.logging import configure_logging
from src.app.main import initialize_storage


def build_container(args: argparse.Namespace) -> Container:
    """Container whose settings honour the --database-url override."""
    container = Container()
    if args.database_url:
        container.config.override(providers.Singleton(Settings, database_url=args.database_url))
    return container


async def run_command(args: argparse.Namespace, container: Container) -> int:
    """
    Run one archive command.

    Args:
        args: Parsed command-line arguments
        container: DI container providing the archive and database

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    settings = container.config()
    path = args.path or settings.archive.path

    try:
        await initialize_storage(container)
        archive = container.client_archive()

        if args.command == "export":
            exported = await archive.export_all(path)
            print(f"Exported {exported} clients to {path}")
        elif args.command == "import":
            restored = await archive.restore(path)
            print(f"Imported {len(restored)} clients from {path}")
        else:
            clients = await container.client_service().list_clients()
            for client in clients:
                print(f"{client}\nLicenses: {', '.join(sorted(client.license_types)) or '-'}\n")
            print(f"{len(clients)} clients")
        return 0

    except Exception as e:
        print(f"Command '{args.command}' failed: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1
    finally:
        await container.database().dispose()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Manage the rental client archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write every client to the configured archive file
  python -m src.app.cli export

  # Re-register clients from a backup, skipping those already present
  python -m src.app.cli import --path backups/clients.txt

  # Use a different database
  python -m src.app.cli list --database-url sqlite+aiosqlite:///rental.db
        """,
    )

    parser.add_argument(
        "command",
        choices=["export", "import", "list"],
        help="export: write clients to the archive; import: restore them; list: print stored clients",
    )

    parser.add_argument(
        "--path",
        help="Archive file path (default: ARCHIVE__PATH setting)",
    )

    parser.add_argument(
        "--database-url",
        help="SQLAlchemy async database URL (default: DATABASE_URL setting)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with full stack traces",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging()
    return asyncio.run(run_command(args, build_container(args)))


if __name__ == "__main__":
    sys.exit(main())
