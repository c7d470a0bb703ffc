"""Aimee command line.

Usage:
    aimee-server start [--host HOST] [--port PORT] [--reload]
    aimee-server ask "How many bottles of Pinot Noir do you have?"
    aimee-server config
"""

import argparse
import json
import sys

DEFAULT_APP = "aimee.main:app"


def start_server(host: str | None = None, port: int | None = None, reload: bool = False) -> int:
    """Run the API server in the foreground until interrupted."""
    import uvicorn

    from aimee.config import settings

    host = host or settings.host
    port = port or settings.port

    print(f"Starting {settings.app_name} on http://{host}:{port}")
    print("Press Ctrl+C to stop the server")
    try:
        uvicorn.run(
            DEFAULT_APP,
            host=host,
            port=port,
            reload=reload,
            log_level="debug" if settings.debug else "info",
        )
    except KeyboardInterrupt:
        print("\nServer stopped")
    return 0


def ask(query: str, no_email: bool = False) -> int:
    """Resolve a query against the seed inventory and print the answer."""
    from aimee.services.inventory import get_inventory_store
    from aimee.services.query_resolver import EmailDraft, QueryResolver

    resolver = QueryResolver(email_intents=not no_email)
    result = resolver.resolve(query, get_inventory_store().snapshot())

    print(result.text)
    if isinstance(result, EmailDraft):
        print()
        print(f"To: {result.recipient}")
        print()
        print(result.content)
    return 0


def show_config() -> int:
    """Print the effective configuration.

    Secret values are never printed, only whether each one is set, unset,
    generated at startup or left at its default.
    """
    from aimee.config import settings

    data = settings.config.model_dump(mode="json")
    data["secrets"] = {
        name: settings.secret_status(name) for name in settings.secrets.model_dump()
    }
    print(json.dumps(data, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="aimee-server",
        description="Aimee wine assistant server",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    start_parser = subparsers.add_parser("start", help="Start the server")
    start_parser.add_argument("--host", help="Host to bind to (default: from config)")
    start_parser.add_argument("--port", type=int, help="Port to bind to (default: from config)")
    start_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    ask_parser = subparsers.add_parser("ask", help="Answer a query against the seed inventory")
    ask_parser.add_argument("query", help="Question to ask")
    ask_parser.add_argument(
        "--no-email", action="store_true", help="Disable email-draft handling"
    )

    subparsers.add_parser("config", help="Show the effective configuration")

    args = parser.parse_args(argv)

    if args.command == "start":
        return start_server(args.host, args.port, args.reload)
    if args.command == "ask":
        return ask(args.query, args.no_email)
    if args.command == "config":
        return show_config()

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
