"""
Ring Grid CLI - Command-line interface for the game server.

Usage:
    ringgrid serve [--host HOST] [--port PORT]   Run the REST API
    ringgrid version                             Print the version
"""

import argparse
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Ring Grid - Ring stacking game server",
        prog="ringgrid",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8080, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging level",
    )

    subparsers.add_parser("version", help="Print the version")

    args = parser.parse_args(argv)

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "version":
        cmd_version(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=args.log_level.upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(__name__).info("Starting server on %s:%d", args.host, args.port)

    uvicorn.run(
        "ringgrid.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


def cmd_version(args):
    from . import __version__

    print(f"ringgrid {__version__}")


if __name__ == "__main__":
    main()
