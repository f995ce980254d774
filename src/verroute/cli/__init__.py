"""verroute CLI — route table listing and serving.

Entry point registered as ``verroute`` in ``pyproject.toml``::

    [project.scripts]
    verroute = "verroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``verroute`` command."""
    parser = argparse.ArgumentParser(
        prog="verroute",
        description="verroute — versioned REST routes with per-version inheritance.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- verroute routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print the resolved route table")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    routes_parser.add_argument(
        "--prefix",
        default=None,
        help="Path prefix mounted ahead of the version segment (overrides app config)",
    )
    routes_parser.add_argument(
        "--version",
        dest="version",
        default=None,
        help="Only show routes of one API version (e.g. v2)",
    )

    # -- verroute run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve the app with pounce")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (overrides app config)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from verroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "run":
        from verroute.cli._run import run_app

        run_app(args)
