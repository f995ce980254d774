"""``verroute run`` — serve an app with pounce."""

import argparse
import logging
import sys

from verroute.cli._resolve import resolve_app
from verroute.errors import ConfigurationError


def run_app(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it. CLI flags override app config."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    level = (args.log_level or app.config.log_level).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    from verroute.server.dev import run_server

    app._ensure_frozen()
    try:
        run_server(
            app,
            args.host or app.config.host,
            args.port or app.config.port,
            reload=app.config.debug,
            reload_dirs=app.config.reload_dirs,
            app_path=args.app,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
