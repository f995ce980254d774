"""``verroute routes`` — print the resolved route table.

Resolves an import string to an App, builds its routes (with an
optional prefix override and version filter), and prints one row per
route entry: METHOD, PATH, HANDLER.
"""

import argparse
import sys

from verroute.cli._resolve import resolve_app
from verroute.routing.route import RouteEntry


def _handler_name(entry: RouteEntry) -> str:
    controller = getattr(entry.controller, "__name__", type(entry.controller).__name__)
    handler = getattr(entry.handler, "__name__", str(entry.handler))
    return f"{controller}.{handler}"


def format_routes(entries: list[RouteEntry]) -> str:
    """Render route entries as an aligned text table."""
    rows = [(e.method.upper(), e.path, _handler_name(e)) for e in entries]

    max_method = max([len(r[0]) for r in rows] + [6])  # "METHOD" header
    max_path = max([len(r[1]) for r in rows] + [4])  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER")]
    sep_len = max_method + max_path + 4 + max((len(r[2]) for r in rows), default=7)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)


def run_routes(args: argparse.Namespace) -> None:
    """List the route entries of an app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    prefix = args.prefix if args.prefix is not None else app.config.prefix
    entries = app.registry.build_routes(prefix)
    if args.version:
        entries = [e for e in entries if e.version == args.version]

    if not entries:
        print("No routes registered.")
        return

    print(format_routes(entries))
