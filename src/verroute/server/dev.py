"""Serve an App with the pounce ASGI server.

pounce is an optional dependency (``pip install verroute[server]``).
"""

from verroute.errors import ConfigurationError


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server for the given App.

    Args:
        app: ASGI callable (verroute App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes (debug mode).
        reload_dirs: Extra directories to watch alongside cwd.
        app_path: Optional ``"module:attribute"`` import string so pounce
            can reimport the app on each reload cycle.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = "Serving requires pounce. Install it with: pip install verroute[server]"
        raise ConfigurationError(msg) from exc

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_dirs=reload_dirs,
    )
    server = Server(config, app, app_path=app_path)
    server.run()
