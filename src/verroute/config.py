"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    Override what you need::

        config = AppConfig(prefix="api", port=3000, debug=True)
    """

    # Routing — mounted ahead of the version segment: /{prefix}/v1/users
    prefix: str | None = None

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development mode — requires debug=True)
    reload_dirs: tuple[str, ...] = ()

    # Logging
    log_level: str = "info"
