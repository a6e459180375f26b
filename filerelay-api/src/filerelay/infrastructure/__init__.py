"""Infrastructure layer - configuration, logging and the HTTP adapters."""

from filerelay.infrastructure.log_config import configure_logging
from filerelay.infrastructure.settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
]
