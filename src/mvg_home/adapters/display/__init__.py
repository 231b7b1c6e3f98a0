"""Display adapters."""

from mvg_home.adapters.display.connection_formatter import ConnectionFormatter

__all__ = ["ConnectionFormatter"]
