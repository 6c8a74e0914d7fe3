"""Activity logging package."""

from lifebooster.audit.logger import ActivityLogger, configure_logging

__all__ = ["ActivityLogger", "configure_logging"]
