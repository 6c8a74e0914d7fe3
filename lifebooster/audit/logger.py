"""
Activity Logger

DESIGN DECISION: Every store action is logged.
This provides:
1. Traceability of document changes
2. Debugging capability when input is refused
3. A visible trail for storage failures, which are otherwise swallowed

The activity logger:
- Is synchronous, like the rest of the core
- Writes to the local structured log only
"""

import logging

import structlog

from lifebooster.config import get_settings
from lifebooster.models.activity import ActivityEvent, ActivityEventBuilder


def configure_logging(json_logs: bool = True, level: str = "INFO") -> None:
    """Configure structlog for local logging."""
    logging.getLogger("lifebooster").setLevel(level.upper())
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(
    json_logs=get_settings().app.log_json,
    level=get_settings().app.log_level,
)


class ActivityLogger:
    """Central activity logging service."""

    def __init__(self, logger_name: str = "lifebooster.activity"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: ActivityEvent) -> None:
        """Log an activity event at the level matching its severity."""
        log_dict = event.to_log_dict()

        level = event.severity.value
        if level == "error":
            self._logger.error("activity_event", **log_dict)
        elif level == "warning":
            self._logger.warning("activity_event", **log_dict)
        elif level == "debug":
            self._logger.debug("activity_event", **log_dict)
        else:
            self._logger.info("activity_event", **log_dict)

    def log_document_created(self, user_id: str, currency: str) -> None:
        self.log(ActivityEventBuilder.document_created(user_id, currency))

    def log_document_loaded(self, user_id: str, schema_version: int) -> None:
        self.log(ActivityEventBuilder.document_loaded(user_id, schema_version))

    def log_load_failed(self, key: str, reason: str) -> None:
        self.log(ActivityEventBuilder.load_failed(key, reason))

    def log_save_failed(self, key: str, reason: str) -> None:
        self.log(ActivityEventBuilder.save_failed(key, reason))

    def log_document_backed_up(self, key: str, backup_key: str) -> None:
        self.log(ActivityEventBuilder.document_backed_up(key, backup_key))

    def log_action_applied(self, action: str) -> None:
        self.log(ActivityEventBuilder.action_applied(action))

    def log_action_rejected(self, action: str, reason: str) -> None:
        self.log(ActivityEventBuilder.action_rejected(action, reason))

    def log_factory_reset(self, user_id: str) -> None:
        self.log(ActivityEventBuilder.factory_reset(user_id))

