"""Structlog setup shared by the web app and the CLI."""

import logging
import sys

import structlog

from lpsnapi.config.models import LPSNConfig


def _use_json_logs(json_logs: bool | None) -> bool:
    if json_logs is not None:
        return json_logs
    # Pretty console output for interactive terminals, JSON everywhere else
    return not sys.stderr.isatty()


def configure_structlog(config: LPSNConfig) -> None:
    """Configure structlog and route stdlib logging through it.

    Modules keep using ``logging.getLogger(__name__)``; their records are
    rendered by structlog's ProcessorFormatter so both APIs produce the same
    output.

    Args:
        config: Loaded application configuration
    """
    log_config = config.logging
    extra_fields = dict(log_config.extra_fields)

    def add_extra_fields(
        logger: logging.Logger, method_name: str, event_dict: structlog.types.EventDict
    ) -> structlog.types.EventDict:
        for key, value in extra_fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_extra_fields,
    ]
    if log_config.include_caller:
        shared_processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            )
        )

    renderer: structlog.types.Processor
    if _use_json_logs(log_config.json_logs):
        renderer = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_config.level)

    # Quiet chatty HTTP client loggers unless debugging
    if log_config.level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
