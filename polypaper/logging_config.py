"""
Logging configuration.

Sets up structlog on top of the standard library so that generation events
carry their key/value context, rendered either for a console or as JSON.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", fmt: str = "plain") -> None:
    """
    Configure structlog and the ``polypaper`` stdlib logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO")
        fmt: "plain" for console output, "json" for one JSON object per line
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    # Avoid duplicate output when reconfigured
    for existing in list(root.handlers):
        if getattr(existing, "_polypaper", False):
            root.removeHandler(existing)
    handler._polypaper = True
    root.addHandler(handler)
    root.setLevel(numeric_level)

    renderer = (structlog.processors.JSONRenderer() if fmt == "json"
                else structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
