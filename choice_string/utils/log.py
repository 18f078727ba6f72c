"""Logger factory for choice_string."""

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger.

    Configuration is left to the host application; without one,
    structlog's defaults apply.
    """
    return structlog.stdlib.get_logger(name)
