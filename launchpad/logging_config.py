"""structlog setup for processes embedding the launchpad core."""

import logging

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Install the console log pipeline.

    Args:
        verbose: Emit debug events (quotes, fee splits) as well as info
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
