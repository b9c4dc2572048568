"""Structured logging setup."""

import structlog


def configure_logging(json_output: bool = True) -> None:
    """
    Configure structlog on top of the standard library logging module.
    
    Meant for entry points such as demo.main(); importing the package never
    calls it, so an embedding application keeps its own structlog setup.
    Level filtering is delegated to stdlib logging.
    
    Args:
        json_output: Render events as JSON lines instead of console output
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
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
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
