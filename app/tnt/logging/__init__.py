"""Structured logging for tnt using structlog.

Example:
    from tnt.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translation_table_built", entry_count=12)
"""

from tnt.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
