import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ``nodelinks`` namespace.

    Handlers are attached once by ``configure_logging()`` at CLI entry; until then
    records propagate to the root logger.
    """
    return logging.getLogger(f"nodelinks.{name}")
