import logging


def get_logger(name: str) -> logging.Logger:
    """Return the ``lsid.<name>`` logger.

    Handlers live on the ``lsid`` logger and are installed by
    ``configure_logging`` at program entry.
    """
    return logging.getLogger(f"lsid.{name}")
