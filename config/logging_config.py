"""
Logging setup for the Streamlit entry point.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO"):
    """
    Configure root logging once per process.

    The level is applied on every call. Handlers are only installed when
    the root logger has none, since Streamlit re-executes the page script
    on every interaction.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if root.handlers:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
