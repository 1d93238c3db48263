"""Package logger with a per-view context field."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_NAME = "map_scale"


class _ViewIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "view"):
            record.view = "-"
        return True


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, configuring console output once.

    Parameters
    ----------
    name : str
        Module name, typically ``__name__``.
    """
    base = logging.getLogger(_LOGGER_NAME)
    if not base.handlers:
        base.setLevel(logging.WARNING)
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(module)s view=%(view)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        handler.addFilter(_ViewIdFilter())
        base.addHandler(handler)
        base.propagate = False
    short = name[len(_LOGGER_NAME) + 1 :] if name.startswith(_LOGGER_NAME + ".") else name
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def set_level(level: int) -> None:
    """Update log level for the package logger and its handlers."""
    base = logging.getLogger(_LOGGER_NAME)
    base.setLevel(level)
    for handler in base.handlers:
        handler.setLevel(level)


def attach_handler(handler: Optional[logging.Handler]) -> None:
    """Attach an extra handler (e.g., a GUI log pane or a test capture)."""
    if handler is None:
        return
    base = logging.getLogger(_LOGGER_NAME)
    if not any(isinstance(f, _ViewIdFilter) for f in handler.filters):
        handler.addFilter(_ViewIdFilter())
    if handler not in base.handlers:
        base.addHandler(handler)


def view_label(ax) -> str:
    """Short identifier for an Axes used in the ``view=`` log field."""
    label = ax.get_label() if hasattr(ax, "get_label") else ""
    return label or f"axes@{id(ax):x}"
