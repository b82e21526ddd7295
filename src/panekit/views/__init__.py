"""Views subsystem: the base View type built on Observable."""

from panekit.views.base import View

__all__ = ["View"]
