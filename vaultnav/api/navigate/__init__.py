"""Navigate API module: follow links, list backlinks, browse tags."""

from .Navigator import Navigator

__all__ = ["Navigator"]
