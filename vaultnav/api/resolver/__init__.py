"""Resolver API module: wikilink under cursor -> navigation target."""

from .NavigationTarget import NavigationTarget
from .Resolution import Resolution
from .ResolutionResult import ResolutionResult
from .ResolutionState import ResolutionState
from .Resolver import Resolver

__all__ = [
    "NavigationTarget",
    "Resolution",
    "ResolutionResult",
    "ResolutionState",
    "Resolver",
]
