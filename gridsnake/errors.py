"""
Programming-error classes for the snake chain.

These are raised when an internal invariant breaks. They derive from
AssertionError on purpose so nothing in the game loop mistakes them for a
game event; a collision is reported through TickResult, never by raising.
"""


class ChainInvariantError(AssertionError):
    """The segment chain is inconsistent (bad links, lost head or tail)."""


class EmptyChainError(ChainInvariantError):
    """Tried to remove the tail of a chain with fewer than two segments."""


class MissingSegmentError(ChainInvariantError):
    """A segment id that must exist is not in the arena."""
