from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from config import INITIAL_DIRECTION, INITIAL_HEAD
from .direction import VALID_DIRECTIONS
from .errors import ChainInvariantError, EmptyChainError, MissingSegmentError
from .grid import Cell


@dataclass
class Segment:
    """One body unit. ``next`` points toward the head, ``prev`` toward the tail."""

    id: int
    position: Cell
    next: Optional[int] = None
    prev: Optional[int] = None


class Snake:
    """Snake body kept as a linked chain of segments in an id-keyed arena.

    Segments reference each other by integer id rather than by object, so
    the head and tail are just two ids. New segments always go in front of
    the head and removal always takes the tail, which makes both O(1).
    Ids are handed out in increasing order and never reused.
    """

    def __init__(self, head=INITIAL_HEAD, direction=INITIAL_DIRECTION):
        self.reset(head, direction)

    def reset(self, head=INITIAL_HEAD, direction=INITIAL_DIRECTION):
        """Reset to a two-segment snake: the head plus a tail one cell behind it."""
        head = tuple(head)
        direction = tuple(direction)
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Not a unit direction: {direction!r}")
        tail = (head[0] - direction[0], head[1] - direction[1])

        self.segments: Dict[int, Segment] = {}
        self._occupied = Counter()
        self._next_id = 0
        self.head_id = None
        self.tail_id = None

        # facing used by the next move, and the direction of the last move
        self.direction = direction
        self.heading = direction

        self.tail_id = self._insert(tail)
        self.head_id = self.tail_id
        self.grow_at_head(head)

    def _insert(self, position) -> int:
        seg_id = self._next_id
        self._next_id += 1
        self.segments[seg_id] = Segment(seg_id, tuple(position))
        self._occupied[tuple(position)] += 1
        return seg_id

    def segment(self, seg_id) -> Segment:
        try:
            return self.segments[seg_id]
        except KeyError:
            raise MissingSegmentError(f"No segment with id {seg_id}") from None

    def grow_at_head(self, position) -> int:
        """Insert a segment in front of the head and make it the new head."""
        old_head = self.segment(self.head_id)
        new_id = self._insert(position)
        old_head.next = new_id
        self.segments[new_id].prev = old_head.id
        self.head_id = new_id
        return new_id

    def shrink_at_tail(self) -> Cell:
        """Remove the tail segment and return the cell it occupied."""
        if len(self.segments) < 2:
            raise EmptyChainError(
                f"Cannot shrink a chain of {len(self.segments)} segment(s)"
            )

        tail = self.segment(self.tail_id)
        new_tail = self.segment(tail.next)
        new_tail.prev = None
        del self.segments[tail.id]
        self._occupied[tail.position] -= 1
        if not self._occupied[tail.position]:
            del self._occupied[tail.position]
        self.tail_id = new_tail.id
        return tail.position

    def head_position(self) -> Cell:
        return self.segment(self.head_id).position

    def tail_position(self) -> Cell:
        return self.segment(self.tail_id).position

    def iter_occupied(self) -> Iterator[Cell]:
        """Yield every occupied cell, head first. Each call starts over."""
        seg_id = self.head_id
        while seg_id is not None:
            seg = self.segment(seg_id)
            yield seg.position
            seg_id = seg.prev

    def occupies(self, cell) -> bool:
        return self._occupied[tuple(cell)] > 0

    def overlaps_head(self) -> bool:
        """True when some other segment shares the head's cell."""
        return self._occupied[self.head_position()] > 1

    def check_invariants(self):
        """Walk the chain tail to head and raise if the links disagree."""
        if self.segment(self.head_id).next is not None:
            raise ChainInvariantError("head has a next link")
        if self.segment(self.tail_id).prev is not None:
            raise ChainInvariantError("tail has a prev link")

        seen = set()
        seg_id = self.tail_id
        while seg_id is not None:
            if seg_id in seen:
                raise ChainInvariantError(f"cycle through segment {seg_id}")
            seen.add(seg_id)
            seg = self.segment(seg_id)
            if seg.next is not None and self.segment(seg.next).prev != seg_id:
                raise ChainInvariantError(f"broken back link at segment {seg.next}")
            last = seg_id
            seg_id = seg.next

        if last != self.head_id:
            raise ChainInvariantError("walking from the tail does not reach the head")
        if len(seen) != len(self.segments):
            raise ChainInvariantError(
                f"{len(self.segments) - len(seen)} segment(s) detached from the chain"
            )

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return self.iter_occupied()

    def __contains__(self, cell):
        return self.occupies(cell)

    def __repr__(self):
        return f"<Snake len={len(self)} head={self.head_position()} dir={self.direction}>"
