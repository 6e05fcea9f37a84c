"""
Skip combinator: repeat a movement while a predicate holds.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from .zipper import Location

Move = Callable[[Location], Optional[Location]]
LocationPredicate = Callable[[Location], bool]


def iterate(move: Move, loc: Optional[Location]) -> Iterator[Location]:
    """Yield `loc`, `move(loc)`, `move(move(loc))`, ... until a move fails."""
    while loc is not None:
        yield loc
        loc = move(loc)


def skip(
    move: Move, should_skip: LocationPredicate, loc: Optional[Location]
) -> Optional[Location]:
    """
    Apply `move` starting at `loc` while `should_skip` holds.

    Returns the first location that is not skipped, or None as soon as `move`
    fails. Locations are produced lazily, one move at a time.
    """
    for candidate in iterate(move, loc):
        if not should_skip(candidate):
            return candidate
    return None
