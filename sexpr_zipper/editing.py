"""
Value-level editing of the focused subtree.

Both operations go through a converter: the one passed explicitly, or the one
bound to the cursor when it was created. Only the focused node is replaced;
the rest of the tree is shared with the original.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from . import zipper as z
from .convert import Converter
from .errors import ConversionError
from .navigation import context_of
from .zipper import Location, absent_safe

logger = logging.getLogger(__name__)


@absent_safe
def replace(
    loc: Location, value: Any, converter: Optional[Converter] = None
) -> Location:
    """
    Replace the focused node with the tree form of `value`.

    Raises:
        ConversionError: If `value` has no tree representation
    """
    conv = converter or context_of(loc).converter
    try:
        new_node = conv.to_node(value)
    except ConversionError as e:
        logger.error(f"Cannot replace node with {value!r}: {e.message}")
        raise
    return z.replace(loc, new_node)


@absent_safe
def edit(
    loc: Location,
    fn: Callable[..., Any],
    *args: Any,
    converter: Optional[Converter] = None,
) -> Location:
    """
    Replace the focused node with the tree form of `fn(value, *args)`.

    `value` is the host value of the focused subtree.

    Raises:
        ConversionError: If either conversion fails
    """
    conv = converter or context_of(loc).converter
    try:
        current = conv.to_value(loc.node)
    except ConversionError as e:
        logger.error(f"Cannot edit node {loc.node!r}: {e.message}")
        raise
    return replace(loc, fn(current, *args), converter=conv)
