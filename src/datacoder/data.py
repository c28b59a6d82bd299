"""Generic data model shared by every codec.

Decoded data is a tree of ``dict`` (string keys, insertion order kept),
``list`` and scalar leaves (``str``, ``int``, ``float``, ``bool``,
``None``). Codecs decode into this model and encode from it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Union

from datacoder.errors import DataFormatInvalidError

Scalar = Union[str, int, float, bool, None]
GenericData = Union[Scalar, Dict[str, Any], List[Any]]

SCALAR_TYPES = (str, int, float, bool, type(None))


def to_generic(value: Any, location: str = "$") -> GenericData:
    """Normalise a value into the generic data model.

    Mappings become plain dicts and tuples become lists, so the result
    can be handed to any format library. Values outside the model are
    rejected rather than coerced. The tree is walked with an explicit
    stack, so nesting depth is not bounded by the recursion limit.

    Args:
        value: Value to normalise.
        location: Location of value in the enclosing tree, used in
            error messages.

    Returns:
        Equivalent value built only from dict, list and scalars.

    Raises:
        DataFormatInvalidError: If the value holds a type the model
            cannot represent, a mapping key that is not a string, or
            a container that contains itself.
    """
    root: List[Any] = [None]
    # ids of the containers on the path from the root to the current node
    active: set[int] = set()
    # (item, location, parent, slot) entries, or (id,) to leave a container
    stack: List[tuple] = [(value, location, root, 0)]
    while stack:
        entry = stack.pop()
        if len(entry) == 1:
            active.discard(entry[0])
            continue
        item, where, parent, slot = entry
        if isinstance(item, SCALAR_TYPES):
            parent[slot] = item
            continue
        if isinstance(item, (Mapping, list, tuple)):
            marker = id(item)
            if marker in active:
                raise DataFormatInvalidError(
                    "Data is self-referencing",
                    details=f"{where} contains itself",
                )
            active.add(marker)
            stack.append((marker,))
            stack.extend(reversed(_children(item, where, parent, slot)))
            continue
        raise DataFormatInvalidError(
            "Value is not representable as generic data",
            details=f"{where} is {type(item).__name__}",
        )
    return root[0]


def _children(item: Any, where: str, parent: list, slot: Any) -> list:
    """Create the container for item and list its pending children."""
    if isinstance(item, Mapping):
        mapping: Dict[str, Any] = {}
        parent[slot] = mapping
        children = []
        for key, child in item.items():
            if not isinstance(key, str):
                raise DataFormatInvalidError(
                    "Mapping keys must be strings",
                    details=f"{where} has key {key!r}",
                )
            mapping[key] = None
            children.append((child, f"{where}.{key}", mapping, key))
        return children
    sequence: List[Any] = [None] * len(item)
    parent[slot] = sequence
    return [
        (child, f"{where}[{index}]", sequence, index)
        for index, child in enumerate(item)
    ]


def is_generic(value: Any) -> bool:
    """Check whether a value already fits the generic data model."""
    try:
        to_generic(value)
    except DataFormatInvalidError:
        return False
    return True
