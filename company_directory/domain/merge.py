"""
Field-wise merge and equality for directory entities.

Each entity class lists its comparable fields in ``FIELDS``; these helpers
walk that list instead of inspecting arbitrary attributes.
"""

from typing import Any, List


def _fields_for(existing: Any, incoming: Any) -> tuple:
    if type(existing) is not type(incoming):
        raise TypeError(
            f"Cannot compare {type(existing).__name__} with {type(incoming).__name__}"
        )
    return type(existing).FIELDS


def merge_into(existing: Any, incoming: Any) -> List[str]:
    """
    Copy non-None incoming values that differ onto ``existing``.

    Fields left as None on ``incoming`` are preserved, which gives
    update requests PATCH semantics.

    Args:
        existing: Entity loaded from the store (mutated in place)
        incoming: Partial entity from the caller

    Returns:
        Names of the fields that were overwritten
    """
    changed = []
    for name in _fields_for(existing, incoming):
        new_value = getattr(incoming, name)
        if new_value is not None and new_value != getattr(existing, name):
            setattr(existing, name, new_value)
            changed.append(name)
    return changed


def entities_equal(first: Any, second: Any) -> bool:
    """Return True when every listed field matches (None equals None)."""
    return all(
        getattr(first, name) == getattr(second, name)
        for name in _fields_for(first, second)
    )
