"""Partial Update Merge — pure field-merge rules for PUT on merge-style resources.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Scalar fields: payload value wins unless it is None (absent == None)
    - Foreign-key fields: payload value ALWAYS wins, including None or 0
    - Fields outside scalar_fields/foreign_key_fields never appear in the result

Design Decisions:
    - The scalar/foreign-key asymmetry is kept as-is: clients already rely on a PUT
      without teamId resetting the reference (ADR: preserve observed behaviour,
      do not silently fix)
"""

from collections.abc import Mapping
from typing import Any


def merge_fields(
    current: Mapping[str, Any],
    payload: Mapping[str, Any],
    scalar_fields: tuple[str, ...],
    foreign_key_fields: tuple[str, ...],
) -> dict[str, Any]:
    """Return the new column values for an existing row after a partial update."""
    merged: dict[str, Any] = {}
    for name in scalar_fields:
        value = payload.get(name)
        merged[name] = current.get(name) if value is None else value
    for name in foreign_key_fields:
        merged[name] = payload.get(name)
    return merged


def missing_required(
    payload: Mapping[str, Any], required: tuple[str, ...],
) -> str | None:
    """First required text field that is None or empty, else None."""
    for name in required:
        if not payload.get(name):
            return name
    return None
