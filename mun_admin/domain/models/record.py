"""Shared behaviour for stored records.

Every record is a frozen dataclass with an ``id``. Partial updates never
mutate a record in place: ``merge`` returns a copy where only the fields
present in the change set (and allowed by the record type) are overwritten.
A field can only be cleared with ``None`` when its annotation is Optional.
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from dataclasses import fields, replace
from functools import lru_cache
from typing import (
    Any,
    ClassVar,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

RecordT = TypeVar("RecordT", bound="MergeableRecord")


class RequiredFieldError(ValueError):
    """Raised when a change set would clear a field that must hold a value.

    Attributes:
        field_name: The field sent as None.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} must not be null")


@lru_cache(maxsize=None)
def nullable_fields(record_type: type) -> frozenset[str]:
    """Names of the dataclass fields whose annotation admits None."""
    hints = get_type_hints(record_type)
    nullable = set()
    for f in fields(record_type):
        hint = hints.get(f.name, Any)
        if hint is Any or (
            get_origin(hint) in (Union, types.UnionType)
            and type(None) in get_args(hint)
        ):
            nullable.add(f.name)
    return frozenset(nullable)


def merge_fields(
    record: RecordT,
    changes: Mapping[str, Any],
    updatable: frozenset[str],
) -> RecordT:
    """Shallow-merge a partial change set into a record.

    Keys missing from ``changes`` keep their current value. Keys that are
    not updatable for this record type (``id``, creation timestamps,
    scores) are ignored.

    Args:
        record: The current record.
        changes: Partial field values, typically ``exclude_unset`` output.
        updatable: Field names the record type allows to change.

    Returns:
        A new record with the changes applied.

    Raises:
        RequiredFieldError: If a non-Optional field is sent as None. The
            record is left untouched.
    """
    known = {f.name for f in fields(record)}
    applied = {
        name: value
        for name, value in changes.items()
        if name in known and name in updatable
    }
    if not applied:
        return record
    nullable = nullable_fields(type(record))
    for name, value in applied.items():
        if value is None and name not in nullable:
            raise RequiredFieldError(name)
    return replace(record, **applied)


class MergeableRecord:
    """Mixin for frozen record dataclasses supporting partial updates.

    Subclasses list their changeable fields in ``UPDATABLE_FIELDS``.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    def merge(self: RecordT, changes: Mapping[str, Any]) -> RecordT:
        """Return a copy with the allowed fields from ``changes`` applied."""
        return merge_fields(self, changes, self.UPDATABLE_FIELDS)
