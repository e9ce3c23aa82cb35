"""Capability contract the persistence layer checks before committing an aggregate."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AggregateRoot(Protocol):
    """An aggregate that reports whether it may currently be saved or deleted."""

    @property
    def can_be_saved(self) -> bool: ...

    @property
    def can_be_deleted(self) -> bool: ...
