"""
Selection value types.

SelectableWithIndex wraps a tracked value with its optional row index;
SelectionChange is the immutable before/after pair published on every
select/deselect call.
"""
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SelectableWithIndex(Generic[T]):
    """
    A selectable value with an optional index.

    Attributes:
        value: The tracked item
        index: Position of the item; required when the selection uses a key function
    """
    value: T
    index: Optional[int] = None


@dataclass(frozen=True)
class SelectionChange(Generic[T]):
    """
    Snapshot pair describing one select/deselect call.

    Both tuples follow selection order at capture time. A change is emitted
    even when nothing moved, so `before` may equal `after`.
    """
    before: Tuple[SelectableWithIndex[T], ...] = ()
    after: Tuple[SelectableWithIndex[T], ...] = ()

    @property
    def added(self) -> Tuple[SelectableWithIndex[T], ...]:
        """Entries present after the call but not before."""
        return tuple(e for e in self.after if e not in self.before)

    @property
    def removed(self) -> Tuple[SelectableWithIndex[T], ...]:
        """Entries present before the call but not after."""
        return tuple(e for e in self.before if e not in self.after)

    @property
    def has_changed(self) -> bool:
        return self.before != self.after
