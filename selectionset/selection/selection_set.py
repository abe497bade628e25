"""
Selection Set - Ordered tracking of selected items.

Maintains which items of a collection are selected and broadcasts a
SelectionChange after every select/deselect call. Items are identified
either by their value or by a caller-supplied key function, so that
re-fetched records with the same id count as the same selection.
"""
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    runtime_checkable,
)
from loguru import logger

from ..core.config import SelectionConfig
from ..core.events import Signal
from ..core.exceptions import MissingIndexError, MultipleNotAllowedError
from .models import SelectableWithIndex, SelectionChange

T = TypeVar("T")

KeyFn = Callable[[Optional[int], T], Hashable]


@runtime_checkable
class TrackBySelection(Protocol[T]):
    """Public surface of a selection container."""
    changed: Signal

    def is_selected(self, entry: SelectableWithIndex[T]) -> bool: ...

    def select(self, *entries: SelectableWithIndex[T]) -> None: ...

    def deselect(self, *entries: SelectableWithIndex[T]) -> None: ...


class SelectionSet(Generic[T]):
    """
    Maintains a set of selected items.

    When constructed with a `key_fn`, every entry is identified by
    `key_fn(entry.index, entry.value)`, so entries passed to `is_selected`,
    `select` and `deselect` are expected to carry an index.

    Without a `key_fn` the value itself is the dict key, so it must be
    hashable (a dict or list value raises TypeError; pass a `key_fn`
    instead), and values Python treats as equal collide: `1`, `1.0` and
    `True` are the same selection.

    Usage:
        selection = SelectionSet(multiple=True, key_fn=lambda i, row: row.id)
        selection.changed.connect(on_selection_changed)

        selection.select(SelectableWithIndex(row, 3))
        if selection.is_selected(SelectableWithIndex(refetched_row, 3)):
            ...

    `changed` fires once per select/deselect call, including calls that
    leave the selection untouched; compare `before`/`after` (or use
    `SelectionChange.has_changed`) to skip those.
    """

    def __init__(
        self,
        multiple: bool = False,
        key_fn: Optional[KeyFn] = None,
        strict: bool = True,
    ):
        """
        Initialize an empty selection.

        Args:
            multiple: Allow more than one selected item
            key_fn: Optional (index, value) -> key identity function
            strict: Raise on usage errors instead of ignoring them
        """
        self._multiple = multiple
        self._key_fn = key_fn
        self._strict = strict
        self._selection_map: Dict[Hashable, SelectableWithIndex[T]] = {}
        self.changed = Signal("SelectionChanged")

    @classmethod
    def from_config(cls, config: SelectionConfig, key_fn: Optional[KeyFn] = None) -> "SelectionSet[T]":
        return cls(multiple=config.multiple, key_fn=key_fn, strict=config.strict)

    @property
    def multiple(self) -> bool:
        return self._multiple

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def selected(self) -> Tuple[SelectableWithIndex[T], ...]:
        """Current selection in selection order (snapshot)."""
        return tuple(self._selection_map.values())

    def __len__(self) -> int:
        return len(self._selection_map)

    def __contains__(self, entry: SelectableWithIndex[T]) -> bool:
        return self.is_selected(entry)

    def is_selected(self, entry: SelectableWithIndex[T]) -> bool:
        return self._key_for(entry) in self._selection_map

    def select(self, *entries: SelectableWithIndex[T]) -> None:
        """
        Select entries.

        In single mode the previous selection is always replaced, even by an
        entry with the same key. Already selected entries are skipped.

        Raises:
            MultipleNotAllowedError: strict single-mode set given several entries
            MissingIndexError: strict set with key_fn given an entry without index
        """
        self._check_multiple(entries, "select")
        keyed = self._keyed(entries)

        before = self.selected

        if not self._multiple:
            self._selection_map.clear()

        added = 0
        for key, entry in keyed:
            if key in self._selection_map:
                continue
            self._selection_map[key] = entry
            added += 1

        after = self.selected
        logger.debug(f"Selection select: {added}/{len(entries)} added, {len(after)} selected")
        self.changed.emit(SelectionChange(before, after))

    def deselect(self, *entries: SelectableWithIndex[T]) -> None:
        """
        Deselect entries. Entries that are not selected are skipped.

        Raises:
            MultipleNotAllowedError: strict single-mode set given several entries
            MissingIndexError: strict set with key_fn given an entry without index
        """
        self._check_multiple(entries, "deselect")
        keyed = self._keyed(entries)

        before = self.selected

        removed = 0
        for key, _entry in keyed:
            if key not in self._selection_map:
                continue
            del self._selection_map[key]
            removed += 1

        after = self.selected
        logger.debug(f"Selection deselect: {removed}/{len(entries)} removed, {len(after)} selected")
        self.changed.emit(SelectionChange(before, after))

    def clear(self) -> None:
        """Deselect everything and emit a single change."""
        before = self.selected
        self._selection_map.clear()
        logger.debug(f"Selection cleared ({len(before)} removed)")
        self.changed.emit(SelectionChange(before, ()))

    def _check_multiple(self, entries: Sequence[SelectableWithIndex[T]], operation: str) -> None:
        if self._strict and not self._multiple and len(entries) > 1:
            logger.warning(f"SelectionSet.{operation}: {len(entries)} entries given to single selection")
            raise MultipleNotAllowedError("SelectionSet: not multiple selection")

    def _keyed(self, entries: Sequence[SelectableWithIndex[T]]) -> List[Tuple[Hashable, SelectableWithIndex[T]]]:
        # Derive and hash every key before mutating so a failing entry leaves the map intact
        keyed = [(self._key_for(entry), entry) for entry in entries]
        for key, _entry in keyed:
            hash(key)
        return keyed

    def _key_for(self, entry: SelectableWithIndex[T]) -> Hashable:
        if self._key_fn is None:
            return entry.value

        if entry.index is None and self._strict:
            logger.warning(f"SelectionSet: entry without index for key_fn: {entry.value!r}")
            raise MissingIndexError("SelectionSet: index required when key_fn is used.")

        return self._key_fn(entry.index, entry.value)
