"""
Selection - Ordered selection state with change notification.
"""
from .models import SelectableWithIndex, SelectionChange
from .selection_set import SelectionSet, TrackBySelection, KeyFn

__all__ = [
    "SelectableWithIndex",
    "SelectionChange",
    "SelectionSet",
    "TrackBySelection",
    "KeyFn",
]
