"""
A python library to take views over sequences.

The seqview package provides views over indexable containers (anything
that supports indexing and item assignment such as lists or arrays).
Views support numpy style indexing with slices, boolean masks and
index lists, and can be stacked on top of each other.

Unless otherwise specified, views are linked to their storage: reading
or writing through a view reads or writes the storage, no copy is made.
"""

from .errors import EvaluationError, ReadonlyError, seterr
from .selectors import (
    IndexListSelector,
    MaskSelector,
    PipeSelector,
    Selector,
    SliceSelector,
    to_selector,
)
from .slices import NormalizedSlice, Slice
from .views import (
    ArrayIndexListView,
    ArrayMaskView,
    ArraySliceView,
    ArrayView,
    to_unlinked_view,
    to_view,
)

__all__ = [
    "EvaluationError",
    "ReadonlyError",
    "seterr",
    "Selector",
    "SliceSelector",
    "MaskSelector",
    "IndexListSelector",
    "PipeSelector",
    "to_selector",
    "Slice",
    "NormalizedSlice",
    "ArrayView",
    "ArraySliceView",
    "ArrayMaskView",
    "ArrayIndexListView",
    "to_view",
    "to_unlinked_view",
]
