"""Selectors map the index space of a view onto the space of its parent.

A selector is first created from a user provided value, it only gets
bound to a concrete upstream size when it is applied to a view, see
:func:`bind`.
"""

from array import array
from collections import namedtuple
from collections.abc import Sequence
import operator

from .slices import Slice
from .utils import normalize_index


Binding = namedtuple('Binding', ['size', 'convert'])
Binding.__doc__ = """A selector bound to an upstream size.

:code:`convert` maps indices in :code:`[0, size)` to upstream indices.
"""


class Selector(object):
    """Base class of the selector kinds."""

    def __init__(self, value):
        self.value = value

    def get_value(self):
        return self.value

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.value)


class SliceSelector(Selector):
    """Select a range of items, see :class:`seqview.Slice`."""

    def __init__(self, value):
        super().__init__(Slice.to_slice(value))


class MaskSelector(Selector):
    """Select items where a boolean mask is true.

    The mask length must match the length of the view it is applied
    to. When the mask is given as a view, its content is copied at
    creation time.
    """

    def __init__(self, value):
        super().__init__([bool(v) for v in value])


class IndexListSelector(Selector):
    """Select items at the given (possibly negative) indices.

    When the indices are given as a view, they are copied at creation
    time.
    """

    def __init__(self, value):
        super().__init__([operator.index(i) for i in value])


class PipeSelector(Selector):
    """Apply several selectors in sequence.

    Example:

        >>> data = list(range(1, 11))
        >>> pipe = PipeSelector(["::2", MaskSelector([1, 0, 1, 0, 1])])
        >>> seqview.to_view(data)[pipe]
        [1, 5, 9]
    """

    def __init__(self, value):
        super().__init__([to_selector(s) for s in value])


def _is_bool(value):
    dtype = getattr(value, 'dtype', None)  # numpy scalars and arrays
    if dtype is not None:
        return dtype.kind == 'b'
    return isinstance(value, bool)


def _is_mask(values):
    if getattr(values, 'ndim', 0) > 0:
        return _is_bool(values)

    return len(values) > 0 and all(_is_bool(v) for v in values)


def to_selector(key):
    """Convert a user provided key to a selector.

    Args:
        key: one of

            - a :class:`Selector`, returned as is,
            - a :class:`Slice`, a :class:`python:slice` or a slice
              string such as :code:`"1:-1:2"`,
            - a sequence of booleans (mask) or of integers (indices),
              including views and numpy arrays.

    Return:
        Selector: the corresponding selector.
    """
    if isinstance(key, Selector):
        return key

    if isinstance(key, (Slice, slice, str)):
        return SliceSelector(key)

    if isinstance(key, Sequence) or getattr(key, 'ndim', 0) > 0:
        if _is_mask(key):
            return MaskSelector(key)
        else:
            return IndexListSelector(key)

    raise TypeError(
        "selectors must be slices, masks or index lists, not "
        + key.__class__.__name__)


def _compose(converters):
    # converters are ordered from the upstream side
    def convert(i):
        for c in reversed(converters):
            i = c(i)
        return i

    return convert


def bind(selector, size):
    """Bind a selector to an upstream size.

    Args:
        selector (Selector): the selector.
        size (int): number of items upstream.

    Return:
        Binding: the number of selected items and the index mapping.
    """
    if isinstance(selector, SliceSelector):
        normalized = selector.value.normalize(size)
        return Binding(len(normalized), normalized.convert_index)

    elif isinstance(selector, MaskSelector):
        if len(selector.value) != size:
            raise ValueError(
                "mask length {} does not match size {}".format(
                    len(selector.value), size))

        indexes = array('l', (i for i, m in enumerate(selector.value) if m))
        return Binding(len(indexes), indexes.__getitem__)

    elif isinstance(selector, IndexListSelector):
        indexes = array('l', (normalize_index(i, size)
                              for i in selector.value))
        return Binding(len(indexes), indexes.__getitem__)

    elif isinstance(selector, PipeSelector):
        converters = []
        for s in selector.value:
            binding = bind(s, size)
            converters.append(binding.convert)
            size = binding.size

        return Binding(size, _compose(converters))

    else:
        raise TypeError(
            "cannot bind selector of type " + selector.__class__.__name__)
