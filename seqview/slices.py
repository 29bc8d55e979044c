"""Slice specifications and their resolution against a sequence length."""

import math
import re

from .utils import clip, is_numeric_string, normalize_index


_slice_string = re.compile(r"^-?[0-9]*:?-?[0-9]*:?-?[0-9]*$")
_slice_field = re.compile(r"^-?[0-9]+$")


def _round(x):
    # half away from zero, ints are left untouched
    if isinstance(x, int):
        return x
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _parse_slice_string(s):
    fields = [f.strip() for f in s.split(":")]
    if not 1 <= len(fields) <= 3:
        return None
    if any(f != "" and _slice_field.match(f) is None for f in fields):
        return None

    return [None if f == "" else int(f) for f in fields]


class Slice(object):
    """A range specification with optional start, stop and step.

    Slices follow the semantic of python slicing, they can also be
    written as strings using the :code:`"start:stop:step"` notation,
    where each field may be left empty.

    Example:

        >>> s = Slice.to_slice("1::2")
        >>> s.start, s.stop, s.step
        (1, None, 2)
        >>> list(s.normalize(8))
        [1, 3, 5, 7]
    """

    def __init__(self, start=None, stop=None, step=None):
        self.start = start
        self.stop = stop
        self.step = step

    @staticmethod
    def is_slice_string(s):
        """Return wether `s` is a valid slice string such as :code:`"::2"`.

        Numeric strings are indices, not slices.
        """
        if not isinstance(s, str) or is_numeric_string(s):
            return False

        if _slice_string.match(s) is None:
            return False

        return _parse_slice_string(s) is not None

    @classmethod
    def is_slice(cls, s):
        return isinstance(s, (Slice, slice)) or cls.is_slice_string(s)

    @classmethod
    def to_slice(cls, s):
        """Convert a :class:`Slice`, a :class:`python:slice` or a slice
        string into a :class:`Slice`."""
        if isinstance(s, Slice):
            return s

        if isinstance(s, slice):
            return Slice(s.start, s.stop, s.step)

        if not cls.is_slice_string(s):
            raise ValueError("Invalid slice: \"{}\"".format(s))

        return Slice(*_parse_slice_string(s))

    def normalize(self, size):
        """Resolve the slice against a container of length `size`.

        Return:
            NormalizedSlice: a slice with concrete start, stop and step.
        """
        step = 1 if self.step is None else _round(self.step)

        if step == 0:
            raise IndexError("Step cannot be 0")

        # a negative step with no explicit stop runs down to index 0
        default_stop = -1 if step < 0 and self.stop is None else None

        start = self.start
        if start is None:
            start = 0 if step > 0 else size - 1
        stop = self.stop
        if stop is None:
            stop = size if step > 0 else -1

        start, stop = _round(start), _round(stop)

        start = normalize_index(start, size, strict=False)
        stop = normalize_index(stop, size, strict=False)

        if step > 0 and start >= size:
            start = stop = size - 1
        elif step < 0 and start < 0:
            start = stop = 0
            default_stop = 0

        start = clip(start, 0, size - 1)
        stop = clip(stop, 0 if step > 0 else -1, size)

        if (step > 0 and stop < start) or (step < 0 and stop > start):
            stop = start

        return NormalizedSlice(
            start, stop if default_stop is None else default_stop, step)

    def __str__(self):
        return ":".join("" if v is None else str(v)
                        for v in (self.start, self.stop, self.step))

    def __repr__(self):
        return "{}({!r}, {!r}, {!r})".format(
            self.__class__.__name__, self.start, self.stop, self.step)

    def __eq__(self, other):
        if not isinstance(other, Slice):
            return NotImplemented
        return (self.start, self.stop, self.step) \
            == (other.start, other.stop, other.step)

    def __hash__(self):
        return hash((self.start, self.stop, self.step))


class NormalizedSlice(Slice):
    """A slice resolved against a specific length.

    Its length is the number of selected items and iterating over it
    yields the selected indices.
    """

    def __len__(self):
        return -(-abs(self.stop - self.start) // abs(self.step))

    def convert_index(self, i):
        """Map the `i`-th selected item to its index in the container."""
        return self.start + normalize_index(i, len(self)) * self.step

    def __iter__(self):
        for i in range(len(self)):
            yield self.convert_index(i)
