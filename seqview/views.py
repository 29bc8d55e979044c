"""Views over one-dimensional indexable storage."""

from collections.abc import Iterable, Sequence
import copy

from .errors import ReadonlyError, evaluate
from .selectors import IndexListSelector, MaskSelector, SliceSelector, \
    bind, to_selector
from .utils import get_logger, isindex, is_numeric_string, normalize_index, \
    with_optional_index


logger = get_logger(__name__)


def _is_bulk(value):
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if getattr(value, 'ndim', None) == 0:  # numpy scalars
        return False
    return isinstance(value, Iterable)


def _merge_readonly(current, requested):
    if requested is not None and not requested and current:
        logger.warning("readonly views cannot be made writable, ignoring")
    return current or bool(requested)


class ArrayView(Sequence):
    """A view over a sequence, possibly through a chain of selectors.

    The view does not copy the storage: reading or writing an item
    translates its index down to the storage, so that all views over the
    same storage observe the same data.

    Args:
        source (Sequence): storage or view to wrap. A new view over
            another view shares its storage and selectors.
        readonly (Optional[bool]): forbid writing through this view and
            its subviews. A readonly view cannot be made writable.
    """

    def __init__(self, source, readonly=None):
        if isinstance(source, ArrayView):
            self.source = source.source
            self.layers = source.layers
            self.size = source.size
            self._readonly = _merge_readonly(source.readonly, readonly)

        else:
            self.source = source
            self.layers = ()  # index converters, ordered from the storage
            self.size = None  # follows the storage at the root
            self._readonly = bool(readonly)

    @property
    def readonly(self):
        return self._readonly

    def _push(self, key):
        binding = bind(to_selector(key), len(self))
        self.layers = self.layers + (binding.convert,)
        self.size = binding.size

    def _convert(self, key):
        for convert in reversed(self.layers):
            key = convert(key)
        return key

    def _check_writable(self):
        if self._readonly:
            raise ReadonlyError(
                "cannot write through a readonly " + self.__class__.__name__)

    def __len__(self):
        return len(self.source) if self.size is None else self.size

    def __iter__(self):
        for i in range(len(self)):
            yield self.source[self._convert(i)]

    def __getitem__(self, key):
        if isindex(key) or is_numeric_string(key):
            key = normalize_index(int(key), len(self))
            return self.source[self._convert(key)]

        else:
            return self.subview(key).to_list()

    def get(self, key):
        """Alias for :code:`view[key]`."""
        return self[key]

    def __setitem__(self, key, value):
        self._check_writable()

        if isindex(key) or is_numeric_string(key):
            key = normalize_index(int(key), len(self))
            self.source[self._convert(key)] = value

        else:
            self.subview(key).set(value)

    def __delitem__(self, key):
        raise TypeError(
            self.__class__.__name__ + " does not support item deletion")

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.to_list())

    def exists(self, key):
        """Return wether `key` is a valid index or selector for this view."""
        try:
            if isindex(key) or is_numeric_string(key):
                normalize_index(int(key), len(self))
            else:
                bind(to_selector(key), len(self))

        except (IndexError, ValueError, TypeError):
            return False

        else:
            return True

    def to_list(self):
        """Return the items of the view as a new list."""
        return list(self)

    def subview(self, key, readonly=None):
        """Return a view on a selection of the items.

        Args:
            key (Union[Selector, str, slice, Sequence]): a selector, or any
                value accepted by :func:`seqview.selectors.to_selector`.
            readonly (Optional[bool]): make the subview readonly.

        Return:
            ArrayView: a view linked to the same storage.

        Example:

            >>> data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
            >>> odd = seqview.to_view(data).subview("::2")
            >>> odd.to_list()
            [1, 3, 5, 7, 9]
            >>> odd[-1] = 0
            >>> data
            [1, 2, 3, 4, 5, 6, 7, 8, 0, 10]
        """
        view = ArrayView(self, readonly)
        view._push(key)
        return view

    def set(self, values):
        """Assign all items of the view.

        Args:
            values: either a sequence with as many items as the view or a
                single value repeated over all items.

        Return:
            ArrayView: this view.
        """
        self._check_writable()

        if _is_bulk(values):
            values = list(values)  # may alias our storage

            if len(values) != len(self):
                raise ValueError(
                    "cannot assign {} values to {} items of {}".format(
                        len(values), len(self), self.__class__.__name__))

            for i, value in enumerate(values):
                self.source[self._convert(i)] = value

        else:
            for i in range(len(self)):
                self.source[self._convert(i)] = values

        return self

    def apply(self, mapper):
        """Replace each item by :code:`mapper(item, index)`.

        The index argument is optional in `mapper`.

        Return:
            ArrayView: this view.
        """
        self._check_writable()
        mapper = with_optional_index(mapper, 1)
        where = self.__class__.__name__ + ".apply"

        for i in range(len(self)):
            j = self._convert(i)
            self.source[j] = evaluate(mapper, (self.source[j], i), i, where)

        return self

    def apply_with(self, data, mapper):
        """Replace each item by :code:`mapper(item, other_item, index)`.

        Args:
            data (Sequence): the other items, must have the same length as
                the view.
            mapper (Callable): the transformation, index argument is
                optional.

        Return:
            ArrayView: this view.
        """
        self._check_writable()

        data = list(data)  # may alias our storage

        if len(data) != len(self):
            raise ValueError(
                "cannot apply {} values to {} items of {}".format(
                    len(data), len(self), self.__class__.__name__))

        mapper = with_optional_index(mapper, 2)
        where = self.__class__.__name__ + ".apply_with"

        for i, other in enumerate(data):
            j = self._convert(i)
            self.source[j] = evaluate(
                mapper, (self.source[j], other, i), i, where)

        return self

    def mask(self, predicate):
        """Evaluate `predicate` on each item.

        Args:
            predicate (Callable): a function of an item, and optionally
                its index, which returns a boolean.

        Return:
            MaskSelector: the resulting boolean mask.

        Example:

            >>> view = seqview.to_view([1, 2, 3, 4])
            >>> view.mask(lambda x: x % 2 == 0).get_value()
            [False, True, False, True]
        """
        predicate = with_optional_index(predicate, 1)
        where = self.__class__.__name__ + ".mask"

        return MaskSelector([evaluate(predicate, (v, i), i, where)
                             for i, v in enumerate(self)])

    def filter(self, predicate):
        """Return a subview of the items for which `predicate` holds."""
        return self.subview(self.mask(predicate))


class ArraySliceView(ArrayView):
    """A view over a slice of `source`, see :class:`seqview.Slice`."""

    def __init__(self, source, key, readonly=None):
        super().__init__(source, readonly)
        self._push(SliceSelector(key))


class ArrayMaskView(ArrayView):
    """A view over the items of `source` where `mask` is true."""

    def __init__(self, source, mask, readonly=None):
        super().__init__(source, readonly)
        self._push(MaskSelector(mask))


class ArrayIndexListView(ArrayView):
    """A view over the items of `source` at `indexes`."""

    def __init__(self, source, indexes, readonly=None):
        super().__init__(source, readonly)
        self._push(IndexListSelector(indexes))


def to_view(source, readonly=None):
    """Return a view linked to `source`.

    Args:
        source (Sequence): storage or view.
        readonly (Optional[bool]): request a readonly view.

    Return:
        ArrayView: `source` itself if it is already a view which does not
        need a readonly upgrade, a new view otherwise.

    Example:

        >>> data = [1, 2, 3]
        >>> view = seqview.to_view(data)
        >>> view[0] = -1
        >>> data
        [-1, 2, 3]
        >>> seqview.to_view(view) is view
        True
    """
    if not isinstance(source, ArrayView):
        return ArrayView(source, readonly)

    if readonly and not source.readonly:
        return ArrayView(source, readonly=True)

    _merge_readonly(source.readonly, readonly)
    return source


def to_unlinked_view(source, readonly=None):
    """Return a view over a deep copy of `source`.

    Args:
        source (Sequence): storage or view, views are copied in their
            current order.
        readonly (Optional[bool]): request a readonly view, a copy of a
            readonly view stays readonly.

    Return:
        ArrayView: a view which does not share any data with `source`.
    """
    if isinstance(source, ArrayView):
        data = copy.deepcopy(source.to_list())
        readonly = _merge_readonly(source.readonly, readonly)

    else:
        data = copy.deepcopy(source)

    logger.debug("copied %d items into unlinked storage", len(data))

    return ArrayView(data, readonly)
