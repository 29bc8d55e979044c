"""Miscellaneous tools for internal use."""

import inspect
import logging
import numbers
import re
from logging import NullHandler


_numeric_string = re.compile(r"^-?[0-9]+$")


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def isindex(x):
    """Return wether `x` is an integer index, booleans are not."""
    return isint(x) and not isinstance(x, bool)


def is_numeric_string(x):
    """Return wether `x` is a string holding a signed integer."""
    return isinstance(x, str) and _numeric_string.match(x.strip()) is not None


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def normalize_index(index, length, strict=True):
    """Resolve a possibly negative index against a container length.

    Args:
        index (int): index to resolve, negative values count from the
            end.
        length (int): size of the indexed container.
        strict (bool): wether an index which remains out of
            :code:`[0, length)` after wrapping raises an error.

    Return:
        int: the wrapped index, not bounds checked unless `strict` is
        set.
    """
    normalized = index + length if index < 0 else index

    if strict and not 0 <= normalized < length:
        raise IndexError(
            "index {} out of range for length {}".format(index, length))

    return normalized


def with_optional_index(func, nargs):
    """Adapt a callback which may or may not take a trailing index.

    Args:
        func (Callable): user callback.
        nargs (int): number of arguments `func` always receives.

    Return:
        A callable taking `nargs` arguments followed by an index, the
        index is only forwarded when `func` can accept it.
    """
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):  # some builtins have no signature
        return lambda *args: func(*args[:nargs])

    positional = [p for p in parameters
                  if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if len(positional) > nargs \
            or any(p.kind == p.VAR_POSITIONAL for p in parameters):
        return func

    return lambda *args: func(*args[:nargs])
