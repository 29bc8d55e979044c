import threading


class ReadonlyError(TypeError):
    """Raised when writing through a readonly view."""


class EvaluationError(Exception):
    """Raised when a user callback fails on an element."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user callbacks (mappers and
            predicates) are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through SeqView code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def evaluate(func, args, index, where):
    """Call a user callback, wrapping its failures as configured."""
    try:
        return func(*args)

    except Exception as cause:
        if seterr() == 'passthrough' or isinstance(cause, EvaluationError):
            raise
        else:
            msg = "Failed to evaluate item {} in {}".format(index, where)
            raise EvaluationError(msg) from cause
