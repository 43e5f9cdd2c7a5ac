"""Exceptions raised by blind index generation."""


class BlindIndexError(Exception):
    """Base class for blind index errors."""


class CapacityExceededError(BlindIndexError, ValueError):
    """
    Input is larger than the index supports. Recoverable: the caller should
    reject or shorten the input; it is never truncated here.
    """

    def __init__(self, message: str, limit: int, actual: int):
        super().__init__(message)
        self.limit = limit
        self.actual = actual


class InputTooLongError(CapacityExceededError):
    """Text has more code points than MAX_INPUT_CHARS."""


class TooManyNGramsError(CapacityExceededError):
    """Text produced more distinct trigrams than MAX_NGRAMS."""


class RandomSourceCorruptedError(BlindIndexError, RuntimeError):
    """
    A shared random source was interrupted while held and its state is unknown.
    Fatal: padding drawn from it cannot be trusted, so this is never recovered.
    """
