"""Exceptions raised while encoding or decoding values."""

from __future__ import annotations


class SerializationError(Exception):
    """Base class for every serialization and deserialization failure."""


class IoError(SerializationError):
    """Reading from or writing to a stream failed."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"IO error: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class Utf8DecodeError(SerializationError):
    """A byte sequence was not valid UTF-8."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"UTF-8 decoding error: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class InvalidFormatError(SerializationError):
    """The data does not have the expected layout or values."""

    def __init__(self) -> None:
        super().__init__("Invalid data format")