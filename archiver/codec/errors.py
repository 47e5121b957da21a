"""
Status codes and the exception taxonomy of the codec.

Internal stages raise one of the `CodecError` subclasses; the public
`compress` / `decompress` entry points translate it into its `Status`.
"""

from enum import IntEnum


class Status(IntEnum):
    OK = 0
    WRONG_ARGUMENTS = 1
    MALFORMED_HEADER = 2
    MALFORMED_DATA = 3


class CodecError(Exception):
    status: Status


class WrongArgumentsError(CodecError):
    status = Status.WRONG_ARGUMENTS


class MalformedHeaderError(CodecError):
    status = Status.MALFORMED_HEADER


class MalformedDataError(CodecError):
    status = Status.MALFORMED_DATA
