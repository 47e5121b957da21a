"""Byte-oriented Huffman archiver."""

from archiver.codec import (
    CodecError,
    MalformedDataError,
    MalformedHeaderError,
    Status,
    WrongArgumentsError,
    compress,
    compress_bytes,
    decompress,
    decompress_bytes,
)
from archiver.config import CodecConfig

__version__ = "0.1.0"

__all__ = [
    "CodecConfig",
    "CodecError",
    "MalformedDataError",
    "MalformedHeaderError",
    "Status",
    "WrongArgumentsError",
    "compress",
    "compress_bytes",
    "decompress",
    "decompress_bytes",
]
