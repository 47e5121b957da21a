"""Huffman codec: bit I/O, prefix trie, code table and the stream format."""

from archiver.codec.errors import (
    CodecError,
    MalformedDataError,
    MalformedHeaderError,
    Status,
    WrongArgumentsError,
)
from archiver.codec.huffman import (
    HeaderInfo,
    compress,
    compress_bytes,
    decompress,
    decompress_bytes,
    inspect_header,
)

__all__ = [
    "CodecError",
    "MalformedDataError",
    "MalformedHeaderError",
    "Status",
    "WrongArgumentsError",
    "HeaderInfo",
    "compress",
    "compress_bytes",
    "decompress",
    "decompress_bytes",
    "inspect_header",
]
