import os
from dataclasses import dataclass

# Word widths the bit writer/reader can flush and load as one unit.
SUPPORTED_WORD_BITS = (8, 16, 32, 64)

DEFAULT_HEADER_WORD_BITS = int(os.environ.get("ARCHIVER_HEADER_WORD_BITS", "8"))
DEFAULT_PAYLOAD_WORD_BITS = int(os.environ.get("ARCHIVER_PAYLOAD_WORD_BITS", "64"))
DEFAULT_IO_BUFFER_SIZE = int(os.environ.get("ARCHIVER_IO_BUFFER_SIZE", str(1 << 20)))


@dataclass
class CodecConfig:
    """
    Configuration for the Huffman codec and its file wrappers.

    The word widths are part of the wire format: a stream must be
    decompressed with the same widths it was compressed with.
    """
    header_word_bits: int = DEFAULT_HEADER_WORD_BITS
    payload_word_bits: int = DEFAULT_PAYLOAD_WORD_BITS
    read_chunk_size: int = 65_536
    write_chunk_size: int = 65_536
    io_buffer_size: int = DEFAULT_IO_BUFFER_SIZE

    def __post_init__(self) -> None:
        for name in ("header_word_bits", "payload_word_bits"):
            value = getattr(self, name)
            if value not in SUPPORTED_WORD_BITS:
                raise ValueError(
                    f"{name} must be one of {SUPPORTED_WORD_BITS}, got {value}"
                )
        for name in ("read_chunk_size", "write_chunk_size", "io_buffer_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
