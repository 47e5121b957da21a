from typing import BinaryIO, Dict, Tuple

from archiver.codec.bitio import BitWriter
from archiver.codec.code_table import Codes
from archiver.codec.errors import WrongArgumentsError
from archiver.utils.bits_bytes_utils import bitstring_to_int, write_size


def _packed_codes(codes: Codes) -> Dict[int, Tuple[int, int]]:
    return {byte: (bitstring_to_int(code), len(code)) for byte, code in codes.items()}


def encode_input(
    src: BinaryIO,
    out: BinaryIO,
    size: int,
    codes: Codes,
    word_bits: int = 64,
    chunk_size: int = 65_536,
) -> BitWriter:
    """
    Write the element count followed by the code of every byte in `src`.

    Returns the (flushed) writer so callers can inspect bit/word counters.
    With a single-entry table every code is empty and only the count is
    meaningful.
    """
    write_size(out, size)
    packed = _packed_codes(codes)
    writer = BitWriter(out, word_bits)
    seen = 0
    while True:
        chunk = src.read(chunk_size)
        if not chunk:
            break
        seen += len(chunk)
        for byte in chunk:
            try:
                value, length = packed[byte]
            except KeyError:
                raise WrongArgumentsError(f"byte {byte} has no code; input changed between passes") from None
            writer.write_bits(value, length)
    writer.flush()
    if seen != size:
        raise WrongArgumentsError(f"input changed between passes: counted {size} bytes, encoded {seen}")
    return writer
