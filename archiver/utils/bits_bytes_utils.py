import struct
from typing import BinaryIO

# size_t on the wire: unsigned 64-bit in host byte order.
SIZE_T = struct.Struct("=Q")
SIZE_T_MAX = (1 << (8 * SIZE_T.size)) - 1


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """
    Read exactly `size` bytes from `stream`.

    Raises EOFError if the stream ends first.
    """
    chunks = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            raise EOFError(f"expected {size} bytes, got {size - remaining}")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def write_size(stream: BinaryIO, value: int) -> None:
    if value < 0 or value > SIZE_T_MAX:
        raise ValueError(f"size {value} does not fit in {SIZE_T.size} bytes")
    stream.write(SIZE_T.pack(value))


def read_size(stream: BinaryIO) -> int:
    (value,) = SIZE_T.unpack(read_exact(stream, SIZE_T.size))
    return value


def write_byte(stream: BinaryIO, value: int) -> None:
    stream.write(bytes((value,)))


def read_byte(stream: BinaryIO) -> int:
    return read_exact(stream, 1)[0]


def bitstring_to_int(bits: str) -> int:
    """Bitstring -> int with bits[0] as the lowest bit ('011' -> 0b110)."""
    if not bits:
        return 0
    return int(bits[::-1], 2)


def int_to_bitstring(value: int, length: int) -> str:
    """Reverse of `bitstring_to_int` for a code of `length` bits."""
    if length == 0:
        return ""
    return f"{value:0{length}b}"[::-1]
