"""
Code table: trie leaves -> bitstring codes, and its header serialization.

Header layout (size_t = SIZE_T from bits_bytes_utils):

    entry_count : size_t
    entry_count times:
        byte_value : 1 byte
        code_len   : size_t
        code_bits  : code_len bits, lowest bit first, padded to one header word
"""

from typing import BinaryIO, Dict, List, Tuple

from archiver.codec.bitio import BitReader, BitWriter
from archiver.codec.errors import MalformedHeaderError
from archiver.codec.frequency import ALPHABET_SIZE
from archiver.codec.trie import NO_NODE, Trie
from archiver.utils.bits_bytes_utils import (
    bitstring_to_int,
    int_to_bitstring,
    read_byte,
    read_size,
    write_byte,
    write_size,
)

# 256 leaves give a tree at most 255 edges deep.
MAX_CODE_LENGTH = ALPHABET_SIZE - 1

# byte value -> code as a bitstring ('0' = left, '1' = right)
Codes = Dict[int, str]


def calculate_codes(trie: Trie) -> Codes:
    """
    Walk the trie depth-first and collect the path to every leaf.

    A single-leaf trie gives its byte the empty code.
    """
    codes: Codes = {}
    if trie.is_empty:
        return codes

    stack: List[Tuple[int, str]] = [(trie.root, "")]
    while stack:
        node, path = stack.pop()
        if trie.is_leaf(node):
            codes[trie.symbol[node]] = path
            continue
        # right pushed first so the left subtree is visited first
        if trie.right[node] != NO_NODE:
            stack.append((trie.right[node], path + "1"))
        if trie.left[node] != NO_NODE:
            stack.append((trie.left[node], path + "0"))
    return codes


def write_coding_table(codes: Codes, out: BinaryIO, word_bits: int = 8) -> None:
    write_size(out, len(codes))
    for byte in sorted(codes):
        code = codes[byte]
        write_byte(out, byte)
        write_size(out, len(code))
        writer = BitWriter(out, word_bits)
        writer.write_bits(bitstring_to_int(code), len(code))
        writer.flush()


def read_coding_table(src: BinaryIO, word_bits: int = 8) -> Codes:
    """
    Parse a header written by `write_coding_table`.

    Raises MalformedHeaderError on an impossible entry count or code length,
    a repeated byte value, or a header cut short.
    """
    try:
        count = read_size(src)
        if count > ALPHABET_SIZE:
            raise MalformedHeaderError(f"header declares {count} entries")

        codes: Codes = {}
        for _ in range(count):
            byte = read_byte(src)
            code_len = read_size(src)
            if code_len > MAX_CODE_LENGTH:
                raise MalformedHeaderError(f"code length {code_len} for byte {byte}")
            if byte in codes:
                raise MalformedHeaderError(f"byte {byte} listed twice")
            reader = BitReader(src, word_bits)
            codes[byte] = int_to_bitstring(reader.read_bits(code_len), code_len)
    except EOFError as exc:
        raise MalformedHeaderError(f"header truncated: {exc}") from exc
    return codes
