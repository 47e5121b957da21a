from typing import BinaryIO

from archiver.codec.bitio import BitReader, BitStreamExhausted
from archiver.codec.errors import MalformedDataError
from archiver.codec.trie import NO_NODE, Trie
from archiver.utils.bits_bytes_utils import read_size


def decode_input(
    src: BinaryIO,
    out: BinaryIO,
    trie: Trie,
    word_bits: int = 64,
    chunk_size: int = 65_536,
) -> int:
    """
    Decode the payload that follows the header and write the bytes to `out`.

    Reads the element count, walks the trie once per element and then
    requires the source to be exhausted. Returns the number of decoded
    bytes. Every inconsistency raises MalformedDataError; bytes decoded
    before the failure may already have been written.
    With a single-symbol table nothing bounds the element count, so a
    corrupted count is decoded as that many bytes.
    """
    try:
        size = read_size(src)
    except EOFError as exc:
        raise MalformedDataError(f"missing element count: {exc}") from exc

    if size and trie.is_empty:
        raise MalformedDataError(f"empty code table but {size} elements declared")

    left, right, symbol = trie.left, trie.right, trie.symbol
    root = trie.root
    reader = BitReader(src, word_bits)
    block = bytearray()
    try:
        if size and trie.is_leaf(root):
            # single-symbol table: every element is that byte, no bits stored
            byte = bytes((symbol[root],))
            remaining = size
            while remaining:
                n = min(remaining, chunk_size)
                out.write(byte * n)
                remaining -= n
        else:
            for _ in range(size):
                node = root
                while symbol[node] < 0:
                    node = right[node] if reader.read() else left[node]
                    if node == NO_NODE:
                        raise MalformedDataError("bit sequence matches no code")
                block.append(symbol[node])
                if len(block) >= chunk_size:
                    out.write(block)
                    block.clear()
    except BitStreamExhausted as exc:
        raise MalformedDataError(f"payload truncated: {exc}") from exc
    finally:
        if block:
            out.write(block)

    if src.read(1):
        raise MalformedDataError("trailing bytes after payload")
    return size
