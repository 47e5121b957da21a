"""
Word-buffered bit writer/reader on top of a byte stream.

Bits are packed low-order first into a word of `word_bits` bits. A full
word is written in host byte order; a partial word is only written on an
explicit `flush()`, zero-padded in its unused high bits. The reader loads
one word at a time and never looks past the word it is consuming, so the
caller decides how many bits are meaningful.
"""

import sys
from typing import BinaryIO

from archiver.utils.bits_bytes_utils import read_exact


class BitStreamExhausted(EOFError):
    """The byte source ended before a whole word could be read."""


def _check_word_bits(word_bits: int) -> None:
    if word_bits <= 0 or word_bits % 8 != 0:
        raise ValueError(f"word_bits must be a positive multiple of 8, got {word_bits}")


class BitWriter:
    def __init__(self, out: BinaryIO, word_bits: int = 8):
        _check_word_bits(word_bits)
        self.out = out
        self.word_bits = word_bits
        self.word_bytes = word_bits // 8
        self.buffer = 0
        self.buffer_pos = 0
        self.bits_written = 0
        self.words_flushed = 0

    def write(self, bit: int) -> None:
        if bit:
            self.buffer |= 1 << self.buffer_pos
        self.buffer_pos += 1
        self.bits_written += 1
        if self.buffer_pos == self.word_bits:
            self.flush()

    def write_bits(self, value: int, length: int) -> None:
        """Write the lowest `length` bits of `value`, lowest bit first."""
        self.bits_written += length
        while length:
            take = min(length, self.word_bits - self.buffer_pos)
            self.buffer |= (value & ((1 << take) - 1)) << self.buffer_pos
            self.buffer_pos += take
            value >>= take
            length -= take
            if self.buffer_pos == self.word_bits:
                self.flush()

    def flush(self) -> None:
        if self.buffer_pos > 0:
            self.out.write(self.buffer.to_bytes(self.word_bytes, sys.byteorder))
            self.words_flushed += 1
            self.buffer = 0
            self.buffer_pos = 0


class BitReader:
    def __init__(self, src: BinaryIO, word_bits: int = 8):
        _check_word_bits(word_bits)
        self.src = src
        self.word_bits = word_bits
        self.word_bytes = word_bits // 8
        self.buffer = 0
        self.buffer_pos = 0

    def _load(self) -> None:
        try:
            word = read_exact(self.src, self.word_bytes)
        except EOFError as exc:
            raise BitStreamExhausted(str(exc)) from exc
        self.buffer = int.from_bytes(word, sys.byteorder)

    def read(self) -> int:
        if self.buffer_pos == 0:
            self._load()
        bit = (self.buffer >> self.buffer_pos) & 1
        self.buffer_pos += 1
        if self.buffer_pos == self.word_bits:
            self.buffer_pos = 0
        return bit

    def read_bits(self, length: int) -> int:
        """Read `length` bits, the first one read becoming the lowest bit."""
        value = 0
        for shift in range(length):
            value |= self.read() << shift
        return value
