import sys
from io import BytesIO
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from archiver.codec.bitio import BitReader, BitStreamExhausted, BitWriter


def test_writer_packs_low_bit_first_and_pads_on_flush():
    out = BytesIO()
    writer = BitWriter(out, word_bits=8)
    for bit in (1, 0, 1, 1):
        writer.write(bit)
    assert out.getvalue() == b""

    writer.flush()
    assert out.getvalue() == bytes([0b1101])


def test_writer_flushes_full_words_without_explicit_flush():
    out = BytesIO()
    writer = BitWriter(out, word_bits=8)
    for _ in range(9):
        writer.write(1)
    assert out.getvalue() == b"\xff"

    writer.flush()
    assert out.getvalue() == b"\xff\x01"
    assert writer.bits_written == 9
    assert writer.words_flushed == 2


def test_flush_on_empty_buffer_writes_nothing():
    out = BytesIO()
    writer = BitWriter(out, word_bits=64)
    writer.flush()
    writer.write_bits(0, 0)
    writer.flush()
    assert out.getvalue() == b""


def test_wide_word_uses_host_byte_order():
    out = BytesIO()
    writer = BitWriter(out, word_bits=64)
    writer.write_bits(0x1234, 16)
    writer.flush()
    assert out.getvalue() == (0x1234).to_bytes(8, sys.byteorder)


def test_write_bits_matches_single_bit_writes():
    value, length = 0b1011001110001, 13
    bulk, single = BytesIO(), BytesIO()

    w1 = BitWriter(bulk, word_bits=16)
    w1.write_bits(value, length)
    w1.write_bits(value, length)
    w1.flush()

    w2 = BitWriter(single, word_bits=16)
    for _ in range(2):
        for i in range(length):
            w2.write((value >> i) & 1)
    w2.flush()

    assert bulk.getvalue() == single.getvalue()


def test_reader_mirrors_writer():
    bits = [1, 1, 0, 1, 0, 0, 0, 1, 1, 0, 1]
    out = BytesIO()
    writer = BitWriter(out, word_bits=32)
    for bit in bits:
        writer.write(bit)
    writer.flush()
    assert len(out.getvalue()) == 4

    reader = BitReader(BytesIO(out.getvalue()), word_bits=32)
    assert [reader.read() for _ in bits] == bits


def test_reader_reads_words_lazily():
    src = BytesIO(b"\x01\x02")
    reader = BitReader(src, word_bits=8)
    assert src.tell() == 0
    assert reader.read() == 1
    assert src.tell() == 1
    assert reader.read_bits(7) == 0
    assert src.tell() == 1
    assert reader.read_bits(2) == 0b10
    assert src.tell() == 2


def test_reader_fails_on_partial_word():
    reader = BitReader(BytesIO(b"\x00\x00\x00"), word_bits=32)
    with pytest.raises(BitStreamExhausted):
        reader.read()


def test_reader_fails_past_end():
    reader = BitReader(BytesIO(b"\x80"), word_bits=8)
    assert reader.read_bits(8) == 0x80
    with pytest.raises(EOFError):
        reader.read()


@pytest.mark.parametrize("word_bits", [0, 7, 12, -8])
def test_rejects_word_sizes_not_in_whole_bytes(word_bits):
    with pytest.raises(ValueError):
        BitWriter(BytesIO(), word_bits=word_bits)
    with pytest.raises(ValueError):
        BitReader(BytesIO(), word_bits=word_bits)
