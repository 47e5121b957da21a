"""
Public entry points of the Huffman codec.

`compress` / `decompress` work on open binary streams and report a
`Status`; `compress_bytes` / `decompress_bytes` wrap them for in-memory data
and raise the matching `CodecError` instead.
"""

from dataclasses import dataclass
from io import BytesIO, TextIOBase
from typing import BinaryIO, Optional

from archiver.codec.code_table import Codes, calculate_codes, read_coding_table, write_coding_table
from archiver.codec.decoder import decode_input
from archiver.codec.encoder import encode_input
from archiver.codec.errors import CodecError, MalformedDataError, Status, WrongArgumentsError
from archiver.codec.frequency import count_frequencies
from archiver.codec.trie import build_trie_by_codes, build_trie_by_freq
from archiver.config import CodecConfig
from archiver.utils.bits_bytes_utils import read_size
from archiver.utils.debug import dbg


@dataclass
class HeaderInfo:
    """
    Parsed front matter of a compressed stream.

    - codes: byte value -> bitstring code, as stored in the header
    - element_count: number of bytes the payload decodes to
    """
    codes: Codes
    element_count: int

    @property
    def entry_count(self) -> int:
        return len(self.codes)


def _usable(stream, check: str) -> bool:
    if stream is None or getattr(stream, "closed", False):
        return False
    # text-mode handles read and write str, the codec needs bytes
    if isinstance(stream, TextIOBase):
        return False
    method = getattr(stream, check, None)
    return method is None or bool(method())


def _check_streams(src, out, need_seek: bool) -> None:
    if not _usable(src, "readable"):
        raise WrongArgumentsError("input stream is missing, closed, text-mode or not readable")
    if not _usable(out, "writable"):
        raise WrongArgumentsError("output stream is missing, closed, text-mode or not writable")
    if need_seek and not _usable(src, "seekable"):
        raise WrongArgumentsError("compression needs a seekable input stream")


def _compress(src: BinaryIO, out: BinaryIO, cfg: CodecConfig) -> None:
    _check_streams(src, out, need_seek=True)

    start = src.tell()
    freq, size = count_frequencies(src, cfg.read_chunk_size)
    trie = build_trie_by_freq(freq)
    codes = calculate_codes(trie)
    dbg("compress", f"{size} bytes, {len(codes)} distinct, {len(trie)} trie nodes")

    write_coding_table(codes, out, cfg.header_word_bits)

    src.seek(start)
    writer = encode_input(
        src,
        out,
        size,
        codes,
        word_bits=cfg.payload_word_bits,
        chunk_size=cfg.read_chunk_size,
    )
    dbg("compress", f"payload {writer.bits_written} bits in {writer.words_flushed} words")


def _decompress(src: BinaryIO, out: BinaryIO, cfg: CodecConfig) -> int:
    _check_streams(src, out, need_seek=False)

    codes = read_coding_table(src, cfg.header_word_bits)
    trie = build_trie_by_codes(codes)
    dbg("decompress", f"header with {len(codes)} entries")
    return decode_input(
        src,
        out,
        trie,
        word_bits=cfg.payload_word_bits,
        chunk_size=cfg.write_chunk_size,
    )


def compress(src: BinaryIO, out: BinaryIO, cfg: Optional[CodecConfig] = None) -> Status:
    """
    Compress the rest of `src` into `out`.

    `src` is read twice (frequency pass, then encoding pass) and must be
    seekable; it is rewound to the position it had on entry.
    """
    try:
        _compress(src, out, cfg or CodecConfig())
    except CodecError as err:
        dbg("compress", f"failed: {err.status.name}: {err}")
        return err.status
    return Status.OK


def decompress(src: BinaryIO, out: BinaryIO, cfg: Optional[CodecConfig] = None) -> Status:
    """
    Decompress a stream produced by `compress` into `out`.

    Returns MALFORMED_HEADER or MALFORMED_DATA if the stream is not exactly
    one valid compressed stream.
    """
    try:
        size = _decompress(src, out, cfg or CodecConfig())
    except CodecError as err:
        dbg("decompress", f"failed: {err.status.name}: {err}")
        return err.status
    dbg("decompress", f"decoded {size} bytes")
    return Status.OK


def compress_bytes(data: bytes, cfg: Optional[CodecConfig] = None) -> bytes:
    out = BytesIO()
    _compress(BytesIO(data), out, cfg or CodecConfig())
    return out.getvalue()


def decompress_bytes(data: bytes, cfg: Optional[CodecConfig] = None) -> bytes:
    out = BytesIO()
    _decompress(BytesIO(data), out, cfg or CodecConfig())
    return out.getvalue()


def inspect_header(src: BinaryIO, cfg: Optional[CodecConfig] = None) -> HeaderInfo:
    """
    Read the code table and element count without decoding the payload.
    """
    cfg = cfg or CodecConfig()
    codes = read_coding_table(src, cfg.header_word_bits)
    try:
        element_count = read_size(src)
    except EOFError as exc:
        raise MalformedDataError(f"missing element count: {exc}") from exc
    return HeaderInfo(codes=codes, element_count=element_count)
