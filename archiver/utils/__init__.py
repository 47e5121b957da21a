"""Utility helpers shared across the codec and its runners."""

from archiver.utils.bits_bytes_utils import bitstring_to_int, int_to_bitstring
from archiver.utils.debug import dbg, set_debug
from archiver.utils.file_utils import (
    add_suffix_to_top_level,
    suffix_filename,
    validate_input_path,
    validate_output_path,
)

__all__ = [
    "bitstring_to_int",
    "int_to_bitstring",
    "dbg",
    "set_debug",
    "add_suffix_to_top_level",
    "suffix_filename",
    "validate_input_path",
    "validate_output_path",
]
