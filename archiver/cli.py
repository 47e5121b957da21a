import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from archiver.codec import Status
from archiver.config import DEFAULT_HEADER_WORD_BITS, DEFAULT_PAYLOAD_WORD_BITS, CodecConfig
from archiver.pipeline.runner import run_file
from archiver.utils.debug import set_debug
from archiver.utils.file_utils import validate_input_path, validate_output_path

USAGE_EXAMPLE = """\
Usage example:
    archiver --compress --input File.txt --output CompressedFile
    archiver --decompress --input CompressedFile --output DecompressedFile.txt
"""


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="archiver",
        description="Huffman archiving utility.",
        epilog=USAGE_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--compress", action="store_true", help="Compress --input into --output.")
    parser.add_argument("--decompress", action="store_true", help="Decompress --input into --output.")
    parser.add_argument("--input", default="", help="Path to the input file.")
    parser.add_argument("--output", default="", help="Path to the output file.")
    parser.add_argument(
        "--payload-word-bits",
        type=int,
        default=DEFAULT_PAYLOAD_WORD_BITS,
        help=f"Bit-buffer width for the payload (default: {DEFAULT_PAYLOAD_WORD_BITS}).",
    )
    parser.add_argument(
        "--header-word-bits",
        type=int,
        default=DEFAULT_HEADER_WORD_BITS,
        help=f"Bit-buffer width for header codes (default: {DEFAULT_HEADER_WORD_BITS}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Print codec diagnostics to stderr.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        set_debug(True)

    for message in (
        validate_input_path("input", args.input),
        validate_output_path("output", args.output),
    ):
        if message:
            print(message)
            return 1

    if args.compress == args.decompress:
        print("Invalid options. Either --compress or --decompress should be used")
        return 1

    try:
        cfg = CodecConfig(
            header_word_bits=args.header_word_bits,
            payload_word_bits=args.payload_word_bits,
        )
    except ValueError as err:
        print(f"Invalid options. {err}")
        return 1

    mode = "compress" if args.compress else "decompress"
    status = run_file(mode, Path(args.input), Path(args.output), cfg)
    if status != Status.OK:
        print(f"command has failed. error: {int(status)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
