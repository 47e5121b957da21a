from pathlib import Path

from archiver.codec import Status, compress, decompress
from archiver.config import CodecConfig


def compress_file(in_path: Path, out_path: Path, cfg: CodecConfig) -> Status:
    with open(in_path, "rb", buffering=cfg.io_buffer_size) as src, \
            open(out_path, "wb", buffering=cfg.io_buffer_size) as out:
        return compress(src, out, cfg)


def decompress_file(in_path: Path, out_path: Path, cfg: CodecConfig) -> Status:
    with open(in_path, "rb", buffering=cfg.io_buffer_size) as src, \
            open(out_path, "wb", buffering=cfg.io_buffer_size) as out:
        return decompress(src, out, cfg)


def run_file(mode: str, in_path: Path, out_path: Path, cfg: CodecConfig) -> Status:
    """
    Dispatch a single file through the codec based on `mode`.
    """
    mode = mode.lower()
    if mode == "compress":
        return compress_file(in_path, out_path, cfg)
    if mode == "decompress":
        return decompress_file(in_path, out_path, cfg)
    raise ValueError(f"Unsupported mode: {mode}")
