import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from archiver.codec import Status
from archiver.config import CodecConfig
from archiver.pipeline.runner import compress_file, decompress_file
from archiver.utils.file_utils import mirrored_output_path

COMPRESSED_DIR = "out_compressed"
DECOMPRESSED_DIR = "out_decompressed"
COMPRESSED_SUFFIX = "_compressed"
DECOMPRESSED_SUFFIX = "_decompressed"


@dataclass
class BatchResult:
    input_path: Path
    compressed_path: Path
    decompressed_path: Path
    compress_status: Status
    decompress_status: Optional[Status] = None

    @property
    def ok(self) -> bool:
        return self.compress_status == Status.OK and self.decompress_status == Status.OK


def compressed_path_for(rel_file: Path, output_root: Path) -> Path:
    return mirrored_output_path(rel_file, output_root / COMPRESSED_DIR, COMPRESSED_SUFFIX)


def decompressed_path_for(rel_file: Path, output_root: Path) -> Path:
    return mirrored_output_path(rel_file, output_root / DECOMPRESSED_DIR, DECOMPRESSED_SUFFIX)


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: Optional[CodecConfig] = None,
) -> List[BatchResult]:
    """
    Compress every file under `input_root`, then decompress each result.

    Outputs mirror the input tree under `output_root/out_compressed` and
    `output_root/out_decompressed`.
    """
    if cfg is None:
        cfg = CodecConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    results: List[BatchResult] = []
    for root, _, files in os.walk(input_root):
        root_path = Path(root)
        for filename in sorted(files):
            in_path = root_path / filename
            print("Processing:", in_path)
            results.append(process_file(in_path, in_path.relative_to(input_root), output_root, cfg))
    return results


def process_file(
    in_path: Path,
    rel_file: Path,
    output_root: Path,
    cfg: CodecConfig,
) -> BatchResult:
    compressed_path = compressed_path_for(rel_file, output_root)
    decompressed_path = decompressed_path_for(rel_file, output_root)
    compressed_path.parent.mkdir(parents=True, exist_ok=True)
    decompressed_path.parent.mkdir(parents=True, exist_ok=True)

    result = BatchResult(
        input_path=in_path,
        compressed_path=compressed_path,
        decompressed_path=decompressed_path,
        compress_status=compress_file(in_path, compressed_path, cfg),
    )
    if result.compress_status != Status.OK:
        print(f"Compression failed for {in_path}: {result.compress_status.name}")
        return result

    result.decompress_status = decompress_file(compressed_path, decompressed_path, cfg)
    if result.decompress_status != Status.OK:
        print(f"Decompression failed for {compressed_path}: {result.decompress_status.name}")
    return result
