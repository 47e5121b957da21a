from pathlib import Path
from typing import Optional


def validate_input_path(flag: str, path: str) -> Optional[str]:
    """Return an error message for a bad input path, or None if it is usable."""
    if not path:
        return f"Invalid value for --{flag}: can't be empty"
    if not Path(path).exists():
        return f"Invalid value for --{flag}: {path}: No such file"
    return None


def validate_output_path(flag: str, path: str) -> Optional[str]:
    if not path:
        return f"Invalid value for --{flag}: can't be empty"
    return None


def add_suffix_to_top_level(rel_path: Path, suffix: str) -> Path:
    """
    'docs/sub/a.txt' + '_compressed' -> 'docs_compressed/sub/a.txt'
    """
    if not rel_path.parts:
        return Path()
    head, *rest = rel_path.parts
    return Path(head + suffix, *rest)


def suffix_filename(path: Path, suffix: str) -> Path:
    """
    'a.txt' + '_compressed' -> 'a_compressed.txt', 'README' -> 'README_compressed'
    """
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")


def mirrored_output_path(rel_file: Path, out_root: Path, suffix: str) -> Path:
    """
    Place `rel_file` under `out_root`, tagging its top-level directory and
    its file name with `suffix`.
    """
    rel_dir = add_suffix_to_top_level(rel_file.parent, suffix)
    return out_root / rel_dir / suffix_filename(Path(rel_file.name), suffix).name
