from archiver.pipeline.runner import compress_file, decompress_file, run_file


def run_batch_on_folder(*args, **kwargs):
    # Lazy import so the CLI does not load the batch walker it never uses.
    from archiver.pipeline.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "compress_file",
    "decompress_file",
    "run_file",
    "run_batch_on_folder",
]
