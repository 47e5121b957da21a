from collections import Counter
from typing import BinaryIO, Tuple

ALPHABET_SIZE = 256

# byte value -> occurrence count
FrequencyTable = Tuple[int, ...]


def count_frequencies(stream: BinaryIO, chunk_size: int = 65_536) -> Tuple[FrequencyTable, int]:
    """
    Count byte occurrences over the rest of `stream`.

    Returns (frequency table with ALPHABET_SIZE entries, total byte count).
    The stream is consumed to its end.
    """
    counts = [0] * ALPHABET_SIZE
    total = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        total += len(chunk)
        for byte, freq in Counter(chunk).items():
            counts[byte] += freq
    return tuple(counts), total
