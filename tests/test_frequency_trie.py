import random
import sys
from io import BytesIO
from pathlib import Path

import pytest
from dahuffman import HuffmanCodec

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from archiver.codec.code_table import calculate_codes
from archiver.codec.errors import MalformedHeaderError
from archiver.codec.frequency import ALPHABET_SIZE, count_frequencies
from archiver.codec.trie import NO_NODE, build_trie_by_codes, build_trie_by_freq


def _freq_of(data: bytes):
    freq, _ = count_frequencies(BytesIO(data))
    return freq


def test_count_frequencies_counts_every_byte():
    data = b"abracadabra\x00\xff\x00"
    freq, total = count_frequencies(BytesIO(data), chunk_size=4)

    assert len(freq) == ALPHABET_SIZE
    assert total == len(data)
    assert freq[ord("a")] == 5
    assert freq[ord("b")] == 2
    assert freq[0] == 2
    assert freq[255] == 1
    assert sum(freq) == total


def test_count_frequencies_consumes_stream_from_current_position():
    src = BytesIO(b"skipme" + b"zz")
    src.seek(6)
    freq, total = count_frequencies(src)

    assert total == 2
    assert freq[ord("z")] == 2
    assert src.read() == b""


def test_empty_frequencies_give_absent_trie():
    trie = build_trie_by_freq([0] * ALPHABET_SIZE)
    assert trie.is_empty
    assert calculate_codes(trie) == {}


def test_single_symbol_gives_single_leaf_with_empty_code():
    trie = build_trie_by_freq(_freq_of(b"a" * 23))
    assert len(trie) == 1
    assert trie.is_leaf(trie.root)
    assert calculate_codes(trie) == {ord("a"): ""}


def test_first_popped_node_becomes_left_child():
    # 'b' is rarer, so it is popped first and gets code '0'
    codes = calculate_codes(build_trie_by_freq(_freq_of(b"aab")))
    assert codes == {ord("a"): "1", ord("b"): "0"}


def test_trie_shape_is_deterministic_for_ties():
    freq = _freq_of(bytes(range(16)) * 3)
    first = calculate_codes(build_trie_by_freq(freq))
    second = calculate_codes(build_trie_by_freq(freq))
    assert first == second
    assert all(len(code) == 4 for code in first.values())


def test_internal_nodes_have_two_children():
    trie = build_trie_by_freq(_freq_of(b"the quick brown fox jumps over the lazy dog"))
    for node in range(len(trie)):
        if trie.is_leaf(node):
            assert trie.left[node] == NO_NODE and trie.right[node] == NO_NODE
        else:
            assert trie.left[node] != NO_NODE and trie.right[node] != NO_NODE


def test_codes_are_prefix_free():
    rng = random.Random(7)
    data = bytes(rng.choice(b"abcdefghij\x00\x01") for _ in range(5000))
    codes = calculate_codes(build_trie_by_freq(_freq_of(data)))
    values = sorted(codes.values())
    for shorter, longer in zip(values, values[1:]):
        assert not longer.startswith(shorter)


def test_deepest_code_over_skewed_frequencies():
    # Fibonacci-like weights force a fully unbalanced tree.
    freq = [0] * ALPHABET_SIZE
    a, b = 1, 1
    for byte in range(20):
        freq[byte] = a
        a, b = b, a + b
    codes = calculate_codes(build_trie_by_freq(freq))
    assert max(len(c) for c in codes.values()) == 19


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_weighted_length_matches_reference_huffman(seed):
    rng = random.Random(seed)
    symbols = rng.sample(range(ALPHABET_SIZE), 40)
    weights = [rng.randint(1, 1000) for _ in symbols]
    data = bytes(rng.choices(symbols, weights=weights, k=20_000))
    freq = _freq_of(data)
    present = {byte: count for byte, count in enumerate(freq) if count}

    codes = calculate_codes(build_trie_by_freq(freq))
    ours = sum(present[byte] * len(code) for byte, code in codes.items())

    # Reuse a real symbol as EOF so dahuffman does not add an extra leaf.
    reference = HuffmanCodec.from_frequencies(present, eof=next(iter(present)))
    theirs = sum(present[s] * bitsize for s, (bitsize, _) in reference.get_code_table().items())

    assert ours == theirs


def test_rebuild_from_codes_reproduces_tree_paths():
    codes = calculate_codes(build_trie_by_freq(_freq_of(b"mississippi river")))
    rebuilt = build_trie_by_codes(codes)
    assert calculate_codes(rebuilt) == codes
    assert rebuilt.leaf_count() == len(codes)


def test_rebuild_single_empty_code():
    trie = build_trie_by_codes({42: ""})
    assert trie.is_leaf(trie.root)
    assert trie.symbol[trie.root] == 42


def test_rebuild_allows_incomplete_tree():
    trie = build_trie_by_codes({7: "0"})
    assert not trie.is_leaf(trie.root)
    assert trie.right[trie.root] == NO_NODE


@pytest.mark.parametrize(
    "codes",
    [
        {1: "0", 2: "01"},
        {1: "01", 2: "0"},
        {1: "10", 2: "10"},
        {1: "", 2: "1"},
    ],
)
def test_rebuild_rejects_codes_that_are_not_prefix_free(codes):
    with pytest.raises(MalformedHeaderError):
        build_trie_by_codes(codes)
