"""
Huffman prefix tree stored as an index arena.

Node `i` is described by `left[i]`, `right[i]` and `symbol[i]`. Leaves carry
a byte value in `symbol` and have no children; internal nodes carry
NO_SYMBOL. A missing child or an absent root is NO_NODE.
"""

import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from archiver.codec.errors import MalformedHeaderError

NO_NODE = -1
NO_SYMBOL = -1


@dataclass
class Trie:
    left: List[int] = field(default_factory=list)
    right: List[int] = field(default_factory=list)
    symbol: List[int] = field(default_factory=list)
    root: int = NO_NODE

    def __len__(self) -> int:
        return len(self.symbol)

    @property
    def is_empty(self) -> bool:
        return self.root == NO_NODE

    def is_leaf(self, node: int) -> bool:
        return self.symbol[node] != NO_SYMBOL

    def add_node(self, symbol: int = NO_SYMBOL, left: int = NO_NODE, right: int = NO_NODE) -> int:
        self.left.append(left)
        self.right.append(right)
        self.symbol.append(symbol)
        return len(self.symbol) - 1

    def child(self, node: int, bit: int) -> int:
        return self.right[node] if bit else self.left[node]

    def leaf_count(self) -> int:
        return sum(1 for s in self.symbol if s != NO_SYMBOL)


def build_trie_by_freq(freq: Sequence[int]) -> Trie:
    """
    Build an optimal prefix tree from a byte frequency table.

    Ties between equal frequencies are broken by insertion order: leaves in
    ascending byte order, merged nodes in the order they were created.
    The first node popped becomes the left child.
    """
    trie = Trie()
    heap = []
    order = 0
    for byte, count in enumerate(freq):
        if count == 0:
            continue
        heap.append((count, order, trie.add_node(symbol=byte)))
        order += 1

    if not heap:
        return trie

    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = trie.add_node(left=left, right=right)
        heapq.heappush(heap, (left_freq + right_freq, order, merged))
        order += 1

    trie.root = heap[0][2]
    return trie


def build_trie_by_codes(codes: Dict[int, str]) -> Trie:
    """
    Rebuild a prefix tree from a byte -> bitstring code table.

    Raises MalformedHeaderError if the codes are not prefix-free. Paths that
    no code reaches are left as NO_NODE.
    """
    trie = Trie()
    if not codes:
        return trie

    if len(codes) == 1:
        ((byte, code),) = codes.items()
        if not code:
            trie.root = trie.add_node(symbol=byte)
            return trie

    trie.root = trie.add_node()
    for byte in sorted(codes):
        code = codes[byte]
        if not code:
            raise MalformedHeaderError(f"empty code for byte {byte} among {len(codes)} codes")
        node = trie.root
        for bit in code:
            if trie.is_leaf(node):
                raise MalformedHeaderError(f"code for byte {byte} extends another code")
            nxt = trie.child(node, bit == "1")
            if nxt == NO_NODE:
                nxt = trie.add_node()
                if bit == "1":
                    trie.right[node] = nxt
                else:
                    trie.left[node] = nxt
            node = nxt
        if trie.is_leaf(node) or trie.left[node] != NO_NODE or trie.right[node] != NO_NODE:
            raise MalformedHeaderError(f"code for byte {byte} is a prefix of another code")
        trie.symbol[node] = byte
    return trie
