# filename: huffman_core.py

import heapq
from itertools import count
from types import MappingProxyType

ALPHABET_SIZE = 256
BITS_PER_BYTE = 8
LEFT = "0"
RIGHT = "1"
EMPTY = ""
# a lone leaf root still needs one bit per occurrence
SINGLE_SYMBOL_CODE = "0"


class HuffmanError(Exception):
    pass


class EmptyInputError(HuffmanError):
    """No symbol with a non-zero frequency was left to build a tree from."""


class UnderflowError(HuffmanError, IndexError):
    """Removal or peek on an empty MinHeap."""


class SymbolRangeError(HuffmanError, ValueError):
    pass


class MinHeap:
    """Binary min-heap ordered by ``key(item)``.

    Items with equal keys come out in insertion order, so trees built from
    the same frequencies always get the same shape.
    """

    def __init__(self, key=None):
        self._key = key if key is not None else (lambda item: item)
        self._entries = []
        self._sequence = count()

    def insert(self, item):
        heapq.heappush(self._entries, (self._key(item), next(self._sequence), item))

    def remove_min(self):
        if not self._entries:
            raise UnderflowError("remove_min() from an empty heap")
        return heapq.heappop(self._entries)[2]

    def peek_min(self):
        if not self._entries:
            raise UnderflowError("peek_min() on an empty heap")
        return self._entries[0][2]

    def size(self):
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)


class HuffmanNode:
    def __init__(self, symbol, freq, left=None, right=None):
        # symbol is None for internal nodes
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode(symbol={self.symbol!r}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq})"


def to_symbol(item):
    """Map a character (or an int from a bytes object) onto the alphabet."""
    symbol = item if isinstance(item, int) else ord(item)
    if not 0 <= symbol < ALPHABET_SIZE:
        raise SymbolRangeError(
            f"symbol {item!r} is outside the {ALPHABET_SIZE}-value alphabet"
        )
    return symbol


class HuffmanLogic:
    def count_frequency(self, message):
        # None and empty input both give an all-zero table
        freqs = [0] * ALPHABET_SIZE
        if message:
            for item in message:
                freqs[to_symbol(item)] += 1
        return freqs

    def build_forest(self, freqs):
        forest = MinHeap(key=lambda node: node.freq)
        for symbol, freq in enumerate(freqs):
            if freq > 0:
                forest.insert(HuffmanNode(symbol, freq))
        return forest

    def build_tree(self, forest):
        if not forest:
            raise EmptyInputError("cannot build a Huffman tree from an empty forest")

        # Iteratively merge the two lightest trees
        while forest.size() > 1:
            left = forest.remove_min()
            right = forest.remove_min()
            forest.insert(HuffmanNode(None, left.freq + right.freq, left, right))

        return forest.remove_min()

    def generate_codes(self, root):
        """Return a read-only ``{symbol: code}`` mapping for the tree at ``root``."""
        codes = {}
        if root is None:
            return MappingProxyType(codes)
        if root.is_leaf():
            codes[root.symbol] = SINGLE_SYMBOL_CODE
        else:
            self._collect_codes(root, EMPTY, codes)
        return MappingProxyType(codes)

    def _collect_codes(self, node, current_code, codes):
        if node.is_leaf():
            codes[node.symbol] = current_code
            return
        self._collect_codes(node.left, current_code + LEFT, codes)
        self._collect_codes(node.right, current_code + RIGHT, codes)

    def compression_length(self, message, codes):
        if not message:
            return 0
        return sum(len(codes[to_symbol(item)]) for item in message)
