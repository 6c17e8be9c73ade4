# filename: huffman_report.py

from dataclasses import dataclass, field
from types import MappingProxyType

from huffman_core import BITS_PER_BYTE, HuffmanLogic


@dataclass(frozen=True)
class CompressionReport:
    """Huffman codes for a message plus its compressed vs. 8-bit size.

    Building one has no side effects; ``render()`` returns the text a caller
    may print.
    """

    codes: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))
    symbol_count: int = 0
    compressed_bits: int = 0

    @classmethod
    def from_message(cls, message, codes, logic=None):
        logic = logic or HuffmanLogic()
        return cls(
            codes=codes,
            symbol_count=len(message) if message else 0,
            compressed_bits=logic.compression_length(message, codes),
        )

    @property
    def uncompressed_bits(self):
        return self.symbol_count * BITS_PER_BYTE

    @property
    def saved_bits(self):
        return self.uncompressed_bits - self.compressed_bits

    @property
    def ratio(self):
        if not self.uncompressed_bits:
            return 0.0
        return self.compressed_bits / self.uncompressed_bits

    def display_codes(self):
        return [
            f" {chr(symbol)!r} --> {self.codes[symbol]}"
            for symbol in sorted(self.codes)
        ]

    def summary(self):
        return (
            f"Compressed message requires {self.compressed_bits} bits "
            f"versus {self.uncompressed_bits} bits for ASCII encoding."
        )

    def render(self):
        return "\n".join(self.display_codes() + [self.summary()])

    def to_dict(self):
        return {
            "codes": {chr(s): code for s, code in sorted(self.codes.items())},
            "symbol_count": self.symbol_count,
            "compressed_bits": self.compressed_bits,
            "uncompressed_bits": self.uncompressed_bits,
            "saved_bits": self.saved_bits,
            "ratio": round(self.ratio, 6),
        }
