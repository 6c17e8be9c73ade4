# filename: huffman_service.py

from huffman_core import HuffmanLogic
from huffman_report import CompressionReport


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def encode(self, message):
        if not message:
            return CompressionReport()
        freqs = self.logic.count_frequency(message)
        forest = self.logic.build_forest(freqs)
        tree = self.logic.build_tree(forest)
        codes = self.logic.generate_codes(tree)
        return CompressionReport.from_message(message, codes, self.logic)
