"""Flat 64 KiB little-endian memory."""

from wordcpu.isa import BYTE_MASK, WORD_MASK


class Memory:
    """Byte-addressable memory with 16-bit addresses and little-endian words.

    Addresses and values are truncated to their machine width. Accesses that
    fall outside memory read as zero and writes to them are ignored.
    """

    MAX_MEM_SIZE = 1024 * 64

    def __init__(self):
        self._data = bytearray(self.MAX_MEM_SIZE)

    def __len__(self):
        return len(self._data)

    def read_byte(self, address):
        address &= WORD_MASK
        if address < self.MAX_MEM_SIZE:
            return self._data[address]
        return 0

    def write_byte(self, address, value):
        address &= WORD_MASK
        if address < self.MAX_MEM_SIZE:
            self._data[address] = value & BYTE_MASK

    def read_word(self, address):
        address &= WORD_MASK
        if address + 1 < self.MAX_MEM_SIZE:
            return (self._data[address + 1] << 8) | self._data[address]
        return 0

    def write_word(self, address, value):
        address &= WORD_MASK
        if address + 1 < self.MAX_MEM_SIZE:
            value &= WORD_MASK
            self._data[address] = value & BYTE_MASK
            self._data[address + 1] = (value >> 8) & BYTE_MASK

    def reset(self):
        """Zero every byte."""
        self._data[:] = bytes(self.MAX_MEM_SIZE)