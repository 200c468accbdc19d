"""Self-check of the Memory class, reporting each check as passed or failed."""

import argparse
from dataclasses import dataclass, field


@dataclass
class CheckResult:
    """Outcome of one memory check with its report lines."""

    name: str
    passed: bool
    lines: list = field(default_factory=list)
    pass_text: str = "PASSED!"

    def render(self):
        verdict = self.pass_text if self.passed else "FAILED!"
        return "\n".join(["", f"--- Test: {self.name} ---", *self.lines, f"  {verdict}"])


def run_memory_checks(memory):
    """Run the byte, word, endianness and reset checks against ``memory``."""
    results = []

    byte_address, byte_value = 0x1000, 0xA5
    memory.write_byte(byte_address, byte_value)
    read_byte = memory.read_byte(byte_address)
    results.append(CheckResult(
        "Byte Read/Write",
        read_byte == byte_value,
        [
            f"  Wrote 0x{byte_value:02x} to 0x{byte_address:04x}",
            f"  Read  0x{read_byte:02x} from 0x{byte_address:04x}",
        ],
    ))

    word_address, word_value = 0x2000, 0x1234
    memory.write_word(word_address, word_value)
    read_word = memory.read_word(word_address)
    results.append(CheckResult(
        "Word Read/Write",
        read_word == word_value,
        [
            f"  Wrote 0x{word_value:04x} to 0x{word_address:04x}",
            f"  Read  0x{read_word:04x} from 0x{word_address:04x}",
        ],
    ))

    lsb_expected, msb_expected = 0x34, 0x12
    lsb_read = memory.read_byte(word_address)
    msb_read = memory.read_byte(word_address + 1)
    results.append(CheckResult(
        "Word Endianness",
        lsb_read == lsb_expected and msb_read == msb_expected,
        [
            f"  0x{word_value:04x} (0x1234)",
            f"    Byte at 0x{word_address:04x}: 0x{lsb_read:02x} (Expected LSB: 0x{lsb_expected:x})",
            f"    Byte at 0x{word_address + 1:04x}: 0x{msb_read:02x} (Expected MSB: 0x{msb_expected:x})",
        ],
        pass_text="PASSED (Little-Endian)!",
    ))

    memory.write_byte(0x0000, 0xFF)
    before = memory.read_byte(0x0000)
    memory.reset()
    after = memory.read_byte(0x0000)
    results.append(CheckResult(
        "Memory Reset",
        after == 0x00,
        [
            f"  Byte at 0x0000 before reset: 0x{before:x}",
            f"  Byte at 0x0000 after reset:  0x{after:x}",
        ],
    ))

    return results


def main(argv=None):
    from wordcpu.memory import Memory

    parser = argparse.ArgumentParser(description="Check memory reads, writes and reset.")
    parser.parse_args(argv)
    print("Starting 16-bit CPU emulator...")
    for result in run_memory_checks(Memory()):
        print(result.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())