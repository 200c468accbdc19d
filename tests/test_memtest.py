from wordcpu.memory import Memory
from wordcpu.memtest import main, run_memory_checks


class DeafMemory:
    """Memory stand-in that ignores every write."""

    def read_byte(self, address):
        return 0

    def write_byte(self, address, value):
        pass

    def read_word(self, address):
        return 0

    def write_word(self, address, value):
        pass

    def reset(self):
        pass


def test_all_checks_pass_on_memory():
    results = run_memory_checks(Memory())
    assert [r.name for r in results] == [
        "Byte Read/Write",
        "Word Read/Write",
        "Word Endianness",
        "Memory Reset",
    ]
    assert all(r.passed for r in results)


def test_checks_leave_memory_reset():
    mem = Memory()
    run_memory_checks(mem)
    assert mem.read_word(0x2000) == 0
    assert mem.read_byte(0x1000) == 0


def test_failures_detected():
    results = run_memory_checks(DeafMemory())
    passed = {r.name: r.passed for r in results}
    assert passed == {
        "Byte Read/Write": False,
        "Word Read/Write": False,
        "Word Endianness": False,
        "Memory Reset": True,
    }


def test_render_texts():
    results = run_memory_checks(Memory())
    endianness = results[2].render()
    assert "--- Test: Word Endianness ---" in endianness
    assert endianness.endswith("  PASSED (Little-Endian)!")
    assert "  Wrote 0xa5 to 0x1000" in results[0].render()


def test_render_failure():
    results = run_memory_checks(DeafMemory())
    assert results[0].render().endswith("  FAILED!")


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Starting 16-bit CPU emulator...")
    assert out.count("PASSED!") == 3
    assert "PASSED (Little-Endian)!" in out
    assert "FAILED!" not in out