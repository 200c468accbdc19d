import pytest

from wordcpu.memory import Memory


@pytest.fixture
def mem():
    return Memory()


def test_size_is_64k(mem):
    assert Memory.MAX_MEM_SIZE == 1024 * 64
    assert len(mem) == Memory.MAX_MEM_SIZE


def test_fresh_memory_is_zeroed(mem):
    assert mem.read_byte(0x0000) == 0
    assert mem.read_word(0x1234) == 0


def test_byte_round_trip(mem):
    mem.write_byte(0x1000, 0xA5)
    assert mem.read_byte(0x1000) == 0xA5


def test_word_round_trip(mem):
    mem.write_word(0x2000, 0x1234)
    assert mem.read_word(0x2000) == 0x1234


def test_word_is_little_endian(mem):
    mem.write_word(0x2000, 0x1234)
    assert mem.read_byte(0x2000) == 0x34
    assert mem.read_byte(0x2001) == 0x12


def test_word_from_bytes(mem):
    mem.write_byte(0x10, 0xEF)
    mem.write_byte(0x11, 0xBE)
    assert mem.read_word(0x10) == 0xBEEF


def test_last_byte_is_accessible(mem):
    mem.write_byte(0xFFFF, 0x7E)
    assert mem.read_byte(0xFFFF) == 0x7E


def test_word_at_last_address_is_out_of_range(mem):
    mem.write_byte(0xFFFF, 0x7E)
    assert mem.read_word(0xFFFF) == 0
    mem.write_word(0xFFFF, 0x1234)
    assert mem.read_byte(0xFFFF) == 0x7E
    assert mem.read_byte(0x0000) == 0


def test_byte_value_is_truncated(mem):
    mem.write_byte(0x20, 0x1FF)
    assert mem.read_byte(0x20) == 0xFF


def test_reset_clears_everything(mem):
    mem.write_byte(0x0000, 0xFF)
    mem.write_word(0x8000, 0xAA55)
    mem.reset()
    assert mem.read_byte(0x0000) == 0
    assert mem.read_word(0x8000) == 0