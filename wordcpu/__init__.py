"""A tiny 16-bit CPU emulator with little-endian 64 KiB memory, a demo program and memory self-checks."""

__version__ = "0.1.0"
__all__ = ["cpu", "demo", "isa", "memory", "memtest"]