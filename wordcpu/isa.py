"""Instruction set definitions: opcodes, flags and the machine's word sizes."""

from enum import IntEnum, IntFlag

BYTE_MASK = 0xFF
WORD_MASK = 0xFFFF


class OpCode(IntEnum):
    """One-byte operation codes understood by the CPU."""

    # Data movement
    LDI_A_IMMED = 0x01
    LDI_B_IMMED = 0x02
    LDI_C_IMMED = 0x03
    LDI_D_IMMED = 0x04

    # Memory access
    LDA_ABS = 0x05
    STA_ABS = 0x06

    # Arithmetic
    ADD_A_B = 0x10

    # Control flow / system
    JMP_ABS = 0x20
    JE_ABS = 0x21
    JNE_ABS = 0x22

    HLT = 0xFF


class Flag(IntFlag):
    """Bits of the FLAGS register."""

    ZF = 1 << 6