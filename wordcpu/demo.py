"""Demonstration program exercising loads, arithmetic, flags and jumps."""

import argparse

from wordcpu.cpu import CPU
from wordcpu.isa import Flag, OpCode
from wordcpu.memory import Memory

DATA_ADDR_1 = 0x1000
DATA_ADDR_2 = 0x1002
JNE_SKIP_ADDR = 0x0020
JUMP_TO_ZERO_TEST = 0x0010
JUMP_TAKEN_ADDR = 0x0020

# Each entry: (start address, opcode, operand or None, listing remark).
_PROGRAM = [
    (0x0000, OpCode.LDI_A_IMMED, 0x000A, "LDI_A_IMMED 0x000A"),
    (None, OpCode.LDI_B_IMMED, 0x0005, "LDI_B_IMMED 0x0005"),
    (None, OpCode.ADD_A_B, None, "ADD_A_B (AX=0x000F, ZF clear)"),
    (None, OpCode.JNE_ABS, JNE_SKIP_ADDR,
     f"JNE_ABS 0x{JNE_SKIP_ADDR:04x} (ZF clear, SHOULD JUMP)"),
    (None, OpCode.LDI_A_IMMED, 0xDEAD, "LDI_A_IMMED 0xDEAD (SHOULD BE SKIPPED)"),
    (None, OpCode.JMP_ABS, JUMP_TO_ZERO_TEST,
     f"JMP_ABS 0x{JUMP_TO_ZERO_TEST:04x} (unconditional jump)"),
    (None, OpCode.LDI_A_IMMED, 0xBEEF, "LDI_A_IMMED 0xBEEF (SHOULD BE SKIPPED by JMP)"),
    (JUMP_TO_ZERO_TEST, OpCode.LDI_A_IMMED, 0x000F, "LDI_A_IMMED 0x000F"),
    (None, OpCode.LDI_B_IMMED, 0xFFF1, "LDI_B_IMMED 0xFFF1"),
    (None, OpCode.ADD_A_B, None, "ADD_A_B (AX=0x0000, ZF set)"),
    (None, OpCode.JE_ABS, JUMP_TAKEN_ADDR,
     f"JE_ABS 0x{JUMP_TAKEN_ADDR:04x} (ZF set, SHOULD JUMP)"),
    (None, OpCode.HLT, None, "HLT (SHOULD BE SKIPPED by JE)"),
    (JUMP_TAKEN_ADDR, OpCode.LDI_A_IMMED, 0xC0DE, "LDI_A_IMMED 0xC0DE (Jump Target)"),
    (None, OpCode.HLT, None, "HLT (Final Halt)"),
]


def format_cpu_state(cpu, title):
    """Render the register file as a multi-line report."""
    zf = "1" if cpu.is_flag_set(Flag.ZF) else "0"
    lines = [
        "",
        f"--- {title} ---",
        f"  AX: 0x{cpu.ax:04x}",
        f"  BX: 0x{cpu.bx:04x}",
        f"  CX: 0x{cpu.cx:04x}",
        f"  DX: 0x{cpu.dx:04x}",
        f"  IP: 0x{cpu.ip:04x}",
        f"  FLAGS: 0x{cpu.flags:04x} (ZF: {zf})",
        f"  Cycles remaining: {cpu.cycles}",
    ]
    return "\n".join(lines)


def load_demo_program(memory):
    """Write the demo program into memory and return its listing lines."""
    listing = []
    address = 0
    for start, opcode, operand, remark in _PROGRAM:
        if start is not None:
            address = start
        memory.write_byte(address, opcode)
        listing.append(f"  [0x{address:04x}] {remark}")
        address += 1
        if operand is not None:
            memory.write_word(address, operand)
            address += 2
    return listing


def _format_memory(memory):
    return "\n".join(
        f"  Memory at 0x{addr:04x}: 0x{memory.read_word(addr):04x}"
        for addr in (DATA_ADDR_1, DATA_ADDR_2)
    )


def run_demo():
    """Load and run the demo program, printing a report; return the CPU."""
    print("Starting 16-bit CPU emulator (Jump & Flag Test)...")

    memory = Memory()
    cpu = CPU(memory)
    cpu.reset()

    print(format_cpu_state(cpu, "CPU Initial State After Reset"))

    memory.write_word(DATA_ADDR_1, 0xAA55)
    memory.write_word(DATA_ADDR_2, 0xBB66)

    print("\n--- Memory Initial State ---")
    print(_format_memory(memory))

    print("\n--- Program Loading ---")
    for line in load_demo_program(memory):
        print(line)

    print("\n--- CPU Execution ---")
    cpu.execute(50)

    print(format_cpu_state(cpu, "Post-Execution CPU State"))

    print("\n--- Memory Post-Execution State ---")
    print(_format_memory(memory))
    return cpu


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the jump and flag demo program.")
    parser.parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())