"""A small 16-bit CPU that executes programs held in a Memory."""

import sys

from wordcpu.isa import WORD_MASK, Flag, OpCode


class UnknownOpcodeError(Exception):
    """Raised when the CPU fetches a byte that is not a known opcode."""

    def __init__(self, opcode, address):
        super().__init__(f"Unknown Opcode 0x{opcode:x} at address 0x{address:04x}")
        self.opcode = opcode
        self.address = address


_IMMEDIATE_TARGETS = {
    OpCode.LDI_A_IMMED: "ax",
    OpCode.LDI_B_IMMED: "bx",
    OpCode.LDI_C_IMMED: "cx",
    OpCode.LDI_D_IMMED: "dx",
}


class CPU:
    """Sixteen-bit register machine with a cycle budget.

    Halting writes a message to ``stream`` (standard output by default).
    """

    def __init__(self, memory, stream=None):
        self.memory = memory
        self.stream = stream
        self.reset()

    def reset(self):
        self.ax = self.bx = self.cx = self.dx = 0
        self.sp = self.bp = self.si = self.di = 0
        self.ip = 0x0000
        self.flags = 0
        self.cycles = 0
        self.halted = False

    def set_flag(self, flag):
        self.flags |= int(flag)

    def clear_flag(self, flag):
        self.flags &= ~int(flag) & WORD_MASK

    def is_flag_set(self, flag):
        return (self.flags & int(flag)) != 0

    def execute(self, cycles):
        """Run until the cycle budget is spent or the CPU halts."""
        self.cycles = cycles
        self.halted = False
        while self.cycles > 0:
            address = self.ip
            opcode = self.memory.read_byte(address)
            self.ip = (self.ip + 1) & WORD_MASK
            self.cycles -= 1
            try:
                op = OpCode(opcode)
            except ValueError:
                self.cycles = 0
                raise UnknownOpcodeError(opcode, address) from None
            self._step(op, address)

    def _operand(self):
        return self.memory.read_word(self.ip)

    def _advance(self, count=2):
        self.ip = (self.ip + count) & WORD_MASK

    def _step(self, op, address):
        if op in _IMMEDIATE_TARGETS:
            setattr(self, _IMMEDIATE_TARGETS[op], self._operand())
            self._advance()
            self.cycles -= 2
        elif op is OpCode.LDA_ABS:
            self.ax = self.memory.read_word(self._operand())
            self._advance()
            self.cycles -= 3
        elif op is OpCode.STA_ABS:
            self.memory.write_word(self._operand(), self.ax)
            self._advance()
            self.cycles -= 3
        elif op is OpCode.ADD_A_B:
            self.ax = (self.ax + self.bx) & WORD_MASK
            if self.ax == 0:
                self.set_flag(Flag.ZF)
            else:
                self.clear_flag(Flag.ZF)
            self.cycles -= 1
        elif op is OpCode.JMP_ABS:
            self.ip = self._operand()
            self.cycles -= 2
        elif op in (OpCode.JE_ABS, OpCode.JNE_ABS):
            target = self._operand()
            self.cycles -= 2
            if self.is_flag_set(Flag.ZF) == (op is OpCode.JE_ABS):
                self.ip = target
            else:
                self._advance()
        elif op is OpCode.HLT:
            stream = self.stream if self.stream is not None else sys.stdout
            print(f"CPU Halted at address 0x{address:04x}", file=stream)
            self.halted = True
            self.cycles = 0