# wordcpu

`wordcpu` is a small emulator for a 16-bit CPU. It has four general registers
(`ax`, `bx`, `cx`, `dx`), an instruction pointer `ip`, a `flags` word holding a
zero flag, and 64 KiB of memory that stores words little-endian.

## Modules

- `wordcpu.isa` – the `OpCode` and `Flag` enumerations.
- `wordcpu.memory` – `Memory`, with `read_byte`, `write_byte`, `read_word`,
  `write_word` and `reset`.
- `wordcpu.cpu` – `CPU` and `UnknownOpcodeError`.
- `wordcpu.demo` – the demonstration program (`format_cpu_state`,
  `load_demo_program`, `run_demo`, `main`).
- `wordcpu.memtest` – memory self-checks (`run_memory_checks`, `main`).

## Instruction set

| Opcode | Name          | Operand  | Cycles | Effect                                  |
|--------|---------------|----------|--------|-----------------------------------------|
| `0x01` | `LDI_A_IMMED` | word     | 3      | `AX = imm`                              |
| `0x02` | `LDI_B_IMMED` | word     | 3      | `BX = imm`                              |
| `0x03` | `LDI_C_IMMED` | word     | 3      | `CX = imm`                              |
| `0x04` | `LDI_D_IMMED` | word     | 3      | `DX = imm`                              |
| `0x05` | `LDA_ABS`     | address  | 4      | `AX = mem[addr]`                        |
| `0x06` | `STA_ABS`     | address  | 4      | `mem[addr] = AX`                        |
| `0x10` | `ADD_A_B`     |          | 2      | `AX = AX + BX` (16-bit), sets/clears ZF |
| `0x20` | `JMP_ABS`     | address  | 3      | jump                                    |
| `0x21` | `JE_ABS`      | address  | 3      | jump if ZF set                          |
| `0x22` | `JNE_ABS`     | address  | 3      | jump if ZF clear                        |
| `0xFF` | `HLT`         |          | 1      | stop                                    |

`CPU.execute(cycles)` runs until the cycle budget is spent or `HLT` is
reached. `HLT` prints `CPU Halted at address 0x....` to the stream given to
`CPU(memory, stream=...)` (standard output by default), sets `cpu.halted` and
zeroes the remaining cycles. An unknown opcode zeroes the remaining cycles and
raises `UnknownOpcodeError`, which carries `opcode` and `address`.

## Using the library

```python
from wordcpu.cpu import CPU
from wordcpu.isa import OpCode, Flag
from wordcpu.memory import Memory

memory = Memory()
memory.write_byte(0x0000, OpCode.LDI_A_IMMED)
memory.write_word(0x0001, 0x0001)
memory.write_byte(0x0003, OpCode.LDI_B_IMMED)
memory.write_word(0x0004, 0xFFFF)
memory.write_byte(0x0006, OpCode.ADD_A_B)
memory.write_byte(0x0007, OpCode.HLT)

cpu = CPU(memory)
cpu.execute(50)                                 # prints "CPU Halted at address 0x0007"
print(hex(cpu.ax), cpu.is_flag_set(Flag.ZF))    # 0x0 True
```

Addresses are truncated to 16 bits and values to their byte or word width. A
word access at the last address, `0xFFFF`, has no room for its second byte:
it reads as zero and a write there is ignored. `Memory.reset()` clears all
memory.

## Commands

Run the built-in demonstration program, which exercises loads, addition and
the jump instructions, and prints the CPU state before and after:

```
wordcpu-demo
```

Run the memory self-checks (byte and word access, byte order and reset):

```
wordcpu-memtest
```

## Limitations

There is no assembler and no loader for program files: programs are placed in
memory with `write_byte` and `write_word`. The `sp`, `bp`, `si` and `di`
registers exist but no instruction uses them.

## Tests

```
pip install -e .[test]
pytest
```