#!/usr/bin/env python3

from typing import Sequence

from tvmdecode import Mode, decode
from tvminterpreter import INSTRUCTIONS, Opcode

# Operands that are always used as tape addresses.
_positional = {
    Opcode.ADD: {3},
    Opcode.MUL: {3},
    Opcode.IN: {1},
    Opcode.OUT: {1},
    Opcode.LT: {3},
    Opcode.EQ: {3},
}

def _operand(op: Opcode, n: int, digit: int, arg: int) -> str:
    if n in _positional.get(op, ()) or digit == Mode.POSITION:
        return f'[{arg}]'
    return str(arg)

def disassemble_at(cells: Sequence[int], addr: int) -> tuple[str, int]:
    word = cells[addr]
    opcode, modes = decode(word)
    inst = INSTRUCTIONS.get(opcode)
    if inst is None or addr + inst.nargs >= len(cells):
        return f'{addr:04d} DATA {word}', 1
    checked = [n for n in range(1, inst.nargs + 1) if n not in _positional.get(inst.op, ())]
    if any(modes.mode(n) not in (Mode.POSITION, Mode.IMMEDIATE) for n in checked):
        return f'{addr:04d} DATA {word}', 1
    operands = [_operand(inst.op, n, modes.mode(n), cells[addr + n])
                for n in range(1, inst.nargs + 1)]
    return ' '.join([f'{addr:04d}', inst.op.name, *operands]), inst.nargs + 1

def disassemble(cells: Sequence[int]) -> list[str]:
    lines = []
    addr = 0
    while addr < len(cells):
        line, size = disassemble_at(cells, addr)
        lines.append(line)
        addr += size
    return lines
