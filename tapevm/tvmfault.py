#!/usr/bin/env python3

from dataclasses import dataclass
from enum import Enum, unique

@unique
class FaultKind(Enum):
    INVALID_ADDRESS = 'invalid address'
    UNKNOWN_OPCODE = 'unknown opcode'
    INVALID_MODE = 'invalid parameter mode'
    INPUT_EXHAUSTED = 'input exhausted'

@dataclass(frozen=True)
class Fault:
    kind: FaultKind
    pc: int
    values: tuple[int, ...]

    def __str__(self) -> str:
        values = ', '.join(map(str, self.values))
        return f'{self.pc}: error: {self.kind.value} ({values})'

class VmFault(RuntimeError):
    """Raised inside a cycle; the execution loop turns it into a Fault."""

    def __init__(self, kind: FaultKind, *values: int):
        super().__init__(kind.value, *values)
        self.kind = kind
        self.values = values

    def at(self, pc: int) -> Fault:
        return Fault(self.kind, pc, self.values)
