#!/usr/bin/env python3

import logging
import operator

from enum import Enum, IntEnum, unique
from typing import Callable, Iterable, NamedTuple, Optional

from tvmdecode import Mode, ParamModes, as_mode, decode
from tvmfault import Fault, FaultKind, VmFault
from tvmtape import Tape

log = logging.getLogger(__name__)

@unique
class Opcode(IntEnum):
    ADD = 1             # tape[c] <- a + b
    MUL = 2             # tape[c] <- a * b
    IN = 3              # tape[a] <- next input
    OUT = 4             # output tape[a]
    JT = 5              # if a != 0 goto b
    JF = 6              # if a == 0 goto b
    LT = 7              # tape[c] <- a < b
    EQ = 8              # tape[c] <- a == b
    HALT = 99

Inst = NamedTuple('Inst', [('op', Opcode), ('nargs', int)])

INSTRUCTIONS: dict[int, Inst] = {
    Opcode.ADD: Inst(Opcode.ADD, 3),
    Opcode.MUL: Inst(Opcode.MUL, 3),
    Opcode.IN: Inst(Opcode.IN, 1),
    Opcode.OUT: Inst(Opcode.OUT, 1),
    Opcode.JT: Inst(Opcode.JT, 2),
    Opcode.JF: Inst(Opcode.JF, 2),
    Opcode.LT: Inst(Opcode.LT, 3),
    Opcode.EQ: Inst(Opcode.EQ, 3),
    Opcode.HALT: Inst(Opcode.HALT, 0),
}

def length(op: Opcode) -> int:
    return INSTRUCTIONS[op].nargs + 1

class Status(Enum):
    RUNNING = 'running'
    HALTED = 'halted'
    FAULTED = 'faulted'

class RunResult(NamedTuple):
    outputs: list[int]
    tape: list[int]
    status: Status
    fault: Optional[Fault]

class Vm:
    """
    Executes a tape program against a fixed input sequence.

    The VM owns a private copy of the tape. Faults raised while executing an
    instruction stop the machine and are kept in `fault`; they never escape
    `step` or `run`, so outputs produced before the fault stay available.
    """

    def __init__(self, tape: Iterable[int], inputs: Iterable[int] = ()):
        self.tape = Tape(tape)
        self.inputs = list(inputs)
        self.pc = 0
        self.input_pos = 0
        self.outputs: list[int] = []
        self.status = Status.RUNNING
        self.fault: Optional[Fault] = None
        self.steps = 0
        self.code: dict[int, Callable[[ParamModes], None]] = {
            Opcode.ADD: self.add,
            Opcode.MUL: self.mul,
            Opcode.IN: self.input,
            Opcode.OUT: self.output,
            Opcode.JT: self.jt,
            Opcode.JF: self.jf,
            Opcode.LT: self.lt,
            Opcode.EQ: self.eq,
            Opcode.HALT: self.halt,
        }

    def value(self, offset: int, digit: int) -> int:
        arg = self.tape.read(self.pc + offset)
        mode = as_mode(digit)
        if mode == Mode.IMMEDIATE:
            return arg
        return self.tape.read(arg)

    def address(self, offset: int) -> int:
        return self.tape.read(self.pc + offset)

    def advance(self, op: Opcode):
        self.pc += length(op)

    def goto(self, dest: int):
        log.debug('Goto %d', dest)
        if dest < 0:
            raise VmFault(FaultKind.INVALID_ADDRESS, dest)
        self.pc = dest

    def _store(self, op: Opcode, modes: ParamModes, fn: Callable[[int, int], int]):
        a = self.value(1, modes.mode(1))
        b = self.value(2, modes.mode(2))
        dest = self.address(3)
        res = int(fn(a, b))
        log.debug('%s [%d] = %d (%d, %d)', op.name, dest, res, a, b)
        self.tape.write(dest, res)
        self.advance(op)

    def add(self, modes: ParamModes):
        self._store(Opcode.ADD, modes, operator.add)

    def mul(self, modes: ParamModes):
        self._store(Opcode.MUL, modes, operator.mul)

    def lt(self, modes: ParamModes):
        self._store(Opcode.LT, modes, operator.lt)

    def eq(self, modes: ParamModes):
        self._store(Opcode.EQ, modes, operator.eq)

    def input(self, _: ParamModes):
        dest = self.address(1)
        if self.input_pos >= len(self.inputs):
            raise VmFault(FaultKind.INPUT_EXHAUSTED, self.input_pos)
        value = self.inputs[self.input_pos]
        self.tape.write(dest, value)
        self.input_pos += 1
        log.debug('IN [%d] input:%d', dest, value)
        self.advance(Opcode.IN)

    # The source is always dereferenced, whatever its mode digit says.
    def output(self, _: ParamModes):
        src = self.address(1)
        value = self.tape.read(src)
        self.outputs.append(value)
        log.debug('OUT [%d] = %d', src, value)
        self.advance(Opcode.OUT)

    def _jump(self, op: Opcode, modes: ParamModes, taken: Callable[[int], bool]):
        cond = self.value(1, modes.mode(1))
        dest = self.value(2, modes.mode(2))
        jump = taken(cond)
        log.debug('%s %d -> %d: %s', op.name, cond, dest, jump)
        if jump:
            self.goto(dest)
        else:
            self.advance(op)

    def jt(self, modes: ParamModes):
        self._jump(Opcode.JT, modes, lambda cond: cond != 0)

    def jf(self, modes: ParamModes):
        self._jump(Opcode.JF, modes, lambda cond: cond == 0)

    def halt(self, _: ParamModes):
        log.debug('HALT')
        self.status = Status.HALTED

    def step(self) -> Status:
        if self.status != Status.RUNNING:
            return self.status
        self.steps += 1
        try:
            opcode, modes = decode(self.tape.read(self.pc))
            try:
                handler = self.code[opcode]
            except KeyError:
                raise VmFault(FaultKind.UNKNOWN_OPCODE, opcode) from None
            log.debug('Executing: %d ip=%d %s', opcode, self.pc, modes)
            handler(modes)
        except VmFault as e:
            self.fault = e.at(self.pc)
            self.status = Status.FAULTED
            log.debug('Fault at ip=%d: %s', self.pc, self.fault)
        return self.status

    def run(self, max_steps: Optional[int] = None) -> RunResult:
        log.debug('start vm=%s', self)
        n = 0
        while self.status == Status.RUNNING:
            if max_steps is not None and n >= max_steps:
                log.debug('step budget of %d exhausted at ip=%d', max_steps, self.pc)
                break
            self.step()
            n += 1
        log.debug('end vm=%s', self)
        return self.result()

    def result(self) -> RunResult:
        return RunResult(self.outputs[:], self.tape.snapshot(), self.status, self.fault)

    def __str__(self) -> str:
        inputs = ' '.join(f'[{v}]' if i == self.input_pos else str(v)
                          for i, v in enumerate(self.inputs))
        outputs = ' '.join(map(str, self.outputs))
        program = ' '.join(map(str, self.tape))
        return f'VM(ip={self.pc} input={inputs} output={outputs} program={program})'
