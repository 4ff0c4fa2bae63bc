#!/usr/bin/env python3

from enum import IntEnum, unique

from tvmfault import FaultKind, VmFault

@unique
class Mode(IntEnum):
    POSITION = 0        # tape[arg]
    IMMEDIATE = 1       # arg

def as_mode(digit: int) -> Mode:
    try:
        return Mode(digit)
    except ValueError:
        raise VmFault(FaultKind.INVALID_MODE, digit) from None

class ParamModes:
    def __init__(self, word: int):
        self.modes = self.param_modes(word)

    @staticmethod
    def param_modes(word: int) -> tuple[int, int, int]:
        params = _trunc_div(word, 100)
        modes = []
        for _ in range(3):
            modes.append(_trunc_mod(params, 10))
            params = _trunc_div(params, 10)
        first, second, third = modes
        return first, second, third

    def mode(self, n: int) -> int:
        if n not in (1, 2, 3):
            raise ValueError(f'unsupported parameter number: {n}')
        return self.modes[n - 1]

    def __str__(self) -> str:
        return 'Modes({} {} {})'.format(*self.modes)

# Negative words keep their sign in every digit, so they never decode to a
# valid opcode or mode.
def _trunc_mod(value: int, base: int) -> int:
    return value % base if value >= 0 else -(-value % base)

def _trunc_div(value: int, base: int) -> int:
    return value // base if value >= 0 else -(-value // base)

def decode(word: int) -> tuple[int, ParamModes]:
    return _trunc_mod(word, 100), ParamModes(word)
