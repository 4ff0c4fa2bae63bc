#!/usr/bin/env python3

import logging

from typing import Iterable, Iterator

from tvmfault import FaultKind, VmFault

log = logging.getLogger(__name__)

class Tape:
    """Fixed-length integer memory; every access is bounds checked."""

    def __init__(self, cells: Iterable[int]):
        self.cells = list(cells)

    def check(self, addr: int):
        if not 0 <= addr < len(self.cells):
            raise VmFault(FaultKind.INVALID_ADDRESS, addr)

    def read(self, addr: int) -> int:
        self.check(addr)
        value = self.cells[addr]
        log.debug('Reading [%d] = %d', addr, value)
        return value

    def write(self, addr: int, value: int):
        self.check(addr)
        log.debug('Writing [%d] = %d', addr, value)
        self.cells[addr] = value

    def snapshot(self) -> list[int]:
        return self.cells[:]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __eq__(self, other) -> bool:
        if isinstance(other, Tape):
            return self.cells == other.cells
        if isinstance(other, list):
            return self.cells == other
        return NotImplemented

    def __repr__(self) -> str:
        return f'Tape({self.cells!r})'
