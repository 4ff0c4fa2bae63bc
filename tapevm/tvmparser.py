#!/usr/bin/env python3

import pyparsing as pp

cell = pp.pyparsing_common.signed_integer.copy()
cell.set_name('integer')

comma = pp.Suppress(',')

tape = pp.Group(pp.DelimitedList(cell), True)
tape.set_name('tape')

inputs = pp.Group(pp.ZeroOrMore(cell + pp.Opt(comma)), True)
inputs.set_name('inputs')

def parse_tape(text: str) -> list[int]:
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise pp.ParseException(text, 0, 'no program found')
    cells, = tape.parse_string(lines[0], parse_all=True)
    return list(cells)

def parse_tape_file(filename: str) -> list[int]:
    with open(filename, 'r') as f:
        return parse_tape(f.read())

def parse_inputs(text: str) -> list[int]:
    values, = inputs.parse_string(text, parse_all=True)
    return list(values)
