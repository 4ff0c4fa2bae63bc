#!/usr/bin/env python3

import tvmdis
import tvminterpreter
import tvmparser

import logging
import optparse
import pyparsing
import sys

from typing import Optional

def parse_args(argv: list[str]) -> tuple[optparse.Values, list[str]]:
    usage = 'usage: %prog [options] filename'
    p = optparse.OptionParser(usage=usage)
    p.add_option('--input',
                 metavar='\'N [N...]\'',
                 action='store',
                 type='string',
                 default='',
                 help='input sequence consumed by the program'
                 )
    p.add_option('--dis',
                 action='store_true',
                 default=False,
                 help='disassemble program'
                 )
    p.add_option('--trace',
                 action='store_true',
                 default=False,
                 help='display reads, writes and instructions step by step'
                 )
    p.add_option('--max-steps',
                 metavar='N',
                 action='store',
                 type='int',
                 dest='max_steps',
                 help='stop after N instructions'
                 )
    p.add_option('--dump',
                 action='store_true',
                 default=False,
                 help='print the final tape after the run'
                 )
    return p.parse_args(argv)

def run(filename: str, inputs: str, max_steps: Optional[int], dump: bool) -> Optional[int]:
    tape = tvmparser.parse_tape_file(filename)
    vm = tvminterpreter.Vm(tape, tvmparser.parse_inputs(inputs))
    outputs, final, status, fault = vm.run(max_steps)
    for value in outputs:
        print(value)
    if dump:
        print(','.join(map(str, final)))
    if status == tvminterpreter.Status.FAULTED:
        print(f'{filename}:{fault}', file=sys.stderr)
        return 1
    if status == tvminterpreter.Status.RUNNING:
        print(f'{filename}: warning: stopped after {vm.steps} steps at ip={vm.pc}', file=sys.stderr)
        return 1

def dis(filename: str) -> Optional[int]:
    tape = tvmparser.parse_tape_file(filename)
    for line in tvmdis.disassemble(tape):
        print(line)

def main(argv: list[str]) -> Optional[int]:
    options, args = parse_args(argv)
    try:
        filename = args[1]
    except IndexError:
        print('error: no file provided', file=sys.stderr)
        return 1
    if options.trace:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format='%(message)s')
    try:
        if options.dis:
            return dis(filename)
        return run(filename, options.input, options.max_steps, options.dump)
    except OSError as os_err:
        print(f'error: {os_err.filename}: {os_err.strerror}', file=sys.stderr)
        return 1
    except pyparsing.exceptions.ParseBaseException as pe:
        print(pe.explain(depth=0), file=sys.stderr)
        return 1

def cli():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    cli()
