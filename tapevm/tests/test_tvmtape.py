#!/usr/bin/env python3

import unittest

import tvmfault
import tvmtape

class TestTvmTape(unittest.TestCase):
    def _assert_invalid(self, addr: int, fn):
        with self.assertRaises(tvmfault.VmFault) as cm:
            fn()
        self.assertEqual(cm.exception.kind, tvmfault.FaultKind.INVALID_ADDRESS)
        self.assertEqual(cm.exception.values, (addr,))

    def test_read_write(self):
        tape = tvmtape.Tape([1, 2, 3])
        self.assertEqual(tape.read(2), 3)
        tape.write(0, -7)
        self.assertEqual(tape.read(0), -7)
        self.assertEqual(tape, [-7, 2, 3])
        self.assertEqual(len(tape), 3)

    def test_out_of_range(self):
        tape = tvmtape.Tape([1, 2, 3])
        self._assert_invalid(3, lambda: tape.read(3))
        self._assert_invalid(-1, lambda: tape.read(-1))
        self._assert_invalid(10, lambda: tape.write(10, 0))
        self._assert_invalid(-2, lambda: tape.write(-2, 0))
        self.assertEqual(tape, [1, 2, 3])

    def test_no_unchecked_indexing(self):
        tape = tvmtape.Tape([1, 2, 3])
        with self.assertRaises(TypeError):
            tape[-1]
        self._assert_invalid(-1, lambda: tape.read(-1))

    def test_private_copy(self):
        cells = [1, 2, 3]
        tape = tvmtape.Tape(cells)
        tape.write(0, 9)
        self.assertEqual(cells, [1, 2, 3])
        snapshot = tape.snapshot()
        snapshot[1] = 0
        self.assertEqual(tape.read(1), 2)

    def test_empty(self):
        tape = tvmtape.Tape([])
        self._assert_invalid(0, lambda: tape.read(0))
