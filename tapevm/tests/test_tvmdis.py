#!/usr/bin/env python3

import unittest

import tvmdis

class TestTvmDis(unittest.TestCase):
    def test_io(self):
        self.assertEqual(tvmdis.disassemble([3, 0, 4, 0, 99]),
                         ['0000 IN [0]', '0002 OUT [0]', '0004 HALT'])

    def test_modes(self):
        self.assertEqual(tvmdis.disassemble([1002, 4, 3, 4, 33]),
                         ['0000 MUL [4] 3 [4]', '0004 DATA 33'])

    def test_destination_is_positional(self):
        self.assertEqual(tvmdis.disassemble([11101, 1, 2, 3]), ['0000 ADD 1 2 [3]'])
        self.assertEqual(tvmdis.disassemble([104, 5, 99]), ['0000 OUT [5]', '0002 HALT'])

    def test_jumps(self):
        self.assertEqual(tvmdis.disassemble([1105, 1, 7, 6, 0, 3]),
                         ['0000 JT 1 7', '0003 JF [0] [3]'])

    def test_unchecked_destination_mode(self):
        self.assertEqual(tvmdis.disassemble([204, 0, 99]), ['0000 OUT [0]', '0002 HALT'])
        self.assertEqual(tvmdis.disassemble([20001, 0, 0, 0, 99]),
                         ['0000 ADD [0] [0] [0]', '0004 HALT'])
        self.assertEqual(tvmdis.disassemble([203, 4, 99]), ['0000 IN [4]', '0002 HALT'])

    def test_truncated(self):
        self.assertEqual(tvmdis.disassemble([1, 0]), ['0000 DATA 1', '0001 DATA 0'])

    def test_invalid_mode(self):
        self.assertEqual(tvmdis.disassemble([201, 0, 0, 0]),
                         ['0000 DATA 201', '0001 DATA 0', '0002 DATA 0', '0003 DATA 0'])
