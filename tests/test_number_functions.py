#!/usr/bin/env python3
"""
nativekit number and date helper tests
"""

import math
import time
import unittest
import sys
from pathlib import Path

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from stdlib import date_functions
from stdlib import number_functions as nf

class TestNumberHelpers(unittest.TestCase):

    def test_random_range(self):
        for _ in range(50):
            value = nf.random(5, 10)
            self.assertGreaterEqual(value, 5)
            self.assertLess(value, 10)
        self.assertLess(nf.random(), 1)

    def test_parity(self):
        self.assertTrue(nf.even(4))
        self.assertFalse(nf.even(3))
        self.assertTrue(nf.odd(3))
        with self.assertRaises(TypeError):
            nf.even('4')

    def test_chr(self):
        self.assertEqual(nf.chr_of(97), 'a')

    def test_gcd_and_lcm(self):
        self.assertEqual(nf.gcd(12, 18), 6)
        self.assertEqual(nf.gcd(12, 18, 8), 2)
        self.assertEqual(nf.gcd(-4, 6), 2)
        self.assertEqual(nf.gcd(0, 5), 5)
        self.assertEqual(nf.lcm(4, 6), 12)
        self.assertEqual(nf.lcm(2, 3, 4), 12)
        with self.assertRaises(TypeError):
            nf.gcd()

    def test_ceil_floor_abs(self):
        self.assertEqual(nf.ceil(1.2), 2)
        self.assertEqual(nf.floor(-1.2), -2)
        self.assertEqual(nf.abs_of(-3), 3)
        with self.assertRaises(TypeError):
            nf.abs_of(True)

    def test_to_fixed(self):
        self.assertEqual(nf.to_fixed(3.14159, 2), '3.14')
        self.assertEqual(nf.to_fixed(1.005, 2), '1.00')
        self.assertEqual(nf.to_fixed(2.5), '3')
        self.assertEqual(nf.to_fixed(1.5, 2), '1.50')
        self.assertEqual(nf.to_fixed(math.nan, 2), 'NaN')

    def test_round_to(self):
        self.assertEqual(nf.round_to(2.5), 3)
        self.assertEqual(nf.round_to(15, -1), 20)
        self.assertEqual(nf.round_to(1234, -2), 1200)
        self.assertEqual(nf.round_to(1.142, 2), 1.14)
        self.assertEqual(nf.round_to(-2.5), -2)

    def test_radix(self):
        self.assertEqual(nf.radix(5, 2), '101')
        self.assertEqual(nf.radix(5, 2, 8), '00000101')
        self.assertEqual(nf.radix(255, 16, 4, ' '), '  ff')
        self.assertEqual(nf.radix(-5), '-5')
        self.assertEqual(nf.radix(2.5, 2), '10.1')
        with self.assertRaises(ValueError):
            nf.radix(5, 1)

    def test_base_shortcuts(self):
        self.assertEqual(nf.bin(10), '1010')
        self.assertEqual(nf.oct(8), '10')
        self.assertEqual(nf.dec(42, 4), '0042')
        self.assertEqual(nf.hexl(255), 'ff')
        self.assertEqual(nf.hex(255), 'FF')

    def test_abbr(self):
        self.assertEqual(nf.abbr(999), '999')
        self.assertEqual(nf.abbr(1500, 1), '1.5k')
        self.assertEqual(nf.abbr(2500000), '3M')
        self.assertEqual(nf.abbr(2048, 0, True), '2k')

class TestDateHelpers(unittest.TestCase):

    def test_now(self):
        self.assertLess(abs(date_functions.now() - time.time() * 1000), 5000)

    def test_parse(self):
        self.assertEqual(date_functions.parse('1970-01-01'), 0)
        self.assertEqual(date_functions.parse('2000-01-01T00:00:00Z'), 946684800000)
        self.assertEqual(date_functions.parse('2011-06-15T21:40:05+06:00'), 1308152405000)
        self.assertEqual(date_functions.parse('2011-06-15T09:40:05-06:00'), 1308152405000)
        self.assertEqual(date_functions.parse('2000-01-01T00:00:00.250Z'), 946684800250)
        self.assertEqual(date_functions.parse('2000-01-01T24:00'), 946771200000)

    def test_parse_rejects(self):
        for text in ('garbage', '2011-06-15T21:40:05+24:00', '2011-02-30',
                     '2011-13-01', '2000-01-01T24:01', '0000-01-01', None):
            self.assertTrue(math.isnan(date_functions.parse(text)), text)

if __name__ == '__main__':
    unittest.main(verbosity=2)
