#!/usr/bin/env python3
"""
nativekit array helper tests
"""

import math
import re
import unittest
import sys
from pathlib import Path

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from stdlib import array_functions as af
from stdlib.values import strict_equal, to_number, truthy

class TestValues(unittest.TestCase):

    def test_strict_equal(self):
        self.assertTrue(strict_equal(1, 1.0))
        self.assertTrue(strict_equal('a', 'a'))
        self.assertTrue(strict_equal(None, None))
        self.assertFalse(strict_equal(1, True))
        self.assertFalse(strict_equal(1, '1'))
        self.assertFalse(strict_equal(math.nan, math.nan))
        self.assertFalse(strict_equal([1], [1]))
        items = [1]
        self.assertTrue(strict_equal(items, items))

    def test_truthy(self):
        for value in (None, False, 0, 0.0, math.nan, ''):
            self.assertFalse(truthy(value))
        for value in ([], {}, 'a', 1, -1.5, True):
            self.assertTrue(truthy(value))

    def test_to_number(self):
        self.assertEqual(to_number('42'), 42)
        self.assertEqual(to_number(' 2.5 '), 2.5)
        self.assertEqual(to_number(True), 1)
        self.assertEqual(to_number(None), 0)
        self.assertTrue(math.isnan(to_number('abc')))

class TestStaticOperations(unittest.TestCase):

    def test_range(self):
        self.assertEqual(af.range_of(1, 5, 2), [1, 3, 5])
        self.assertEqual(af.range_of(1, 3), [1, 2, 3])
        self.assertEqual(af.range_of(3), [1, 2, 3])
        with self.assertRaises(ValueError):
            af.range_of(1, 3, 0)

    def test_intersect(self):
        self.assertEqual(af.intersect([[2, 3, 4], [3, 4, 5]]), [3, 4])
        self.assertEqual(af.intersect([]), [])

    def test_diff(self):
        self.assertEqual(af.diff([[1, 2, 3], [2, 3, 4], [3, 4, 5]]), [1, 5])

    def test_union(self):
        self.assertEqual(af.union([[1, 2, 3], [3, 4, 5], [5, 6, 7]]), [1, 2, 3, 4, 5, 6, 7])

class TestArrayHelpers(unittest.TestCase):

    def test_swap(self):
        self.assertEqual(af.swap(['a', 'b', 'c'], 2, 0), ['c', 'b', 'a'])
        self.assertEqual(af.swap(['a', 'b', 'c'], 1, 1), ['a', 'b', 'c'])

    def test_contains(self):
        self.assertTrue(af.contains(['a', 'b', 'c'], 'a', 'b'))
        self.assertFalse(af.contains(['a', 'b', 'c'], 'd', 'c'))
        self.assertFalse(af.contains(['1', 2, 3], 1))

    def test_remove(self):
        self.assertEqual(af.remove(['a', 'b'], 'b'), ['a'])
        self.assertEqual(af.remove(['a', 'b'], 'c'), ['a', 'b'])
        arr = [1, 2, 1, 3]
        self.assertIs(af.remove(arr, 1), arr)
        self.assertEqual(arr, [2, 3])

    def test_shuffle(self):
        arr = ['a', 'b', 'c']
        shuffled = af.shuffle(arr)
        self.assertTrue(af.contains(shuffled, 'a', 'b', 'c'))
        self.assertIsNot(shuffled, arr)
        self.assertIs(af.shuffle_inplace(arr), arr)
        self.assertEqual(sorted(arr), ['a', 'b', 'c'])

    def test_clone(self):
        a = ['a', 'b']
        b = af.clone(a)
        b.append('c')
        self.assertFalse(af.contains(a, 'c'))
        self.assertIsNot(a, b)

    def test_intersect_with(self):
        a, b, c = ['a', 'b', 'c'], ['b', 'c', 'd'], ['c', 'd', 'e']
        self.assertEqual(af.intersect_with(a, b), ['b', 'c'])
        self.assertEqual(af.intersect_with(a, b, c), ['c'])
        self.assertEqual(af.intersect_with([1, '2', '3'], ['1', 2, 3]), [])

    def test_diff_with(self):
        a, b, c = ['a', 'b', 'c'], ['b', 'c', 'd'], ['c', 'd', 'e']
        self.assertEqual(af.diff_with(a, b), ['d', 'a'])
        self.assertEqual(af.diff_with(a, b, c), ['e', 'a'])
        self.assertEqual(af.diff_with([1, '2', '3'], ['1', 2, 3]), ['1', 2, 3, 1, '2', '3'])

    def test_union_with(self):
        self.assertEqual(af.union_with([1, 2, 3], [3, 4, 5], [5, 6, 7]), [1, 2, 3, 4, 5, 6, 7])

    def test_chunk(self):
        self.assertEqual(af.chunk(af.range_of(12), 4), [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
        self.assertEqual(af.chunk(af.range_of(12), 7), [[1, 2, 3, 4, 5, 6, 7], [8, 9, 10, 11, 12]])
        self.assertEqual(af.chunk(af.range_of(12), 13), [af.range_of(12)])
        arr = af.range_of(4)
        af.chunk(arr, 2)
        self.assertEqual(arr, [1, 2, 3, 4])

    def test_chunk_inplace(self):
        arr = af.range_of(12)
        self.assertIs(af.chunk_inplace(arr, 4), arr)
        self.assertEqual(arr, [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])

    def test_unique(self):
        self.assertEqual(af.unique(['a', 'a', 'b']), ['a', 'b'])
        self.assertEqual(af.unique(['a', 'b', 'c']), ['a', 'b', 'c'])
        self.assertEqual(af.unique([1, True, 1.0, '1']), [1, True, '1'])

    def test_each_stops_on_result(self):
        seen = []

        def visit(value):
            seen.append(value)
            if value == 2:
                return 'foo'

        self.assertEqual(af.each([1, 2, 3], visit), 'foo')
        self.assertEqual(seen, [1, 2])
        self.assertIsNone(af.each([1, 2], lambda value, index: None))

    def test_flatten(self):
        self.assertEqual(af.flatten([1, 2, [[3]]]), [1, 2, 3])
        self.assertEqual(af.flatten([1, 2, [[3]]], 1), [1, 2, [3]])
        self.assertEqual(af.flatten([1, [2], [[[3]]]], 2), [1, 2, [3]])

    def test_flatten_inplace(self):
        arr = [1, 2, [[3]]]
        self.assertIs(af.flatten_inplace(arr), arr)
        self.assertEqual(arr, [1, 2, 3])

    def test_sum_and_product(self):
        self.assertEqual(af.sum_of([1, 2, 3]), 6)
        self.assertEqual(af.sum_of(['1', 2]), 3)
        self.assertEqual(af.product([2, 3, 5]), 30)
        with self.assertRaises(TypeError):
            af.sum_of([])

    def test_first_and_last(self):
        self.assertEqual(af.first([2, 3, 5]), 2)
        self.assertEqual(af.first([2, 3, 5], 2), [2, 3])
        self.assertEqual(af.last([2, 3, 5]), 5)
        self.assertEqual(af.last([2, 3, 5], 2), [3, 5])
        self.assertIsNone(af.first([]))

    def test_clean(self):
        values = [None, False, 0, math.nan, '', 'foo', 'bar']
        self.assertEqual(af.clean(values), ['foo', 'bar'])
        self.assertIs(af.clean_inplace(values), values)
        self.assertEqual(values, ['foo', 'bar'])

    def test_filter_inplace(self):
        arr = [1, 2, 3, 4, 5, 6]
        self.assertIs(af.filter_inplace(arr, lambda n: n % 2 == 0), arr)
        self.assertEqual(arr, [2, 4, 6])

    def test_map_inplace(self):
        arr = [1, 2, 3]
        self.assertIs(af.map_inplace(arr, lambda n: n % 2 == 1), arr)
        self.assertEqual(arr, [True, False, True])
        indexed = ['a', 'b']
        af.map_inplace(indexed, lambda value, index: f"{index}{value}")
        self.assertEqual(indexed, ['0a', '1b'])

    def test_invoke(self):
        self.assertEqual(af.invoke(['a', 'b'], 'upper'), ['A', 'B'])
        self.assertEqual(af.invoke([1.142, 2.321, 3.754], '__round__', 2), [1.14, 2.32, 3.75])
        arr = ['a-b', 'c-d']
        af.invoke_inplace(arr, 'split', '-')
        self.assertEqual(arr, [['a', 'b'], ['c', 'd']])

    def test_pluck(self):
        words = ['hello', 'world', 'this', 'is', 'nice']
        self.assertEqual(af.pluck(words, 'length'), [5, 5, 4, 2, 4])
        af.pluck_inplace(words, 'length')
        self.assertEqual(words, [5, 5, 4, 2, 4])
        people = [{'name': 'ada', 'age': 36}, {'name': 'alan', 'age': 41}]
        self.assertEqual(af.pluck(people, 'name'), ['ada', 'alan'])
        self.assertEqual(af.pluck(people, ['age']), [{'age': 36}, {'age': 41}])

    def test_grep(self):
        words = ['hello', 'world', 'this', 'is', 'cool']
        self.assertEqual(af.grep(words, r'(.)\1'), ['hello', 'cool'])
        af.grep_inplace(words, re.compile(r'(.)\1'))
        self.assertEqual(words, ['hello', 'cool'])

    def test_sort_inplace(self):
        arr = [3, 1, 2]
        self.assertIs(af.sort_inplace(arr), arr)
        self.assertEqual(arr, [1, 2, 3])
        af.sort_inplace(arr, lambda a, b: b - a)
        self.assertEqual(arr, [3, 2, 1])

    def test_sort_by(self):
        people = [{'name': 'cy', 'age': 3}, {'name': 'al', 'age': 1}, {'name': 'bo', 'age': 2}]
        self.assertEqual(af.pluck(af.sort_by(people, 'age'), 'name'), ['al', 'bo', 'cy'])
        self.assertEqual(af.sort_by(['ccc', 'a', 'bb'], len), ['a', 'bb', 'ccc'])
        self.assertEqual(af.sort_by([1, 2, 3], lambda n: n, lambda a, b: b - a), [3, 2, 1])
        af.sort_by_inplace(people, 'name')
        self.assertEqual(af.pluck(people, 'name'), ['al', 'bo', 'cy'])

    def test_fetch(self):
        letters = ['d', 'b', 'a', 'c', 'e']
        self.assertEqual(af.fetch(letters, [2, 1, 3, 0, 4]), ['a', 'b', 'c', 'd', 'e'])
        self.assertEqual(af.fetch(letters, 2, 1, 3), ['a', 'b', 'c'])
        self.assertEqual(af.fetch([10, 20, 30], lambda value, index: 2 - index), [30, 20, 10])

    def test_index_of(self):
        self.assertEqual(af.index_of([1, 2, 1], 1), 0)
        self.assertEqual(af.index_of([1, 2, 1], 1, 1), 2)
        self.assertEqual(af.index_of([1, 2, 1], 1, -1), 2)
        self.assertEqual(af.index_of([True, 1], 1), 1)
        self.assertEqual(af.index_of([math.nan], math.nan), -1)
        self.assertEqual(af.last_index_of([1, 2, 1], 1), 2)
        self.assertEqual(af.last_index_of([1, 2, 1], 1, 1), 0)
        self.assertEqual(af.last_index_of([], 1), -1)

    def test_reduce_right(self):
        self.assertEqual(af.reduce_right(['a', 'b', 'c'], lambda acc, value: acc + value), 'cba')
        self.assertEqual(af.reduce_right([1, 2], lambda acc, value: acc + [value], []), [2, 1])
        with self.assertRaises(TypeError):
            af.reduce_right([], lambda acc, value: acc)

    def test_non_arrays_rejected(self):
        with self.assertRaises(TypeError):
            af.unique('abc')
        with self.assertRaises(TypeError):
            af.each([1], 'not callable')

if __name__ == '__main__':
    unittest.main(verbosity=2)
