# Copyright (c) 2025 shapecast developers. All rights reserved.

import unittest

from shapecast.regexes import (
    CAMEL_BOUNDARY_REGEX,
    LAST_WORD_REGEX,
    NUMERIC_STRING_REGEX,
    WORD_SEPARATORS_REGEX,
)


class Test_NUMERIC_STRING_REGEX(unittest.TestCase):

    regex = NUMERIC_STRING_REGEX

    def test_valid(self):
        self.assertRegex('0', self.regex)
        self.assertRegex('42', self.regex)
        self.assertRegex('-42', self.regex)
        self.assertRegex('+42', self.regex)
        self.assertRegex('  42\t\n', self.regex)
        self.assertRegex('4.2', self.regex)
        self.assertRegex('.2', self.regex)
        self.assertRegex('4.', self.regex)
        self.assertRegex('4e2', self.regex)
        self.assertRegex('4.2E-2', self.regex)
        self.assertRegex('007', self.regex)

    def test_not_valid(self):
        self.assertNotRegex('', self.regex)
        self.assertNotRegex(' ', self.regex)
        self.assertNotRegex('.', self.regex)
        self.assertNotRegex('-', self.regex)
        self.assertNotRegex('4 2', self.regex)
        self.assertNotRegex('4,2', self.regex)
        self.assertNotRegex('4e', self.regex)
        self.assertNotRegex('e4', self.regex)
        self.assertNotRegex('0x2A', self.regex)
        self.assertNotRegex('1_000', self.regex)
        self.assertNotRegex('inf', self.regex)
        self.assertNotRegex('NaN', self.regex)
        self.assertNotRegex('true', self.regex)
        self.assertNotRegex('42\n42', self.regex)
        self.assertNotRegex('٤٢', self.regex)   # (non-ASCII digits)


class Test_LAST_WORD_REGEX(unittest.TestCase):

    def _groups(self, s):
        return LAST_WORD_REGEX.search(s).groups()

    def test(self):
        self.assertEqual(self._groups('items'), ('', 'items'))
        self.assertEqual(self._groups('lineItems'), ('line', 'Items'))
        self.assertEqual(self._groups('LineItems'), ('Line', 'Items'))
        self.assertEqual(self._groups('line_items'), ('line_', 'items'))
        self.assertEqual(self._groups('line-items'), ('line-', 'items'))
        self.assertEqual(self._groups('ITEMS'), ('', 'ITEMS'))
        self.assertEqual(self._groups('item2Names'), ('item2', 'Names'))

    def test_no_word(self):
        self.assertIsNone(LAST_WORD_REGEX.search(''))
        self.assertIsNone(LAST_WORD_REGEX.search('42'))
        self.assertIsNone(LAST_WORD_REGEX.search('items_'))


class Test_name_splitting_regexes(unittest.TestCase):

    def test_WORD_SEPARATORS_REGEX(self):
        self.assertEqual(WORD_SEPARATORS_REGEX.split('a_b-c d__e'), ['a', 'b', 'c', 'd', 'e'])

    def test_CAMEL_BOUNDARY_REGEX(self):
        self.assertEqual(CAMEL_BOUNDARY_REGEX.split('lineItem'), ['line', 'Item'])
        self.assertEqual(CAMEL_BOUNDARY_REGEX.split('HTTPServer'), ['HTTP', 'Server'])
        self.assertEqual(CAMEL_BOUNDARY_REGEX.split('item'), ['item'])
