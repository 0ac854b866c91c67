# Copyright (c) 2025 shapecast developers. All rights reserved.

import collections
import decimal
import unittest
from types import SimpleNamespace

from unittest_expander import (
    expand,
    foreach,
    param,
    paramseq,
)

from shapecast.model import BoundModel
from shapecast.tests._generic_helpers import TestCaseMixin
from shapecast.values import (
    KEYED_STRUCTURE,
    ORDERED_LIST,
    SCALAR,
    as_integer,
    classify_value,
    coerce_scalar,
    is_numeric,
    iter_keyed_items,
)


class _Slotted(object):
    __slots__ = ('a',)


@expand
class Test_classify_value(unittest.TestCase):

    @paramseq
    def cases(cls):
        # scalars
        yield param(None, SCALAR)
        yield param('text', SCALAR)
        yield param('', SCALAR)
        yield param('[1, 2]', SCALAR)
        yield param(b'bytes', SCALAR)
        yield param(bytearray(b'bytes'), SCALAR)
        yield param(42, SCALAR)
        yield param(4.2, SCALAR)
        yield param(True, SCALAR)
        yield param(decimal.Decimal('4.2'), SCALAR)
        yield param(_Slotted(), SCALAR)
        yield param(len, SCALAR)
        yield param(SimpleNamespace, SCALAR)
        # ordered lists
        yield param([], ORDERED_LIST)
        yield param([{'a': 1}], ORDERED_LIST)
        yield param((1, 2), ORDERED_LIST)
        yield param(collections.namedtuple('Point', 'x, y')(1, 2), ORDERED_LIST)
        # keyed structures
        yield param({}, KEYED_STRUCTURE)
        yield param({'a': 1}, KEYED_STRUCTURE)
        yield param(collections.OrderedDict(a=1), KEYED_STRUCTURE)
        yield param(SimpleNamespace(a=1), KEYED_STRUCTURE)
        yield param(BoundModel(), KEYED_STRUCTURE)

    @foreach(cases)
    def test(self, value, expected):
        self.assertEqual(classify_value(value), expected)


class Test_iter_keyed_items(unittest.TestCase):

    def test_mapping(self):
        self.assertEqual(list(iter_keyed_items({'b': 1, 'a': 2})), [('b', 1), ('a', 2)])

    def test_attribute_bearing_object(self):
        self.assertEqual(sorted(iter_keyed_items(SimpleNamespace(b=1, a=2))),
                         [('a', 2), ('b', 1)])


@expand
class Test_is_numeric(unittest.TestCase):

    @foreach(
        param(0),
        param(-17),
        param(2 ** 100),
        param(0.5),
        param(decimal.Decimal('1.5')),
        param('0'),
        param('-17'),
        param('+17'),
        param(' 17 '),
        param('1.5'),
        param('.5'),
        param('5.'),
        param('1e3'),
        param('1E-3'),
        param('1e308'),
        param('-9.99e308'),
        param('1e-1000000'),
        param('0e1000000'),
        param(b'17'),
    )
    def test_numeric(self, value):
        self.assertTrue(is_numeric(value))

    @foreach(
        param(True),
        param(False),
        param(None),
        param(float('inf')),
        param(float('nan')),
        param(decimal.Decimal('NaN')),
        param(''),
        param(' '),
        param('true'),
        param('abc'),
        param('1a'),
        param('0x1A'),
        param('1_000'),
        param('1 000'),
        param('inf'),
        param('nan'),
        param('.'),
        param('e3'),
        # (magnitude beyond the range of floats)
        param('1e309'),
        param('1e1000000'),
        param('-9e80000000'),
        param(b'1e1000000'),
        param(decimal.Decimal('1e400')),
        param([1]),
    )
    def test_not_numeric(self, value):
        self.assertFalse(is_numeric(value))


@expand
class Test_as_integer(TestCaseMixin, unittest.TestCase):

    @foreach(
        param('5', 5),
        param(' -3.75 ', -3),
        param('3.99', 3),
        param('1e3', 1000),
        param('12345678901234567890123', 12345678901234567890123),
        param(b'7', 7),
        param(7.9, 7),
        param(-7.9, -7),
        param(42, 42),
    )
    def test(self, value, expected):
        self.assertEqualIncludingTypes(as_integer(value), expected)

    @foreach(
        param('abc'),
        param('1e1000000'),
        param(float('inf')),
    )
    def test_not_numeric(self, value):
        with self.assertRaises(ValueError):
            as_integer(value)


@expand
class Test_coerce_scalar(TestCaseMixin, unittest.TestCase):

    @foreach(
        # numeric -> int
        param('5', 5),
        param('-5', -5),
        param('5.9', 5),
        param(5.9, 5),
        param(123, 123),
        param(b'12', 12),
        # bool -> the same bool
        param(True, True),
        param(False, False),
        # anything else -> str
        param('true', 'true'),
        param('TRUE', 'TRUE'),
        param('abc', 'abc'),
        param('', ''),
        param(b'abc', 'abc'),
        param(float('inf'), 'inf'),
        param(decimal.Decimal('NaN'), 'NaN'),
        param('1e1000000', '1e1000000'),
        param('9e80000000', '9e80000000'),
        param('1e-1000000', 0),
        # None -> None
        param(None, None),
    )
    def test(self, value, expected):
        self.assertEqualIncludingTypes(coerce_scalar(value), expected)
