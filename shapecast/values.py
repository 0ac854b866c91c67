# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Classification and generic coercion of raw *source values* (e.g., the
parts of a decoded JSON document).

A source value is one of:

* a *scalar* (text, bytes, a number, a boolean, :obj:`None` or any other
  object that is neither a sequence nor a keyed structure),
* an *ordered list* (any non-text :class:`collections.abc.Sequence`),
* a *keyed structure* (any :class:`collections.abc.Mapping`, or any
  object exposing its attributes through :func:`vars`, such as
  :class:`types.SimpleNamespace`).

>>> classify_value({'name': 'Item1'}) == KEYED_STRUCTURE
True
>>> classify_value([{'name': 'Item1'}]) == ORDERED_LIST
True
>>> classify_value('[1, 2]') == SCALAR
True
"""

import collections.abc as collections_abc
import decimal
import math
import sys

from shapecast.regexes import NUMERIC_STRING_REGEX


SCALAR = 'scalar'
ORDERED_LIST = 'ordered-list'
KEYED_STRUCTURE = 'keyed-structure'

# the greatest decimal exponent of a number still regarded as numeric (so
# that, e.g., `1e1000000` is not turned into an int with a million digits)
MAX_DECIMAL_EXPONENT = sys.float_info.max_10_exp


def classify_value(value):
    """
    Tag the given raw value as :data:`SCALAR`, :data:`ORDERED_LIST` or
    :data:`KEYED_STRUCTURE`.

    List-ness is checked before keyed-ness.
    """
    if value is None or isinstance(value, (str, bytes, bytearray, bool, int, float)):
        return SCALAR
    if isinstance(value, collections_abc.Sequence):
        return ORDERED_LIST
    if isinstance(value, collections_abc.Mapping):
        return KEYED_STRUCTURE
    if _is_attribute_bearing(value):
        return KEYED_STRUCTURE
    return SCALAR


def iter_keyed_items(value):
    """
    Iterate over the (key, value) pairs of a keyed structure.

    >>> from types import SimpleNamespace
    >>> sorted(iter_keyed_items({'b': 2, 'a': 1}))
    [('a', 1), ('b', 2)]
    >>> sorted(iter_keyed_items(SimpleNamespace(a=1, b=2)))
    [('a', 1), ('b', 2)]
    """
    if isinstance(value, collections_abc.Mapping):
        return iter(value.items())
    return iter(vars(value).items())


def is_numeric(value):
    """
    Check whether the given scalar is numeric: a finite number or a
    numeric string (such as ``'42'``, ``' -1.5 '`` or ``'1e3'``).

    Booleans are *not* numeric. Neither are decimal numbers (also those
    given as numeric strings) whose magnitude exceeds the range of
    floats (see :data:`MAX_DECIMAL_EXPONENT`).

    >>> is_numeric(42), is_numeric(4.2), is_numeric('42'), is_numeric(' 1e3 ')
    (True, True, True, True)
    >>> is_numeric(True), is_numeric('true'), is_numeric(''), is_numeric(float('inf'))
    (False, False, False, False)
    >>> is_numeric('1e308'), is_numeric('1e309'), is_numeric('0e999999')
    (True, False, True)
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode('utf-8', 'replace')
    if isinstance(value, str):
        if NUMERIC_STRING_REGEX.search(value) is None:
            return False
        try:
            value = decimal.Decimal(value.strip())
        except decimal.InvalidOperation:
            return False
    if isinstance(value, decimal.Decimal):
        return value.is_finite() and (value.is_zero() or
                                      value.adjusted() <= MAX_DECIMAL_EXPONENT)
    return False


def as_integer(value):
    """
    Convert a numeric value (see :func:`is_numeric`) to :class:`int`
    (truncating toward zero, without any precision loss for numeric
    strings).

    >>> as_integer('5'), as_integer(' -3.75 '), as_integer('1e3'), as_integer(7.9)
    (5, -3, 1000, 7)
    >>> as_integer('123456789012345678901234567890')
    123456789012345678901234567890
    >>> as_integer('1e1000000')
    Traceback (most recent call last):
      ...
    ValueError: '1e1000000' is not a numeric value
    """
    if not is_numeric(value):
        raise ValueError('{!a} is not a numeric value'.format(value))
    if isinstance(value, (bytes, bytearray)):
        value = value.decode('utf-8', 'replace')
    if isinstance(value, str):
        return int(decimal.Decimal(value.strip()))
    return int(value)


def coerce_scalar(value):
    """
    Coerce a raw scalar to the best-matching primitive.

    The precedence is fixed:

    1. a numeric value (including numeric text) becomes an :class:`int`;
    2. a value that is already a :class:`bool` stays that :class:`bool`;
    3. anything else becomes a :class:`str`.

    :obj:`None` is kept as :obj:`None`.

    >>> coerce_scalar('5')
    5
    >>> coerce_scalar(123)
    123
    >>> coerce_scalar(2.5)
    2
    >>> coerce_scalar(True)
    True
    >>> coerce_scalar('true')   # text is never converted to bool
    'true'
    >>> coerce_scalar(b'abc')
    'abc'
    >>> coerce_scalar(None) is None
    True
    """
    if value is None:
        return None
    if is_numeric(value):
        return as_integer(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, (bytes, bytearray)):
        return value.decode('utf-8', 'replace')
    return str(value)


def _is_attribute_bearing(value):
    return (not isinstance(value, type)
            and not callable(value)
            and hasattr(value, '__dict__'))
