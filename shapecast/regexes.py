# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Regular expressions used by the scalar coercion and name transformation
machinery.

>>> bool(NUMERIC_STRING_REGEX.search('42'))
True
>>> bool(NUMERIC_STRING_REGEX.search(' -3.75e2 '))
True
>>> bool(NUMERIC_STRING_REGEX.search('.5'))
True
>>> bool(NUMERIC_STRING_REGEX.search('5.'))
True
>>> bool(NUMERIC_STRING_REGEX.search('0x1A'))
False
>>> bool(NUMERIC_STRING_REGEX.search('1_000'))
False
>>> bool(NUMERIC_STRING_REGEX.search('nan'))
False
>>> bool(NUMERIC_STRING_REGEX.search(''))
False

>>> LAST_WORD_REGEX.search('lineItems').groups()
('line', 'Items')
>>> LAST_WORD_REGEX.search('line_items').groups()
('line_', 'items')
>>> LAST_WORD_REGEX.search('items').groups()
('', 'items')
>>> LAST_WORD_REGEX.search('URLs').groups()
('UR', 'Ls')
"""

import re


# numeric strings: optional sign, digits with an optional fraction
# (or just a fraction), optional exponent; surrounding whitespace is
# allowed
NUMERIC_STRING_REGEX = re.compile(r'''
    \A
    \s*
    [+-]?
    (?:
        \d+ (?: \. \d* )?
    |
        \. \d+
    )
    (?: [eE] [+-]? \d+ )?
    \s*
    \Z
''', re.ASCII | re.VERBOSE)

# splits a name into (<everything before the last word>, <last word>);
# words are delimited by `_`, `-`, spaces or a lower-to-upper case change
LAST_WORD_REGEX = re.compile(r'\A(.*?)([A-Z]?[a-z]+|[A-Z]+|[a-z]+)\Z', re.DOTALL)

# separators recognized by `classify()`
WORD_SEPARATORS_REGEX = re.compile(r'[_\-\s]+')

# boundaries between words of a camelCase or PascalCase name
CAMEL_BOUNDARY_REGEX = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')
