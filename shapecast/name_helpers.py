# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Pure string transformations used to derive candidate type names from
field names: case conversion (*camelCase* <-> *PascalCase*,
*snake_case*) and English singular/plural inflection.

Inflection is applied to the *last word* of a compound name only (the
words are delimited by ``_``, ``-``, spaces or case changes), keeping
the capitalization of that word:

>>> singularize('lineItems')
'lineItem'
>>> singularize('line_items')
'line_item'
>>> singularize('salesPeople')
'salesPerson'
>>> pluralize('SalesPerson')
'SalesPeople'

Deriving a type name from a list field's name is a composition of
:func:`singularize` and :func:`classify`:

>>> classify(singularize('categories'))
'Category'
>>> classify(singularize('line_items'))
'LineItem'
"""

import re

import inflection

from shapecast.regexes import (
    CAMEL_BOUNDARY_REGEX,
    LAST_WORD_REGEX,
    WORD_SEPARATORS_REGEX,
)


#
# Inflection data
#
# The bulk of English inflection is done by the `inflection` library;
# the data below take precedence over it, covering words its rule set
# does not know or gets wrong.

UNCOUNTABLE_WORDS = frozenset([
    'data',
    'deer',
    'equipment',
    'feedback',
    'fish',
    'hardware',
    'information',
    'metadata',
    'money',
    'news',
    'police',
    'rice',
    'series',
    'sheep',
    'software',
    'species',
    'staff',
])

SINGULAR_TO_PLURAL_IRREGULARS = {
    'criterion': 'criteria',
    'foot': 'feet',
    'goose': 'geese',
    'phenomenon': 'phenomena',
    'tooth': 'teeth',
}

PLURAL_TO_SINGULAR_IRREGULARS = {
    plural: singular
    for singular, plural in SINGULAR_TO_PLURAL_IRREGULARS.items()}

# (the first matching rule wins; the patterns are applied to the
# lowercased last word)
SINGULAR_RULES = [(re.compile(pattern), replacement) for pattern, replacement in [
    (r'^(toe|shoe|canoe|hoe|oboe)s$', r'\1'),
    (r'(bonus|campus|census|virus|gas)(es)?$', r'\1'),
    (r'^(cookie|rookie|calorie|zombie|pie|tie|lie)s$', r'\1'),
    (r'^(curve|valve|nerve|serve|reserve|preserve|olive|sleeve|glove|'
     r'drive|archive|groove|stove|wave|cave|slave)s$', r'\1'),
]]

# (the first matching rule wins; the patterns are applied to the
# lowercased last word)
PLURAL_RULES = [(re.compile(pattern), replacement) for pattern, replacement in [
    (r'(bonus|campus|census|virus|gas)$', r'\1es'),
]]


#
# Case transformations

def upper_first(word):
    """
    Capitalize the first character, leaving the rest intact.

    >>> upper_first('sampleInt')
    'SampleInt'
    >>> upper_first('')
    ''
    """
    return word[:1].upper() + word[1:]


def lower_first(word):
    """
    Lower the first character, leaving the rest intact.

    >>> lower_first('SampleInt')
    'sampleInt'
    """
    return word[:1].lower() + word[1:]


def classify(word):
    """
    Transform a field name into a type name (*PascalCase*).

    If the name contains word separators (``_``, ``-`` or whitespace),
    each word is capitalized and the words are concatenated with no
    separator; otherwise, only the first letter is capitalized.

    >>> classify('item')
    'Item'
    >>> classify('lineItem')
    'LineItem'
    >>> classify('line_item')
    'LineItem'
    >>> classify('billing-address')
    'BillingAddress'
    >>> classify('_private_thing')
    'PrivateThing'
    """
    if WORD_SEPARATORS_REGEX.search(word):
        word = WORD_SEPARATORS_REGEX.sub('_', word).strip('_')
    return inflection.camelize(word)


def camelize(word):
    """
    Transform a name into *camelCase*.

    >>> camelize('line_item')
    'lineItem'
    >>> camelize('LineItem')
    'lineItem'
    """
    return lower_first(classify(word))


def underscore(word):
    """
    Transform a *camelCase*/*PascalCase* (or separator-delimited) name
    into *snake_case*.

    >>> underscore('lineItem')
    'line_item'
    >>> underscore('HTTPServerError')
    'http_server_error'
    >>> underscore('billing-address')
    'billing_address'
    """
    words = []
    for part in WORD_SEPARATORS_REGEX.split(word):
        words.extend(w for w in CAMEL_BOUNDARY_REGEX.split(part) if w)
    return '_'.join(w.lower() for w in words)


#
# Inflection

def singularize(word):
    """
    Get the singular form of the (last word of the) given name.

    >>> singularize('items')
    'item'
    >>> singularize('categories')
    'category'
    >>> singularize('addresses')
    'address'
    >>> singularize('statuses')
    'status'
    >>> singularize('wolves')
    'wolf'
    >>> singularize('children')
    'child'
    >>> singularize('Children')
    'Child'
    >>> singularize('URLs')
    'URL'
    >>> singularize('series')
    'series'
    >>> singularize('status')
    'status'
    >>> singularize('item')
    'item'
    """
    return _inflect_last_word(word,
                              PLURAL_TO_SINGULAR_IRREGULARS,
                              SINGULAR_RULES,
                              inflection.singularize)


def pluralize(word):
    """
    Get the plural form of the (last word of the) given name.

    >>> pluralize('item')
    'items'
    >>> pluralize('category')
    'categories'
    >>> pluralize('address')
    'addresses'
    >>> pluralize('lineItem')
    'lineItems'
    >>> pluralize('person')
    'people'
    >>> pluralize('analysis')
    'analyses'
    >>> pluralize('sheep')
    'sheep'
    """
    return _inflect_last_word(word,
                              SINGULAR_TO_PLURAL_IRREGULARS,
                              PLURAL_RULES,
                              inflection.pluralize)


def _inflect_last_word(word, irregulars, rules, fallback):
    match = LAST_WORD_REGEX.search(word)
    if match is None:
        return word
    prefix, last_word = match.groups()
    lowercased = last_word.lower()
    if lowercased in UNCOUNTABLE_WORDS:
        return word
    inflected = irregulars.get(lowercased)
    if inflected is None:
        for regex, replacement in rules:
            if regex.search(lowercased):
                inflected = regex.sub(replacement, lowercased, count=1)
                break
        else:
            inflected = fallback(lowercased)
    if inflected == lowercased:
        return word
    return prefix + _with_case_of(last_word, inflected)


def _with_case_of(model_word, word):
    if len(model_word) > 1 and model_word.isupper():
        return word.upper()
    if model_word[:1].isupper():
        return upper_first(word)
    return word
