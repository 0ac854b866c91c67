# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Target types: enumeration of declared fields, the :class:`BoundModel`
base class, and conversion of target instances back to plain
(JSON-able) data.
"""

import collections.abc as collections_abc

from shapecast.fields import Field
from shapecast.values import (
    KEYED_STRUCTURE,
    classify_value,
    iter_keyed_items,
)


def get_field_specs(cls):
    """
    Get a ``{<field name>: <Field instance>, ...}`` dict of all fields
    declared by the given class and its base classes.

    A subclass can mask ("remove") a field declared in a base class by
    setting the corresponding class attribute to any non-:class:`Field`
    object (e.g., :obj:`None`).

    >>> from shapecast.fields import IntegerField, UnicodeField
    >>> class Base(object):
    ...     id = IntegerField()
    ...     secret = UnicodeField()
    ...
    >>> class Derived(Base):
    ...     name = UnicodeField()
    ...     secret = None
    ...
    >>> list(get_field_specs(Derived))
    ['id', 'name']
    """
    field_specs = {}
    for klass in reversed(cls.__mro__):
        for name, obj in vars(klass).items():
            if isinstance(obj, Field):
                field_specs[name] = obj
            elif name in field_specs:
                del field_specs[name]
    return field_specs


def has_declared_fields(obj):
    return isinstance(obj, BoundModel) or bool(get_field_specs(type(obj)))


def to_representation(value):
    """
    Convert the given value to plain data: any target instance becomes a
    :class:`dict` of exactly its declared fields (recursively), other
    keyed structures become :class:`dict` objects, and sequences become
    :class:`list` objects.  Scalars are returned unchanged.

    The given value is never modified.
    """
    if isinstance(value, (str, bytes, bytearray)) or value is None:
        return value
    if has_declared_fields(value):
        return {
            name: to_representation(_get_field_value(value, name, field))
            for name, field in get_field_specs(type(value)).items()}
    if isinstance(value, collections_abc.Sequence):
        return [to_representation(item) for item in value]
    if classify_value(value) == KEYED_STRUCTURE:
        return {key: to_representation(item)
                for key, item in iter_keyed_items(value)}
    return value


def _get_field_value(obj, name, field):
    # (bypassing `Field.__get__`, which would store the default on `obj`)
    instance_dict = getattr(obj, '__dict__', {})
    if name in instance_dict:
        return instance_dict[name]
    return field.get_default()


class BoundModel(object):

    """
    A convenience base class for target types.

    On instantiation, every declared field is set to (a fresh copy of)
    its declared default value, unless given as a keyword argument:

    >>> from shapecast.fields import IntegerField, ListField, UnicodeField
    >>> class Item(BoundModel):
    ...     name = UnicodeField()
    ...     quantity = IntegerField(default=1)
    ...     tags = ListField()
    ...
    >>> Item(name='Item1')
    Item(name='Item1', quantity=1, tags=[])
    >>> Item(name='Item1').to_dict() == {'name': 'Item1', 'quantity': 1, 'tags': []}
    True
    >>> Item(name='Item1') == Item(name='Item1', quantity=1)
    True
    >>> Item(color='red')      # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """

    def __init__(self, **field_values):
        field_specs = self.field_specs()
        illegal_names = field_values.keys() - field_specs.keys()
        if illegal_names:
            raise TypeError('{}.__init__() got unexpected keyword argument(s): {}'.format(
                self.__class__.__qualname__,
                ', '.join(sorted(map(ascii, illegal_names)))))
        for name, field in field_specs.items():
            value = field_values[name] if name in field_values else field.get_default()
            setattr(self, name, value)

    @classmethod
    def field_specs(cls):
        return get_field_specs(cls)

    def to_dict(self):
        """
        Get a new :class:`dict` of this instance's declared fields (with
        nested target instances converted recursively).
        """
        return to_representation(self)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.field_specs())

    __hash__ = None

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__qualname__,
            ', '.join(
                '{}={!r}'.format(name, getattr(self, name, None))
                for name in self.field_specs()))
