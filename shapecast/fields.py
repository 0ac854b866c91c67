# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Field declaration classes.

A *target type* declares its fields as class attributes being instances
of :class:`Field` or of its subclasses:

>>> class Owner(object):
...     login = UnicodeField()
...     id = IntegerField()
...
>>> class Repository(object):
...     name = UnicodeField()
...     owner = ObjectField(Owner)        # a nested object
...     topics = ListField()              # an untyped list
...     extra = GenericObjectField()      # kept verbatim
...
>>> Repository.owner
ObjectField(type_ref=<class 'shapecast.fields.Owner'>)
"""

import copy

from shapecast.encoding_helpers import (
    ascii_str,
    str_to_bool,
)
from shapecast.exceptions import FieldValueError
from shapecast.values import (
    as_integer,
    coerce_scalar,
    is_numeric,
)



#
# The base field class

class Field(object):

    """
    The base class for all field declaration classes.

    A bare :class:`Field` instance declares a *generic/untyped* field:
    scalars assigned to it are coerced with the generic precedence (see
    :func:`shapecast.values.coerce_scalar`), lists are bound element by
    element, but a keyed structure *cannot* be bound to it (as there is
    no declared type to instantiate).

    Constructors of all field classes accept the following keyword-only
    arguments:

    * `default` (default: :obj:`None`):
          The declared default value (a deep copy of it is used for each
          new :class:`~shapecast.model.BoundModel` instance).
    * `default_factory` (default: :obj:`None`):
          If not :obj:`None`, a callable taking no arguments -- used
          instead of `default` to produce the default value.
    * `custom_info` (default: an empty dictionary):
          A dictionary containing arbitrary data (accessible as the
          :attr:`custom_info` instance attribute).
    * **any** keyword arguments whose names are the names of
      class-level attributes (then these attributes are overridden
      per-instance).

    A field is also a (non-data) descriptor: reading a declared field
    that has never been set on an instance of a target type (which is
    possible for target types not derived from
    :class:`~shapecast.model.BoundModel`) gives a fresh copy of the
    declared default, stored on the instance so that later reads (and
    in-place modifications) concern the same object:

    >>> class Plain(object):
    ...     name = Field(default='anonymous')
    ...     tags = ListField()
    ...
    >>> p = Plain()
    >>> p.name
    'anonymous'
    >>> p.tags.append('x')
    >>> p.tags
    ['x']
    >>> Plain.name
    Field(default='anonymous')
    """

    _attr_name = None

    def __init__(self, **kwargs):
        self._init_kwargs = kwargs
        self._set_public_attrs(**kwargs)

    def __set_name__(self, owner, name):
        self._attr_name = name

    def __get__(self, instance, owner=None):
        # (reached only when `instance` has no such attribute of its own)
        if instance is None:
            return self
        value = self.get_default()
        instance_dict = getattr(instance, '__dict__', None)
        if instance_dict is not None and self._attr_name is not None:
            value = instance_dict.setdefault(self._attr_name, value)
        return value

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__qualname__,
            ', '.join(
                '{}={!r}'.format(key, value)
                for key, value in sorted(self._init_kwargs.items())))


    #
    # overridable methods/attributes

    #: Whether the field declares a custom type (to be instantiated when
    #: a keyed structure is bound to the field).
    declares_custom_type = False

    #: Whether a keyed structure bound to the field should be kept
    #: verbatim (with no coercion).
    keeps_raw_structure = False

    #: The declared type (a class/factory or a registered type name);
    #: relevant only if `declares_custom_type` is true.
    type_ref = None

    #: The declared type of list elements (a class/factory or a
    #: registered type name); :obj:`None` means that element types
    #: are derived from the field name by naming convention.
    element_type = None

    def coerce_scalar(self, value):
        """
        Coerce a scalar source value to be assigned to the field.

        Args:
            `value`:
                A raw scalar (see :func:`shapecast.values.classify_value`).

        Returns:
            The coerced value.

        Raises:
            :exc:`~shapecast.exceptions.FieldValueError` if the value
            cannot be coerced.

        The default implementation applies the generic precedence (see
        :func:`shapecast.values.coerce_scalar`).  It can be extended
        (using :func:`super`) or overridden in subclasses.

        The method should always return a new object, **never**
        modifying the given value in-place.
        """
        return coerce_scalar(value)

    def get_default(self):
        """Get a fresh copy of the declared default value."""
        if self.default_factory is not None:
            return self.default_factory()
        return copy.deepcopy(self.default)


    #
    # non-public internals

    def _set_public_attrs(self,
                          default=None,
                          default_factory=None,
                          custom_info=None,
                          **per_instance_attrs):
        self.default = default
        self.default_factory = default_factory
        self.custom_info = (
            custom_info if custom_info is not None
            else {})
        self._set_per_instance_attrs(per_instance_attrs)

    def _set_per_instance_attrs(self, per_instance_attrs):
        # per-instance customizations of class-level attributes
        cls = self.__class__
        for attr_name, obj in per_instance_attrs.items():
            if not hasattr(cls, attr_name):
                raise TypeError(
                    '{}.__init__() got an unexpected keyword argument {!a}'
                    .format(cls.__qualname__, attr_name))
            setattr(self, attr_name, obj)


def _check_type_ref(field, attr_name, type_ref):
    if not (isinstance(type_ref, str) or callable(type_ref)):
        raise TypeError(
            '{} {!a} specified for {} is neither a str nor a callable'
            .format(attr_name, type_ref, field.__class__.__qualname__))



#
# Primitive field classes

class IntegerField(Field):

    """
    For integer numbers.

    >>> f = IntegerField()
    >>> f.coerce_scalar('42'), f.coerce_scalar(42.9), f.coerce_scalar(True)
    (42, 42, 1)
    """

    def coerce_scalar(self, value):
        if value is None:
            return None
        if isinstance(value, bool):
            return int(value)
        if not is_numeric(value):
            raise FieldValueError(public_message=(
                '"{}" is not a valid integer number'.format(ascii_str(value))))
        return as_integer(value)


class FloatField(Field):

    """
    For floating-point numbers.

    >>> FloatField().coerce_scalar(' 2.5 ')
    2.5
    """

    def coerce_scalar(self, value):
        if value is None:
            return None
        if isinstance(value, bool):
            return float(value)
        if not is_numeric(value):
            raise FieldValueError(public_message=(
                '"{}" is not a valid number'.format(ascii_str(value))))
        if isinstance(value, (bytes, bytearray)):
            value = value.decode('utf-8')
        return float(value)


class UnicodeField(Field):

    """
    For arbitrary text data.

    Numbers are converted to their decimal representations; booleans
    -- to ``'true'``/``'false'``; :class:`bytes`/:class:`bytearray`
    values are decoded using the :attr:`encoding` (UTF-8 by default).

    >>> f = UnicodeField()
    >>> f.coerce_scalar(123), f.coerce_scalar(False), f.coerce_scalar(b'abc')
    ('123', 'false', 'abc')
    """

    encoding = 'utf-8'
    decode_error_handling = 'strict'

    def coerce_scalar(self, value):
        if value is None:
            return None
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, (bytes, bytearray)):
            try:
                return value.decode(self.encoding, self.decode_error_handling)
            except UnicodeError:
                raise FieldValueError(public_message=(
                    '"{}" cannot be decoded with encoding "{}"'.format(
                        ascii_str(value),
                        self.encoding))) from None
        return str(value)


class FlagField(Field):

    """
    For *YES/NO* flags, normalized to :class:`bool`.

    Booleans are kept; other values are converted to :class:`str` and
    looked up in the *YES/NO* vocabulary of
    :func:`shapecast.encoding_helpers.str_to_bool` (so, among others,
    ``1``, ``0``, ``'yes'``, ``'True'`` or ``'off'`` are OK).

    >>> f = FlagField()
    >>> f.coerce_scalar(True), f.coerce_scalar('yes'), f.coerce_scalar(0)
    (True, True, False)
    """

    def coerce_scalar(self, value):
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, (bytes, bytearray)):
            value = value.decode('utf-8', 'replace')
        try:
            return str_to_bool(str(value))
        except ValueError as exc:
            raise FieldValueError(public_message=str(exc)) from None



#
# Structural field classes

class ObjectField(Field):

    """
    For a nested object of a declared type.

    The declared type (`type_ref`, the only positional argument) is
    either a class (or any other callable taking no arguments and
    returning a new target instance) or a type name registered in a
    :class:`~shapecast.registry.TypeRegistry`.
    """

    declares_custom_type = True

    def __init__(self, type_ref=None, **kwargs):
        if type_ref is not None:
            kwargs['type_ref'] = type_ref
        super(ObjectField, self).__init__(**kwargs)
        if self.type_ref is None:
            raise TypeError("'type_ref' not specified for {} "
                            "(neither as a class attribute nor "
                            "as a constructor argument)"
                            .format(self.__class__.__qualname__))
        _check_type_ref(self, 'type_ref', self.type_ref)


class GenericObjectField(Field):

    """
    For a nested keyed structure to be kept verbatim (as a *generic
    object*, with no coercion of its contents).
    """

    keeps_raw_structure = True


class ListField(Field):

    """
    For an ordered list.

    Elements being keyed structures are bound to new instances of the
    `element_type` (the only positional argument) if it is specified;
    otherwise the element type is derived from the field name by naming
    convention (see :meth:`shapecast.registry.TypeResolver.resolve_by_convention`).
    Elements whose type cannot be resolved, as well as any other
    elements, are kept verbatim.

    The default value is a new empty list.

    >>> ListField().get_default()
    []
    """

    def __init__(self, element_type=None, **kwargs):
        if element_type is not None:
            kwargs['element_type'] = element_type
        kwargs.setdefault('default_factory', list)
        super(ListField, self).__init__(**kwargs)
        if self.element_type is not None:
            _check_type_ref(self, 'element_type', self.element_type)
