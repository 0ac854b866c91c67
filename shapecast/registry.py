# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Type registration and resolution.

Target types are looked up in an explicit, closed
:class:`TypeRegistry` (a mapping of dotted type names to factories,
populated by the caller) -- never by importing arbitrary names.

>>> registry = TypeRegistry()
>>> class LineItem(object):
...     pass
...
>>> registry.register(LineItem, name='shop.models.LineItem') is LineItem
True
>>> resolver = TypeResolver(registry, namespace_root='shop.models')
>>> resolver.derive_type_name('line_items')
'shop.models.LineItem'
>>> resolver.resolve_by_convention('line_items') is LineItem
True
>>> resolver.resolve_by_convention('coupons') is None
True
"""

import functools

from shapecast.encoding_helpers import ascii_str
from shapecast.exceptions import (
    DeclaredTypeLookupError,
    TypeRegistrationError,
)
from shapecast.name_helpers import (
    classify,
    singularize,
)



def default_type_name(factory):
    """
    Get the default registration name of the given class (or other
    factory): its module name and qualified name, dot-separated.

    >>> default_type_name(TypeRegistry)
    'shapecast.registry.TypeRegistry'
    """
    return '{}.{}'.format(factory.__module__, factory.__qualname__)


def normalize_namespace_root(namespace_root):
    """
    >>> normalize_namespace_root(' shop.models. ')
    'shop.models'
    >>> normalize_namespace_root('') is None
    True
    >>> normalize_namespace_root(None) is None
    True
    """
    if namespace_root is None:
        return None
    return namespace_root.strip().rstrip('.') or None


class TypeRegistry(object):

    """
    A registry of target types: maps type names to factories (typically
    classes; any callable that takes no arguments and returns a new
    target instance is OK).

    Types can be registered with :meth:`register` -- which can also be
    used as a class decorator (with or without the `name` argument):

    >>> registry = TypeRegistry()
    >>> @registry.register
    ... class Owner(object):
    ...     pass
    ...
    >>> @registry.register(name='github.Repository')
    ... class Repo(object):
    ...     pass
    ...
    >>> sorted(registry.names())
    ['github.Repository', 'shapecast.registry.Owner']
    >>> registry.lookup('github.Repository') is Repo
    True
    >>> registry.lookup('github.Issue') is None
    True
    """

    def __init__(self):
        self._name_to_factory = {}

    def __repr__(self):
        return '<{} with {} type(s)>'.format(self.__class__.__qualname__,
                                            len(self._name_to_factory))

    def __contains__(self, name):
        return name in self._name_to_factory

    def __len__(self):
        return len(self._name_to_factory)

    def names(self):
        return frozenset(self._name_to_factory)

    def register(self, factory=None, name=None):
        """
        Register the given factory (class) under the given `name`
        (default: see :func:`default_type_name`).

        Returns:
            The given factory (or, if called without it, a decorator).

        Raises:
            :exc:`~shapecast.exceptions.TypeRegistrationError` if
            another factory has already been registered with that name.
        """
        if factory is None:
            return functools.partial(self.register, name=name)
        if not callable(factory):
            raise TypeError('{!a} is not callable'.format(factory))
        if name is None:
            name = default_type_name(factory)
        already_registered = self._name_to_factory.get(name)
        if already_registered is not None and already_registered is not factory:
            raise TypeRegistrationError(
                name, factory,
                public_message='Type name "{}" is already registered (for {!a}).'.format(
                    ascii_str(name),
                    already_registered))
        self._name_to_factory[name] = factory
        return factory

    def register_all(self, *factories):
        for factory in factories:
            self.register(factory)

    def lookup(self, name):
        """Get the factory registered with `name`, or :obj:`None`."""
        return self._name_to_factory.get(name)


class TypeResolver(object):

    """
    Determines the concrete target type to instantiate.

    There are two independent resolution paths:

    * the *declared-type path* (:meth:`resolve_declared`), used for
      single nested object fields;
    * the *convention path* (:meth:`resolve_by_convention`), used for
      elements of lists with no declared element type.

    Both produce a factory, or :obj:`None` if no matching type exists
    ("unresolved" is a normal outcome, not a failure).
    """

    def __init__(self, registry, namespace_root=None):
        self.registry = registry
        self.namespace_root = normalize_namespace_root(namespace_root)

    def resolve_declared(self, field_name, field):
        """
        Resolve the type declared by the given field.

        Raises:
            :exc:`~shapecast.exceptions.DeclaredTypeLookupError` if
            the field does not declare any custom type (i.e., it is a
            generic/untyped, primitive or *generic object* field).
        """
        if field.keeps_raw_structure or not field.declares_custom_type:
            raise DeclaredTypeLookupError(field_name=field_name, field=field)
        return self.resolve_type_ref(field.type_ref)

    def resolve_type_ref(self, type_ref):
        """
        Resolve a type reference: a class/factory is returned as is;
        a name is looked up in the registry (first as given, then
        prefixed with the namespace root, if any).
        """
        if not isinstance(type_ref, str):
            return type_ref
        factory = self.registry.lookup(type_ref)
        if factory is None and self.namespace_root is not None:
            factory = self.registry.lookup(self.prefixed(type_ref))
        return factory

    def resolve_by_convention(self, field_name):
        """
        Resolve the type of list elements by deriving a type name from
        the name of the list field (see :meth:`derive_type_name`).

        If no namespace root is configured the result is always
        :obj:`None`.
        """
        if self.namespace_root is None:
            return None
        return self.registry.lookup(self.derive_type_name(field_name))

    def derive_type_name(self, field_name):
        """
        Get the (namespace-root-prefixed) type name derived from the
        name of a list field: singularized and then classified.
        """
        return self.prefixed(classify(singularize(field_name)))

    def prefixed(self, name):
        if self.namespace_root is None:
            return name
        return '{}.{}'.format(self.namespace_root, name)
