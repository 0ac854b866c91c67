# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
The recursive binding engine.

>>> from shapecast.fields import IntegerField, ListField, UnicodeField
>>> from shapecast.model import BoundModel
>>> class Sample(BoundModel):
...     sampleInt = IntegerField()
...     sampleString = UnicodeField()
...     items = ListField()
...
>>> sample = Sample()
>>> Binder().bind(sample, {
...     'sampleInt': '5',
...     'sampleString': 123,
...     'items': [{'name': 'Item1'}, {'name': 'Item2'}],
...     'unknown': 'dropped',
... })
[]
>>> sample
Sample(sampleInt=5, sampleString='123', items=[{'name': 'Item1'}, {'name': 'Item2'}])
"""

import collections
import logging

from pyramid.decorator import reify

from shapecast.encoding_helpers import ascii_str
from shapecast.exceptions import (
    DeclaredTypeLookupError,
    FieldValueError,
    StrictBindingError,
)
from shapecast.model import get_field_specs
from shapecast.registry import (
    TypeRegistry,
    TypeResolver,
    normalize_namespace_root,
)
from shapecast.values import (
    KEYED_STRUCTURE,
    ORDERED_LIST,
    SCALAR,
    classify_value,
    iter_keyed_items,
)


LOGGER = logging.getLogger(__name__)


class BindingIssue(collections.namedtuple('BindingIssue', 'path, field_name, value, exc')):

    """
    A record of a field whose binding has been abandoned.

    Fields:
        `path`:
            The dotted path of the field, starting with the name of
            the top-level target type (e.g., ``'Order.owner.address'``;
            list elements are denoted with ``[<index>]``).
        `field_name`:
            The name of the field.
        `value`:
            The offending source value.
        `exc`:
            The exception that caused the binding to be abandoned (a
            :exc:`~shapecast.exceptions.DeclaredTypeLookupError` or a
            :exc:`~shapecast.exceptions.FieldValueError`).
    """


class Binder(object):

    """
    Binds loosely-typed source data onto instances of target types.

    Constructor args/kwargs:
        `registry` (optional; default: a new empty registry):
            A :class:`~shapecast.registry.TypeRegistry` to look up
            type names in.
        `namespace_root` (optional; default: :obj:`None`):
            The namespace (dotted module path) type names derived by
            naming convention are prefixed with; if not specified,
            resolution by convention always yields "unresolved" (so the
            raw list elements are kept).
        `strict` (optional; default: :obj:`False`):
            If true, :meth:`bind` raises
            :exc:`~shapecast.exceptions.StrictBindingError` when any
            binding issues have been recorded.

    A binder holds no per-call state, so the same instance can be used
    to perform many (also concurrent) bindings.
    """

    def __init__(self, registry=None, namespace_root=None, strict=False):
        self.registry = registry if registry is not None else TypeRegistry()
        self.namespace_root = normalize_namespace_root(namespace_root)
        self.strict = strict

    def __repr__(self):
        return '{}(registry={!r}, namespace_root={!r}, strict={!r})'.format(
            self.__class__.__qualname__,
            self.registry,
            self.namespace_root,
            self.strict)

    @reify
    def resolver(self):
        return TypeResolver(self.registry, self.namespace_root)


    #
    # public methods

    def bind(self, target, source):
        """
        Populate the target instance with data from the source.

        Args:
            `target`:
                An instance of a target type (a class declaring fields,
                see :mod:`shapecast.fields`).
            `source`:
                A keyed structure (typically a :class:`dict`) or
                :obj:`None` (then nothing is done).

        Returns:
            A list of :class:`BindingIssue` records (empty if all
            fields have been bound successfully).

        Raises:
            :exc:`~shapecast.exceptions.StrictBindingError`:
                only in the *strict* mode, if any issues have been
                recorded (all fields that could be bound have been
                bound anyway).
            :exc:`~exceptions.TypeError`:
                if `source` is neither a keyed structure nor :obj:`None`.

        Only the fields declared by the target's type are ever assigned;
        source keys that do not match any declared field are ignored.
        The source data is never modified.
        """
        issues = []
        self._bind(target, source, issues, path=type(target).__qualname__)
        self._handle_issues(issues)
        return issues

    def build_object(self, resolved_type, raw_value):
        """
        Build a new instance of `resolved_type` bound from `raw_value`.

        If `resolved_type` is :obj:`None` ("unresolved"), `raw_value`
        itself is returned (*structural passthrough*).

        Issues are handled as in :meth:`bind` (logged; or, in the
        *strict* mode, raised).
        """
        issues = []
        path = (resolved_type.__qualname__
                if resolved_type is not None and hasattr(resolved_type, '__qualname__')
                else '<object>')
        obj = self._build_object(resolved_type, raw_value, issues, path)
        self._handle_issues(issues)
        return obj


    #
    # non-public internals

    def _bind(self, target, source, issues, path):
        if source is None:
            return
        if classify_value(source) != KEYED_STRUCTURE:
            raise TypeError('{!a} is neither a keyed structure nor None'.format(source))
        field_specs = get_field_specs(type(target))
        for key, value in iter_keyed_items(source):
            field = field_specs.get(key)
            if field is None:
                continue
            field_path = '{}.{}'.format(path, key)
            try:
                bound_value = self._bind_value(key, field, value, issues, field_path)
            except (DeclaredTypeLookupError, FieldValueError) as exc:
                self._record_issue(issues, field_path, key, value, exc)
            else:
                setattr(target, key, bound_value)

    def _bind_value(self, key, field, value, issues, path):
        kind = classify_value(value)
        if kind == SCALAR:
            return field.coerce_scalar(value)
        if kind == KEYED_STRUCTURE:
            return self._bind_keyed_structure(key, field, value, issues, path)
        if kind == ORDERED_LIST:
            return self._bind_ordered_list(key, field, value, issues, path)
        raise ValueError('unknown kind of value: {!a}'.format(kind))

    def _bind_keyed_structure(self, key, field, value, issues, path):
        if field.keeps_raw_structure:
            return value
        resolved_type = self.resolver.resolve_declared(key, field)
        if resolved_type is None:
            LOGGER.debug('%s: declared type %a not registered -- '
                         'keeping the raw structure',
                         path, field.type_ref)
        return self._build_object(resolved_type, value, issues, path)

    def _bind_ordered_list(self, key, field, values, issues, path):
        bound_values = []
        resolved_type = unresolved = object()
        for i, value in enumerate(values):
            if classify_value(value) == KEYED_STRUCTURE:
                if resolved_type is unresolved:
                    resolved_type = self._resolve_element_type(key, field, path)
                value = self._build_object(resolved_type, value, issues,
                                           '{}[{}]'.format(path, i))
            bound_values.append(value)
        return bound_values

    def _resolve_element_type(self, key, field, path):
        if field.element_type is not None:
            resolved_type = self.resolver.resolve_type_ref(field.element_type)
        else:
            resolved_type = self.resolver.resolve_by_convention(key)
        if resolved_type is None:
            LOGGER.debug('%s: no element type resolved (%s) -- '
                         'keeping the raw elements',
                         path,
                         ('declared: {!a}'.format(field.element_type)
                          if field.element_type is not None
                          else 'derived: {!a}'.format(self.resolver.derive_type_name(key))))
        return resolved_type

    def _build_object(self, resolved_type, raw_value, issues, path):
        if resolved_type is None:
            return raw_value
        obj = resolved_type()
        self._bind(obj, raw_value, issues, path)
        return obj

    def _record_issue(self, issues, path, field_name, value, exc):
        LOGGER.warning('Binding of %s abandoned (%s)', path, ascii_str(exc))
        issues.append(BindingIssue(path, field_name, value, exc))

    def _handle_issues(self, issues):
        if issues and self.strict:
            raise StrictBindingError(issues)
