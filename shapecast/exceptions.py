# Copyright (c) 2025 shapecast developers. All rights reserved.

from shapecast.encoding_helpers import ascii_str


#
# Generic mix-ins
#

class _ErrorWithPublicMessageMixin(object):

    """
    A mix-in class that provides the :attr:`public_message` property.

    The value of this property is a :class:`str`.  It is taken either
    from the `public_message` constructor keyword argument or -- if the
    argument was not specified -- from the value of the
    :attr:`default_public_message` attribute.

    The :class:`str` conversion uses the value of :attr:`public_message`:

    >>> class SomeError(_ErrorWithPublicMessageMixin, Exception):
    ...     pass
    ...
    >>> str(SomeError('a', 'b'))  # using attribute default_public_message
    'Binding error.'
    >>> str(SomeError('a', 'b', public_message='Spam.'))
    'Spam.'

    The :func:`repr` conversion results in a programmer-readable
    representation:

    >>> SomeError('a', 'b')
    <SomeError: args=('a', 'b'); public_message='Binding error.'>
    """

    #: (overridable in subclasses)
    default_public_message = 'Binding error.'

    def __init__(self, *args, **kwargs):
        try:
            public_message = kwargs.pop('public_message')
        except KeyError:
            pass
        else:
            self._public_message = str(public_message)
        try:
            super(_ErrorWithPublicMessageMixin, self).__init__(*args, **kwargs)
        except TypeError:
            if kwargs:
                raise TypeError(
                    'illegal keyword arguments for {} constructor: {}'.format(
                        self.__class__.__name__,
                        ', '.join(sorted(map(repr, kwargs)))))
            else:
                raise

    @property
    def public_message(self):
        """The aforementioned property."""
        try:
            return self._public_message
        except AttributeError:
            # (in subclasses `default_public_message` can also be a @property)
            self._public_message = str(self.default_public_message)
            return self._public_message

    def __str__(self):
        return self.public_message

    def __repr__(self):
        return ('<{0.__class__.__name__}: args={0.args!r}; '
                'public_message={0.public_message!r}>'.format(self))


#
# Actual exception classes
#

class BindingError(_ErrorWithPublicMessageMixin, Exception):

    """
    The base class for all *shapecast*-specific exceptions.
    """


class FieldValueError(BindingError, ValueError):

    """
    Raised by :meth:`shapecast.fields.Field.coerce_scalar` when a
    scalar source value cannot be coerced to the field's declared type.

    Within :meth:`shapecast.binder.Binder.bind` the exception is caught
    and turned into a :class:`shapecast.binder.BindingIssue`.
    """


class DeclaredTypeLookupError(BindingError, LookupError):

    """
    Raised by :meth:`shapecast.registry.TypeResolver.resolve_declared`
    when a field that received a keyed structure does not declare a
    custom type at all (e.g., it is an untyped :class:`Field` or a
    primitive field).

    Instances are initialized with the keyword-only arguments:

    * `field_name` -- the name of the offending field;
    * `field` -- the offending :class:`shapecast.fields.Field` instance.

    >>> exc = DeclaredTypeLookupError(field_name='owner', field=None)
    >>> exc.field_name
    'owner'
    >>> str(exc)
    'Field "owner" does not declare a type a keyed structure could be bound to.'
    """

    def __init__(self, *args, **kwargs):
        self.field_name = kwargs.pop('field_name')
        self.field = kwargs.pop('field')
        kwargs.setdefault('public_message', (
            'Field "{}" does not declare a type a keyed '
            'structure could be bound to.'.format(ascii_str(self.field_name))))
        super(DeclaredTypeLookupError, self).__init__(*args, **kwargs)


class StrictBindingError(BindingError):

    """
    Raised by :meth:`shapecast.binder.Binder.bind` in the *strict* mode
    if any issues have been recorded.

    Instances are initialized with one argument being a list of
    :class:`shapecast.binder.BindingIssue` records; it is exposed as the
    :attr:`issues` attribute (for possible later inspection).
    """

    def __init__(self, issues):
        self.issues = issues
        super(StrictBindingError, self).__init__(
            issues,
            public_message='Binding failed for: {}.'.format(
                ', '.join(ascii_str(issue.path) for issue in issues)))


class TypeRegistrationError(BindingError, ValueError):

    """
    Raised by :class:`shapecast.registry.TypeRegistry` when a type
    cannot be registered (e.g., its name is already taken).
    """


class ConfigError(BindingError):

    """
    Raised by :mod:`shapecast.config` when configuration cannot be
    obtained (e.g., a config file or section is missing).
    """

    default_public_message = 'Configuration error.'


class APIClientError(BindingError):

    """
    Raised by :class:`shapecast.client.APIClient` when the remote data
    cannot be obtained or decoded.
    """

    default_public_message = 'Could not obtain data from the remote API.'
