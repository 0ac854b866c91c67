# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
Obtaining the binder configuration: the *namespace root* (used to
resolve list element types by naming convention) and the *strict* flag.

The configuration can be taken from the environment:

>>> config = BinderConfig.from_env({'API_MODEL_NAMESPACE': 'shop.models'})
>>> config
BinderConfig(namespace_root='shop.models', strict=False)
>>> BinderConfig.from_env({'API_MODEL_NAMESPACE': ''})
BinderConfig(namespace_root=None, strict=False)

...or from an ini file, e.g.::

    [shapecast]
    model_namespace = shop.models
    strict = no

Note that the configuration is never consulted implicitly by the
binding engine: it is just a source of values to be injected into a
:class:`~shapecast.binder.Binder` (see :meth:`BinderConfig.make_binder`).
"""

import configparser
import logging
import os

from shapecast.binder import Binder
from shapecast.encoding_helpers import (
    ascii_str,
    str_to_bool,
)
from shapecast.exceptions import ConfigError
from shapecast.registry import normalize_namespace_root


LOGGER = logging.getLogger(__name__)


NAMESPACE_ENV_VAR = 'API_MODEL_NAMESPACE'
STRICT_ENV_VAR = 'SHAPECAST_STRICT'

DEFAULT_CONFIG_SECTION = 'shapecast'
NAMESPACE_CONFIG_OPTION = 'model_namespace'
STRICT_CONFIG_OPTION = 'strict'


class BinderConfig(object):

    def __init__(self, namespace_root=None, strict=False):
        self.namespace_root = normalize_namespace_root(namespace_root)
        self.strict = bool(strict)

    def __repr__(self):
        return '{}(namespace_root={!r}, strict={!r})'.format(
            self.__class__.__qualname__,
            self.namespace_root,
            self.strict)

    def __eq__(self, other):
        if not isinstance(other, BinderConfig):
            return NotImplemented
        return (self.namespace_root == other.namespace_root and
                self.strict == other.strict)

    __hash__ = None

    @classmethod
    def from_env(cls, environ=None):
        """
        Get the configuration from environment variables:
        :data:`NAMESPACE_ENV_VAR` and :data:`STRICT_ENV_VAR` (empty or
        unset variables mean: no namespace root, non-strict mode).

        Raises:
            :exc:`~shapecast.exceptions.ConfigError` if the value of
            the strict flag variable is not a valid *YES/NO* flag.
        """
        if environ is None:
            environ = os.environ
        return cls(
            namespace_root=environ.get(NAMESPACE_ENV_VAR),
            strict=cls._parse_flag(environ.get(STRICT_ENV_VAR, ''), STRICT_ENV_VAR))

    @classmethod
    def from_file(cls, path, section=DEFAULT_CONFIG_SECTION):
        """
        Get the configuration from the specified `section` of the ini
        file at the given `path` (options: :data:`NAMESPACE_CONFIG_OPTION`
        and :data:`STRICT_CONFIG_OPTION`, both optional).

        Raises:
            :exc:`~shapecast.exceptions.ConfigError` if the file cannot
            be read or parsed, or the section is missing, or the value
            of the strict flag option is not a valid *YES/NO* flag.
        """
        parser = configparser.ConfigParser()
        try:
            with open(path, encoding='utf-8') as f:
                parser.read_file(f, source=path)
        except (OSError, UnicodeError, configparser.Error) as exc:
            raise ConfigError(path, exc, public_message=(
                'Cannot read the config file "{}" ({}).'.format(
                    ascii_str(path),
                    ascii_str(exc)))) from exc
        if not parser.has_section(section):
            raise ConfigError(path, section, public_message=(
                'The config file "{}" has no section [{}].'.format(
                    ascii_str(path),
                    ascii_str(section))))
        LOGGER.debug('Reading the [%s] section of the config file %a', section, path)
        return cls(
            namespace_root=parser.get(section, NAMESPACE_CONFIG_OPTION, fallback=None),
            strict=cls._parse_flag(
                parser.get(section, STRICT_CONFIG_OPTION, fallback=''),
                '{}.{}'.format(section, STRICT_CONFIG_OPTION)))

    def make_binder(self, registry):
        """Get a new :class:`~shapecast.binder.Binder` configured with this config."""
        return Binder(registry, namespace_root=self.namespace_root, strict=self.strict)

    @staticmethod
    def _parse_flag(raw_value, setting_name):
        if not raw_value.strip():
            return False
        try:
            return str_to_bool(raw_value)
        except ValueError as exc:
            raise ConfigError(setting_name, raw_value, public_message=(
                'Wrong value of {}: {}'.format(
                    ascii_str(setting_name),
                    ascii_str(exc)))) from None
