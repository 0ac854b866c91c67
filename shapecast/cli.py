# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
The *shapecast_bind* command line tool: binds a JSON document (from a
file, the standard input or a URL) onto a target type and prints the
result as JSON.

The target type is specified as ``<module>:<class name>``; the module
must expose a :class:`~shapecast.registry.TypeRegistry` instance as its
``registry`` attribute (it is used to resolve nested types).
"""

import argparse
import importlib
import json
import logging
import sys

from shapecast.client import APIClient
from shapecast.config import BinderConfig
from shapecast.encoding_helpers import ascii_str
from shapecast.exceptions import (
    BindingError,
    ConfigError,
)
from shapecast.registry import (
    TypeRegistry,
    normalize_namespace_root,
)
from shapecast.renderers import model_to_json
from shapecast.values import (
    KEYED_STRUCTURE,
    classify_value,
)


LOGGER = logging.getLogger(__name__)


def import_model(spec):
    """
    Get the (class, registry) pair for the given ``<module>:<class name>``
    specification.

    Raises:
        :exc:`~shapecast.exceptions.ConfigError` if the specification
        is malformed, or the module or class cannot be found, or the
        module does not expose a ``registry``.
    """
    module_name, sep, class_name = spec.partition(':')
    if not (module_name and sep and class_name):
        raise ConfigError(spec, public_message=(
            'Model must be specified as "<module>:<class name>" (got: "{}").'.format(spec)))
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(spec, exc, public_message=(
            'Cannot import module "{}" ({}).'.format(module_name, exc))) from exc
    model = module
    for attr_name in class_name.split('.'):
        model = getattr(model, attr_name, None)
        if model is None:
            raise ConfigError(spec, public_message=(
                'Module "{}" has no attribute "{}".'.format(module_name, class_name)))
    registry = getattr(module, 'registry', None)
    if not isinstance(registry, TypeRegistry):
        raise ConfigError(spec, public_message=(
            'Module "{}" does not expose a type registry '
            '(as its `registry` attribute).'.format(module_name)))
    return model, registry


def load_source(source, binder):
    if source.startswith(('http://', 'https://')):
        with APIClient(source, binder=binder) as client:
            return client.get_json(source)
    try:
        if source == '-':
            return json.load(sys.stdin)
        with open(source, encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(source, exc, public_message=(
            'Cannot load JSON data from "{}" ({}).'.format(source, exc))) from exc


def get_config(args):
    if args.config:
        config = BinderConfig.from_file(args.config)
    else:
        config = BinderConfig.from_env()
    if args.namespace is not None:
        config.namespace_root = normalize_namespace_root(args.namespace)
    if args.strict:
        config.strict = True
    return config


def bind_data(binder, model, data):
    """
    Bind `data` onto a new `model` instance (or, if `data` is a list, each
    of its keyed elements onto a new `model` instance).

    Returns:
        A (result, issues) pair.

    Raises:
        :exc:`~shapecast.exceptions.ConfigError` if `data` is neither
        a list nor a keyed structure (nor :obj:`None`).
    """
    if isinstance(data, list):
        results = []
        issues = []
        for item in data:
            if classify_value(item) == KEYED_STRUCTURE:
                instance = model()
                issues.extend(binder.bind(instance, item))
                item = instance
            results.append(item)
        return results, issues
    if data is not None and classify_value(data) != KEYED_STRUCTURE:
        raise ConfigError(data, public_message=(
            'The data to bind must be a JSON object or array (got: {}).'
            .format(ascii_str(data))))
    instance = model()
    return instance, binder.bind(instance, data)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='shapecast_bind',
        description='Bind a JSON document onto a target type and print the result.')
    parser.add_argument(
        'model',
        help='the target type, as "<module>:<class name>"')
    parser.add_argument(
        'source',
        help='a JSON file path, "-" (standard input) or an http(s):// URL')
    parser.add_argument(
        '-c', '--config',
        help='read the [shapecast] section of the specified ini file '
             '(by default, the environment variables are used)')
    parser.add_argument(
        '-n', '--namespace',
        help='the namespace root for type names derived by convention')
    parser.add_argument(
        '--strict',
        action='store_true',
        help='fail if any field cannot be bound')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='be more descriptive')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=(logging.DEBUG if args.verbose else logging.WARNING),
        format='%(levelname)s %(name)s: %(message)s')
    try:
        config = get_config(args)
        model, registry = import_model(args.model)
        binder = config.make_binder(registry)
        data = load_source(args.source, binder)
        result, issues = bind_data(binder, model, data)
    except BindingError as exc:
        LOGGER.debug('Binding aborted', exc_info=True)
        print('ERROR: {}'.format(exc), file=sys.stderr)
        return 1
    for issue in issues:
        print('WARNING: {}: {}'.format(issue.path, issue.exc), file=sys.stderr)
    print(model_to_json(result, indent=4))
    return 0


if __name__ == '__main__':
    sys.exit(main())
