# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
JSON emission of target instances (the inverse direction of binding).

>>> from shapecast.fields import IntegerField, ObjectField, UnicodeField
>>> from shapecast.model import BoundModel
>>> class Owner(BoundModel):
...     login = UnicodeField()
...
>>> class Repository(BoundModel):
...     id = IntegerField()
...     owner = ObjectField(Owner)
...     description = UnicodeField()
...
>>> repo = Repository(id=7, owner=Owner(login='octocat'))
>>> model_to_json(repo, sort_keys=True)
'{"description": null, "id": 7, "owner": {"login": "octocat"}}'
>>> model_to_json(repo, skip_nulls=True, sort_keys=True)
'{"id": 7, "owner": {"login": "octocat"}}'

To make Pyramid views able to return target instances, include this
module in the Pyramid configuration (``config.include('shapecast.renderers')``)
and use ``renderer='shapecast_json'`` in the view configuration.
"""

import datetime
import decimal
import json

from shapecast.model import to_representation


RENDERER_NAME = 'shapecast_json'


#
# Helper functions

def _json_default(o):
    if isinstance(o, datetime.datetime):
        if o.tzinfo is None:
            return o.isoformat() + 'Z'
        return o.isoformat()
    if isinstance(o, datetime.date):
        return o.isoformat()
    if isinstance(o, decimal.Decimal):
        return str(o)
    raise TypeError(repr(o) + ' is not JSON serializable')


def _container_with_nulls_removed(obj):
    if isinstance(obj, dict):
        items = [
            (k, (_container_with_nulls_removed(v)
                 if isinstance(v, (dict, list))
                 else v))
            for k, v in obj.items()]
        return {k: v for k, v in items if v is not None}
    return [(_container_with_nulls_removed(v)
             if isinstance(v, (dict, list))
             else v)
            for v in obj
            if v is not None]


def data_with_nulls_removed(data):
    """
    Get a copy of the given plain data with :obj:`None` values removed
    from dicts and lists (recursively).

    .. note::

       Unlike :obj:`None`, other false values -- such as ``0``,
       :obj:`False` or empty strings/lists/dicts -- are *not* removed.

    >>> data_with_nulls_removed({'a': None, 'b': [None, 0, {'c': None}], 'd': ''})
    {'b': [0, {}], 'd': ''}
    >>> data_with_nulls_removed(None) is None
    True
    """
    if isinstance(data, (dict, list)):
        return _container_with_nulls_removed(data)
    return data


def model_to_json(obj, skip_nulls=False, **kwargs):
    r"""
    Serialize the given target instance (or a list of them, or any
    plain data) to JSON, using any additional keyword arguments as
    arguments for :func:`json.dumps`.

    Only the declared fields of target instances are included (see
    :func:`shapecast.model.to_representation`); :class:`datetime.datetime`,
    :class:`datetime.date` and :class:`decimal.Decimal` values are
    converted to strings.  If `skip_nulls` is true, :obj:`None` values
    are omitted.

    >>> model_to_json([{'when': datetime.datetime(2025, 6, 19, 10, 22, 42)}])
    '[{"when": "2025-06-19T10:22:42Z"}]'
    """
    data = to_representation(obj)
    if skip_nulls:
        data = data_with_nulls_removed(data)
    return json.dumps(data, default=_json_default, **kwargs)



#
# Pyramid integration

class ModelJSONRenderer(object):

    """
    A Pyramid renderer factory for target instances.

    Constructor kwargs are passed into :func:`model_to_json`.  The
    response content type is set to :attr:`content_type` unless the
    view set some other one explicitly.
    """

    content_type = 'application/json'

    def __init__(self, **json_kwargs):
        self.json_kwargs = json_kwargs

    def __call__(self, info):
        def _render(value, system):
            request = system.get('request')
            if request is not None:
                response = request.response
                if response.content_type == response.default_content_type:
                    response.content_type = self.content_type
            return model_to_json(value, **self.json_kwargs)
        return _render


def includeme(config):
    """Register :class:`ModelJSONRenderer` as :data:`RENDERER_NAME`."""
    config.add_renderer(RENDERER_NAME, ModelJSONRenderer())
