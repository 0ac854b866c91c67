# Copyright (c) 2025 shapecast developers. All rights reserved.

import datetime
import decimal
import json
import unittest

from pyramid import testing
from pyramid.renderers import render

from shapecast.renderers import (
    RENDERER_NAME,
    ModelJSONRenderer,
    data_with_nulls_removed,
    model_to_json,
)
from shapecast.tests._models import (
    Item,
    Order,
    Owner,
)


class Test_model_to_json(unittest.TestCase):

    def test_model(self):
        result = json.loads(model_to_json(Owner(login='octocat', id=1)))
        self.assertEqual(result, {'login': 'octocat', 'id': 1, 'address': None})

    def test_list_of_models(self):
        result = json.loads(model_to_json([Item(name='a'), Item(name='b', quantity=2)]))
        self.assertEqual(result, [{'name': 'a', 'quantity': 1}, {'name': 'b', 'quantity': 2}])

    def test_skip_nulls(self):
        result = json.loads(model_to_json(Owner(login='octocat'), skip_nulls=True))
        self.assertEqual(result, {'login': 'octocat'})

    def test_json_kwargs(self):
        self.assertEqual(model_to_json(Item(name='a'), sort_keys=True, indent=1),
                         '{\n "name": "a",\n "quantity": 1\n}')

    def test_special_values(self):
        result = json.loads(model_to_json({
            'naive': datetime.datetime(2025, 6, 19, 10, 22, 42),
            'aware': datetime.datetime(2025, 6, 19, 10, 22, 42, tzinfo=datetime.timezone.utc),
            'date': datetime.date(2025, 6, 19),
            'decimal': decimal.Decimal('1.10'),
        }))
        self.assertEqual(result, {
            'naive': '2025-06-19T10:22:42Z',
            'aware': '2025-06-19T10:22:42+00:00',
            'date': '2025-06-19',
            'decimal': '1.10',
        })

    def test_not_serializable(self):
        with self.assertRaises(TypeError):
            model_to_json({'x': {1, 2}})


class Test_data_with_nulls_removed(unittest.TestCase):

    def test(self):
        self.assertEqual(
            data_with_nulls_removed({'a': None, 'b': [None, False, {'c': None, 'd': 0}], 'e': {}}),
            {'b': [False, {'d': 0}], 'e': {}})

    def test_not_a_container(self):
        self.assertEqual(data_with_nulls_removed('x'), 'x')


class TestModelJSONRenderer(unittest.TestCase):

    def test_sets_content_type(self):
        request = testing.DummyRequest()
        result = ModelJSONRenderer()(None)(Item(name='a'), {'request': request})
        self.assertEqual(json.loads(result), {'name': 'a', 'quantity': 1})
        self.assertEqual(request.response.content_type, 'application/json')

    def test_keeps_explicit_content_type(self):
        request = testing.DummyRequest()
        request.response.content_type = 'text/plain'
        ModelJSONRenderer()(None)(Item(name='a'), {'request': request})
        self.assertEqual(request.response.content_type, 'text/plain')

    def test_without_request(self):
        result = ModelJSONRenderer(skip_nulls=True)(None)(Owner(login='x'), {})
        self.assertEqual(json.loads(result), {'login': 'x'})


class Test_includeme(unittest.TestCase):

    def setUp(self):
        self.config = testing.setUp()
        self.config.include('shapecast.renderers')
        self.config.commit()

    def tearDown(self):
        testing.tearDown()

    def test_renderer_registered(self):
        result = render(RENDERER_NAME, Order(id=1, owner=Owner(login='x')))
        data = json.loads(result)
        self.assertEqual(data['id'], 1)
        self.assertEqual(data['owner'], {'login': 'x', 'id': None, 'address': None})
        self.assertEqual(data['items'], [])
