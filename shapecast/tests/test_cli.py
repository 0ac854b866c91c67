# Copyright (c) 2025 shapecast developers. All rights reserved.

import io
import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import (
    call,
    patch,
)

from unittest_expander import (
    expand,
    foreach,
    param,
)

from shapecast.cli import (
    bind_data,
    import_model,
    main,
)
from shapecast.binder import Binder
from shapecast.exceptions import ConfigError
from shapecast.tests._models import (
    NAMESPACE,
    Item,
    Order,
    registry,
)


ORDER_SPEC = 'shapecast.tests._models:Order'


@expand
class Test_import_model(unittest.TestCase):

    def test_ok(self):
        self.assertEqual(import_model(ORDER_SPEC), (Order, registry))

    @foreach(
        param('shapecast.tests._models'),
        param('shapecast.tests._models:'),
        param(':Order'),
        param('shapecast.tests.no_such_module:Order'),
        param('shapecast.tests._models:NoSuchClass'),
        param('shapecast.fields:Field'),   # (no `registry` there)
    )
    def test_error(self, spec):
        with self.assertRaises(ConfigError):
            import_model(spec)


class Test_bind_data(unittest.TestCase):

    def setUp(self):
        self.binder = Binder(registry, namespace_root=NAMESPACE)

    def test_object(self):
        result, issues = bind_data(self.binder, Item, {'name': 'x', 'quantity': 'many'})
        self.assertEqual(result, Item(name='x'))
        self.assertEqual([issue.path for issue in issues], ['Item.quantity'])

    def test_list(self):
        result, issues = bind_data(self.binder, Item, [{'name': 'x'}, 42, {'quantity': 'y'}])
        self.assertEqual(result, [Item(name='x'), 42, Item()])
        self.assertEqual([issue.path for issue in issues], ['Item.quantity'])

    def test_null(self):
        result, issues = bind_data(self.binder, Item, None)
        self.assertEqual(result, Item())
        self.assertEqual(issues, [])

    def test_neither_object_nor_list(self):
        for data in ['just text', 5, True]:
            with self.assertRaises(ConfigError):
                bind_data(self.binder, Item, data)


@expand
class Test_main(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp_dir)
        self._patch('shapecast.cli.logging.basicConfig')
        self._patch_dict(os.environ, {}, clear=True)
        self.stdout = self._patch('sys.stdout', new_callable=io.StringIO)
        self.stderr = self._patch('sys.stderr', new_callable=io.StringIO)

    def _patch(self, *args, **kwargs):
        patcher = patch(*args, **kwargs)
        patched = patcher.start()
        self.addCleanup(patcher.stop)
        return patched

    def _patch_dict(self, *args, **kwargs):
        patcher = patch.dict(*args, **kwargs)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _write(self, filename, content):
        path = os.path.join(self.tmp_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def _output(self):
        return json.loads(self.stdout.getvalue())

    def test_file_source(self):
        path = self._write('order.json', json.dumps({
            'id': '3',
            'items': [{'name': 'Item1'}],
            'coupons': [{'code': 'SPRING'}],
        }))
        exit_code = main([ORDER_SPEC, path, '--namespace', NAMESPACE])
        self.assertEqual(exit_code, 0)
        output = self._output()
        self.assertEqual(output['id'], 3)
        self.assertEqual(output['items'], [{'name': 'Item1', 'quantity': 1}])
        self.assertEqual(output['coupons'], [{'code': 'SPRING'}])
        self.assertEqual(self.stderr.getvalue(), '')

    def test_stdin_source_and_env_config(self):
        os.environ['API_MODEL_NAMESPACE'] = NAMESPACE
        with patch('sys.stdin', io.StringIO('[{"name": "a"}, {"name": "b", "quantity": 2}]')):
            exit_code = main(['shapecast.tests._models:Item', '-'])
        self.assertEqual(exit_code, 0)
        self.assertEqual(self._output(), [{'name': 'a', 'quantity': 1},
                                          {'name': 'b', 'quantity': 2}])

    def test_config_file(self):
        config_path = self._write('shapecast.ini',
                                  '[shapecast]\nmodel_namespace = {}\n'.format(NAMESPACE))
        path = self._write('order.json', '{"items": [{"name": "Item1"}]}')
        exit_code = main([ORDER_SPEC, path, '-c', config_path])
        self.assertEqual(exit_code, 0)
        self.assertEqual(self._output()['items'], [{'name': 'Item1', 'quantity': 1}])

    def test_url_source(self):
        with patch('shapecast.cli.APIClient') as APIClient_mock:
            client = APIClient_mock.return_value.__enter__.return_value
            client.get_json.return_value = {'id': 7}
            exit_code = main([ORDER_SPEC, 'https://api.example.com/orders/7'])
        self.assertEqual(exit_code, 0)
        self.assertEqual(client.get_json.mock_calls, [call('https://api.example.com/orders/7')])
        self.assertEqual(self._output()['id'], 7)

    def test_issues_reported(self):
        path = self._write('order.json', '{"id": "abc", "comment": "ok"}')
        exit_code = main([ORDER_SPEC, path])
        self.assertEqual(exit_code, 0)
        self.assertIn('WARNING: Order.id:', self.stderr.getvalue())
        self.assertEqual(self._output()['comment'], 'ok')

    def test_strict(self):
        path = self._write('order.json', '{"id": "abc", "comment": "ok"}')
        exit_code = main([ORDER_SPEC, path, '--strict'])
        self.assertEqual(exit_code, 1)
        self.assertIn('ERROR: Binding failed for: Order.id.', self.stderr.getvalue())
        self.assertEqual(self.stdout.getvalue(), '')

    def test_strict_from_env(self):
        os.environ['SHAPECAST_STRICT'] = 'yes'
        path = self._write('order.json', '{"id": "abc"}')
        self.assertEqual(main([ORDER_SPEC, path]), 1)

    @foreach(
        param(content='{"id": 1', model_spec=ORDER_SPEC),
        param(content=None, model_spec=ORDER_SPEC),
        param(content='{}', model_spec='shapecast.tests._models.Order'),
        param(content='"just text"', model_spec=ORDER_SPEC),
        param(content='5', model_spec=ORDER_SPEC),
        param(content='true', model_spec=ORDER_SPEC),
    )
    def test_errors(self, content, model_spec):
        if content is None:
            path = os.path.join(self.tmp_dir, 'no-such-file.json')
        else:
            path = self._write('order.json', content)
        exit_code = main([model_spec, path])
        self.assertEqual(exit_code, 1)
        self.assertTrue(self.stderr.getvalue().startswith('ERROR: '))
