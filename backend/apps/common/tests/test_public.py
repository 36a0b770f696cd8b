import json
import tempfile
from pathlib import Path

from django.test import SimpleTestCase, override_settings


class PublicFilesTests(SimpleTestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.public = Path(self._tmp.name)
        (self.public / 'index.html').write_text('<h1>Buket</h1>', encoding='utf-8')
        (self.public / 'css').mkdir()
        (self.public / 'css' / 'site.css').write_text('body {}', encoding='utf-8')

    def test_root_serves_index_page(self):
        with override_settings(PUBLIC_DIR=self.public):
            res = self.client.get('/')
            body = b''.join(res.streaming_content)
        self.assertEqual(res.status_code, 200)
        self.assertIn(b'Buket', body)

    def test_nested_static_file_is_served(self):
        with override_settings(PUBLIC_DIR=self.public):
            res = self.client.get('/css/site.css')
            body = b''.join(res.streaming_content)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(body, b'body {}')

    def test_missing_file_returns_error_envelope(self):
        with override_settings(PUBLIC_DIR=self.public):
            res = self.client.get('/nope.js')
        self.assertEqual(res.status_code, 404)
        payload = json.loads(res.content)
        self.assertEqual(payload['code'], 'NOT_FOUND')
        self.assertEqual(payload['details'], {'path': '/nope.js'})

    def test_missing_index_returns_404(self):
        (self.public / 'index.html').unlink()
        with override_settings(PUBLIC_DIR=self.public):
            res = self.client.get('/')
        self.assertEqual(res.status_code, 404)


class UnknownApiRouteTests(SimpleTestCase):
    def test_unknown_api_route_returns_error_envelope(self):
        res = self.client.get('/api/flowers')
        self.assertEqual(res.status_code, 404)
        self.assertEqual(
            json.loads(res.content),
            {'error': 'Resource not found', 'code': 'NOT_FOUND', 'details': {'path': '/api/flowers'}},
        )
