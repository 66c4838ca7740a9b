import os
import shutil
import tempfile
from unittest import TestCase

from mock import patch
from pyramid.request import Request

from ..exceptions import StoreUnavailable
from ..utils import atomic_write, is_valid_title, require_post, text_error


@require_post
def posted(context, request):
    return 'ok'


@require_post
def posted_request(request):
    return 'ok'


class RequirePostTests(TestCase):

    def test_get_is_rejected(self):
        request = Request.blank('/save/go')
        info = posted(None, request)
        self.assertEqual(info.status_code, 405)
        self.assertEqual(info.headers['Allow'], 'POST')

    def test_wrong_content_type(self):
        headers = [('Content-Type', 'application/xml')]
        request = Request.blank('/save/go', headers=headers,
                                POST={'thing': 'thing'})
        info = posted(None, request)
        self.assertEqual(info.status_code, 406)
        self.assertEqual(info.headers['Accept'],
                         'application/x-www-form-urlencoded')

    def test_form_post(self):
        request = Request.blank('/save/go', POST={'mode': 'edit'})
        self.assertEqual(posted(None, request), 'ok')

    def test_request_only(self):
        request = Request.blank('/save/go', POST={'mode': 'edit'})
        self.assertEqual(posted_request(request), 'ok')


class TitleTests(TestCase):

    def test_valid(self):
        self.assertTrue(is_valid_title('go'))
        self.assertTrue(is_valid_title('Go-2-lang'))

    def test_invalid(self):
        self.assertFalse(is_valid_title(''))
        self.assertFalse(is_valid_title(None))
        self.assertFalse(is_valid_title('go lang'))
        self.assertFalse(is_valid_title('go_comment_x'))
        self.assertFalse(is_valid_title('go/../x'))


class TextErrorTests(TestCase):

    def test_body_and_type(self):
        info = text_error(400, 'Invalid kind: bogus')
        self.assertEqual(info.status_code, 400)
        self.assertEqual(info.content_type, 'text/plain')
        self.assertEqual(info.body, b'Invalid kind: bogus')


class AtomicWriteTests(TestCase):

    def setUp(self):
        self.root = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.root, ignore_errors=True)

    def test_creates_parents(self):
        path = os.path.join(self.root, 'a', 'b', 'file')
        atomic_write(path, 'content')
        with open(path, 'rb') as fh:
            self.assertEqual(fh.read(), b'content')

    def test_private_permissions(self):
        path = os.path.join(self.root, 'file')
        atomic_write(path, b'content')
        self.assertEqual(os.stat(path).st_mode & 0o777, 0o600)

    def test_failure_leaves_no_temporary_file(self):
        path = os.path.join(self.root, 'file')
        with patch('os.replace', side_effect=OSError('boom')):
            self.assertRaises(StoreUnavailable, atomic_write, path, b'x')
        self.assertEqual(os.listdir(self.root), [])

    def test_unwritable_directory(self):
        with patch('os.makedirs', side_effect=PermissionError('denied')):
            self.assertRaises(StoreUnavailable, atomic_write,
                              os.path.join(self.root, 'x', 'file'), b'x')
