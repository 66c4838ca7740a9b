import os
from unittest import TestCase

from mock import patch

from .mocks import TempBoard, go_body
from ..exceptions import InvalidAssessment, InvalidKind, InvalidTitle
from ..exceptions import NotFound, StoreUnavailable
from ..models.store import ASSESSMENT, COMMENT, EDIT
from ..models.store import parse_slot_name, slot_name

TOKEN = 'a' * 40
OTHER = 'b' * 40


class SlotNameTests(TestCase):

    def test_body(self):
        self.assertEqual(slot_name('go'), 'go.md')
        self.assertEqual(slot_name('go', EDIT, TOKEN), 'go.md')

    def test_per_identity_kinds(self):
        self.assertEqual(slot_name('go', COMMENT, TOKEN),
                         'go_comment_%s.md' % TOKEN)
        self.assertEqual(slot_name('go', ASSESSMENT, TOKEN),
                         'go_assessment_%s.md' % TOKEN)

    def test_invalid_kind(self):
        self.assertRaises(InvalidKind, slot_name, 'go', 'bogus', TOKEN)

    def test_invalid_titles(self):
        """
        A 'good' title is made of:
            * letters
            * digits
            * hyphens
        """
        self.assertRaises(InvalidTitle, slot_name, '')
        self.assertRaises(InvalidTitle, slot_name, 'has space')
        self.assertRaises(InvalidTitle, slot_name, 'under_score')
        self.assertRaises(InvalidTitle, slot_name, '../etc')

    def test_missing_identity(self):
        self.assertRaises(ValueError, slot_name, 'go', COMMENT)
        self.assertRaises(ValueError, slot_name, 'go', COMMENT, 'a_b')

    def test_parse_reverses_compose(self):
        for args in (('go-lang', EDIT, None),
                     ('go-lang', COMMENT, TOKEN),
                     ('go-lang', ASSESSMENT, TOKEN)):
            self.assertEqual(parse_slot_name(slot_name(*args)), args)

    def test_parse_ignores_other_files(self):
        self.assertEqual(parse_slot_name('.tmpab12.tmp'), None)
        self.assertEqual(parse_slot_name('notes.txt'), None)
        self.assertEqual(parse_slot_name('go_draft_x.md'), None)
        self.assertEqual(parse_slot_name('_comment_%s.md' % TOKEN), None)


class ContentStoreTests(TestCase):

    def setUp(self):
        self.env = TempBoard()
        self.store = self.env.store

    def tearDown(self):
        self.env.cleanup()

    def test_body_round_trip(self):
        self.store.put_body('go', go_body)
        self.assertEqual(self.store.get_body('go'), go_body)

    def test_text_is_stored_as_utf8(self):
        self.store.put_body('go', u'caf\xe9')
        self.assertEqual(self.store.get_body('go'), u'caf\xe9'.encode('utf-8'))

    def test_missing_slots(self):
        self.assertRaises(NotFound, self.store.get_body, 'go')
        self.assertRaises(NotFound, self.store.get_comment, 'go', TOKEN)
        self.assertRaises(NotFound, self.store.get_assessment, 'go', TOKEN)

    def test_not_found_is_a_key_error(self):
        self.assertRaises(KeyError, self.store.get_body, 'go')

    def test_write_creates_data_directory(self):
        self.assertFalse(os.path.exists(self.env.data_dir))
        self.store.put_comment('go', TOKEN, b'nice')
        self.assertTrue(os.path.isdir(self.env.data_dir))

    def test_put_overwrites(self):
        self.store.put_comment('go', TOKEN, b'first')
        self.store.put_comment('go', TOKEN, b'second')
        self.assertEqual(self.store.get_comment('go', TOKEN), b'second')
        self.assertEqual(self.store.list_identities_with_comment('go'),
                         set([TOKEN]))
        names = [n for n in os.listdir(self.env.data_dir) if 'comment' in n]
        self.assertEqual(names, ['go_comment_%s.md' % TOKEN])

    def test_shorter_write_leaves_no_tail(self):
        self.store.put_body('go', b'a much longer first body')
        self.store.put_body('go', b'short')
        self.assertEqual(self.store.get_body('go'), b'short')

    def test_assessment_round_trip(self):
        self.store.put_assessment('go', TOKEN, 'Hot')
        self.assertEqual(self.store.get_assessment('go', TOKEN), 'Hot')

    def test_invalid_assessment_not_written(self):
        self.assertRaises(InvalidAssessment,
                          self.store.put_assessment, 'go', TOKEN, 'Meh')
        self.assertRaises(NotFound, self.store.get_assessment, 'go', TOKEN)

    def test_list_topics_only_counts_bodies(self):
        self.store.put_body('go', go_body)
        self.store.put_body('rust', b'# Rust')
        self.store.put_comment('go', TOKEN, b'nice')
        self.store.put_assessment('go', TOKEN, 'Hot')
        self.store.put_comment('python', TOKEN, b'no body here')
        self.assertEqual(self.store.list_topics(), set(['go', 'rust']))

    def test_list_topics_without_data_directory(self):
        self.assertEqual(self.store.list_topics(), set())

    def test_list_identities_with_comment(self):
        self.store.put_comment('go', TOKEN, b'nice')
        self.store.put_comment('go', OTHER, b'meh')
        self.store.put_assessment('go', 'c' * 40, 'Not')
        self.store.put_comment('go-lang', 'd' * 40, b'other topic')
        self.assertEqual(self.store.list_identities_with_comment('go'),
                         set([TOKEN, OTHER]))

    def test_has_comment(self):
        self.assertFalse(self.store.has_comment('go', TOKEN))
        self.store.put_comment('go', TOKEN, b'')
        self.assertTrue(self.store.has_comment('go', TOKEN))

    def test_failed_write_keeps_old_content(self):
        self.store.put_body('go', go_body)
        with patch('os.replace', side_effect=OSError('disk full')):
            self.assertRaises(StoreUnavailable,
                              self.store.put_body, 'go', b'new')
        self.assertEqual(self.store.get_body('go'), go_body)
        self.assertEqual(os.listdir(self.env.data_dir), ['go.md'])

    def test_unreadable_data_directory(self):
        with patch('os.listdir', side_effect=PermissionError('denied')):
            self.assertRaises(StoreUnavailable, self.store.list_topics)

    def test_unreadable_slot(self):
        self.store.put_body('go', go_body)
        with patch('builtins.open', side_effect=PermissionError('denied')):
            self.assertRaises(StoreUnavailable, self.store.get_body, 'go')
