import argparse
import logging
import os
import tempfile
import unittest
from unittest import mock

from project_utils.conversions import TextToString, prefix_lines, split_targets
from project_utils.credentials import resolve_password
from project_utils.hostid import get_host_id


class TestConversions(unittest.TestCase):

    def test_text_to_string(self):
        self.assertEqual(TextToString(b'up 3 days\r\n'), 'up 3 days')
        self.assertEqual(TextToString(None), '')
        self.assertEqual(TextToString('plain '), 'plain')

    def test_prefix_lines(self):
        self.assertEqual(prefix_lines('a\r\nb\nc', 'root@h1: '), 'root@h1: a\nroot@h1: b\nroot@h1: c')
        self.assertEqual(prefix_lines('single', '> '), '> single')

    def test_split_targets_keeps_order(self):
        self.assertEqual(split_targets('web2,web1,db1'), ['web2', 'web1', 'db1'])
        self.assertEqual(split_targets('web1'), ['web1'])


class TestResolvePassword(unittest.TestCase):

    def test_given_password(self):
        opts = argparse.Namespace(username='root', password='secret')
        with mock.patch('getpass.getpass') as getpass:
            self.assertEqual(resolve_password(opts, 'SSH'), 'secret')
        getpass.assert_not_called()

    def test_empty_password_is_given(self):
        opts = argparse.Namespace(username='root', password='')
        with mock.patch('getpass.getpass') as getpass:
            self.assertEqual(resolve_password(opts, 'SSH'), '')
        getpass.assert_not_called()

    def test_prompt(self):
        opts = argparse.Namespace(username='jane', password=None)
        with mock.patch('getpass.getpass', return_value='typed') as getpass:
            self.assertEqual(resolve_password(opts, 'vDC'), 'typed')
        getpass.assert_called_once_with('jane vDC password: ')
        self.assertEqual(opts.password, 'typed')

    def test_prompt_failure_propagates(self):
        opts = argparse.Namespace(username='jane', password=None)
        with mock.patch('getpass.getpass', side_effect=EOFError):
            with self.assertRaises(EOFError):
                resolve_password(opts, 'vDC')


class TestHostId(unittest.TestCase):

    def test_machine_id_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'machine-id')
            with open(path, 'w') as f:
                f.write('0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0\n')
            self.assertEqual(get_host_id([path]), '0f1e2d3c4b5a69788796a5b4c3d2e1f0')

    def test_fallback_to_node(self):
        with mock.patch('uuid.getnode', return_value=0x0242ac110002):
            host_id = get_host_id(['/nonexistent/machine-id'])
        self.assertEqual(len(host_id), 32)
        self.assertTrue(host_id.endswith('0242ac110002'))


if __name__ == '__main__':
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)7s %(name)s %(message).5000s",
        )
    unittest.main()
