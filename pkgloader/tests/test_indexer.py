"""
Tests for the recursive unit file scan
"""

import os

from django.test import SimpleTestCase

from pkgloader.indexer import FileIndexer
from pkgloader.tests.utils import ClassPathTreeMixin


class FileIndexerTestCase(ClassPathTreeMixin, SimpleTestCase):
    """Test FileIndexer"""

    def setUp(self):
        super().setUp()
        self.indexer = FileIndexer()

    def test_missing_directory_returns_empty(self):
        self.assertEqual(self.indexer.scan(self.temp_path / 'missing'), [])

    def test_empty_directory_returns_empty(self):
        self.assertEqual(self.indexer.scan(self.root), [])

    def test_accepts_string_paths(self):
        widget = self.create_package('tld.Widget')
        self.assertEqual(self.indexer.scan(str(self.root)), [widget])

    def test_finds_nested_units(self):
        widget = self.create_package('tld.domain.Widget')
        gadget = self.create_package('tld.other.Gadget')

        found = self.indexer.scan(self.root)

        self.assertCountEqual(found, [widget, gadget])

    def test_includes_the_scanned_directory_itself(self):
        domain = self.create_package('tld.domain')
        sub = self.create_package('tld.domain.Sub')

        found = self.indexer.scan(self.root / 'tld' / 'domain')

        self.assertCountEqual(found, [domain, sub])

    def test_descends_below_directories_holding_a_unit(self):
        outer = self.create_package('tld.Outer')
        inner = self.create_package('tld.Outer.Inner')
        deepest = self.create_package('tld.Outer.Inner.Deepest')

        found = self.indexer.scan(self.root)

        self.assertCountEqual(found, [outer, inner, deepest])

    def test_ignores_files_not_following_the_convention(self):
        widget = self.create_package('tld.Widget')
        stray_dir = self.root / 'tld' / 'Stray'
        stray_dir.mkdir()
        (stray_dir / 'helpers.py').write_text('')
        (self.root / 'tld' / 'Widget' / 'notes.txt').write_text('')

        self.assertEqual(self.indexer.scan(self.root), [widget])

    def test_skips_dotted_directory_names(self):
        sub = self.create_package('tld.domain.Sub')
        dotted_dir = self.root / 'tld' / 'domain' / 'a.b'
        dotted_dir.mkdir()
        (dotted_dir / 'a.b.py').write_text('class Unreachable:\n    pass\n')
        nested = self.create_package('Nested', root=dotted_dir)

        found = self.indexer.scan(self.root)

        self.assertEqual(found, [sub])
        self.assertNotIn(nested, found)

    def test_dotted_scan_root_is_still_scanned(self):
        dotted_root = self.make_root('my.packages')
        widget = self.create_package('tld.Widget', root=dotted_root)

        self.assertEqual(self.indexer.scan(dotted_root), [widget])

    def test_custom_suffix(self):
        unit = self.create_package('tld.Widget', suffix='.unit')
        self.create_package('tld.Gadget')

        self.assertEqual(FileIndexer(suffix='.unit').scan(self.root), [unit])

    def test_no_duplicates(self):
        self.create_package('tld.Widget')
        found = self.indexer.scan(self.root)
        self.assertEqual(len(found), len(set(found)))

    def test_separate_scans_do_not_leak(self):
        first_root = self.make_root('first')
        second_root = self.make_root('second')
        first = self.create_package('a.First', root=first_root)
        second = self.create_package('b.Second', root=second_root)

        self.assertEqual(self.indexer.scan(first_root), [first])
        self.assertEqual(self.indexer.scan(second_root), [second])
        self.assertEqual(self.indexer.scan(first_root), [first])

    def test_symlink_loops_terminate(self):
        widget = self.create_package('tld.Widget')
        loop = self.root / 'tld' / 'Widget' / 'loop'
        try:
            os.symlink(self.root, loop)
        except (OSError, NotImplementedError):
            self.skipTest('symlinks not supported')

        self.assertEqual(self.indexer.scan(self.root), [widget])
