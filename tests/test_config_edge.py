"""
Extra Config tests: deep-merge of nested sections and edge cases.
"""
import tempfile
import os
import unittest
import yaml

from video_trimmer.config import Config


class TestConfigEdge(unittest.TestCase):
    """Edge cases for loading and merging configuration"""

    def test_deep_merge_export_partial_override(self):
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            yaml.safe_dump({'export': {'space_margin': 0.5}}, f)
            path = f.name
        try:
            cfg = Config(path)
            export = cfg.get('export')
            self.assertEqual(export['space_margin'], 0.5)
            # size_buffer keeps its default
            self.assertEqual(export['size_buffer'], 0.1)
        finally:
            os.unlink(path)

    def test_unknown_keys_are_preserved(self):
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            yaml.safe_dump({'unknown_key': 123}, f)
            path = f.name
        try:
            cfg = Config(path)
            self.assertEqual(cfg.get('unknown_key'), 123)
        finally:
            os.unlink(path)

    def test_yaml_crlf_and_null_values(self):
        content = 'notes: clip\r\noutput_dir: null\r\n'
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            f.write(content)
            path = f.name
        try:
            cfg = Config(path)
            self.assertEqual(cfg.get('notes'), 'clip')
            self.assertIsNone(cfg.get('output_dir'))
            self.assertIs(cfg.get('dry_run'), False)
        finally:
            os.unlink(path)

    def test_non_dict_export_replaces_section(self):
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            yaml.safe_dump({'export': None}, f)
            path = f.name
        try:
            cfg = Config(path)
            self.assertIsNone(cfg.get('export'))
        finally:
            os.unlink(path)


if __name__ == '__main__':
    unittest.main()
