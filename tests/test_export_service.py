import os
import tempfile
import unittest
from collections import namedtuple
from pathlib import Path
from unittest.mock import patch

from video_trimmer.services import export as export_svc
from video_trimmer.services.errors import (
    FilesystemError,
    InsufficientSpaceError,
    ValidationError,
)

DiskUsage = namedtuple('DiskUsage', 'total used free')


def _touch(path, size=0):
    with open(path, 'wb') as f:
        f.write(b'\x00' * size)


def _fake_extract(input_path, start, end, output_path):
    _touch(output_path, 10)
    return str(output_path)


class TestExportNaming(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_find_max_version_scans_files_only(self):
        for name in ('video_1.mp4', 'video_4_intro.mp4', 'video_2.mov', 'other_9.mp4'):
            _touch(self.dir / name)
        os.mkdir(self.dir / 'video_7.mp4')  # directories are ignored
        self.assertEqual(export_svc.find_max_version(self.dir, 'video', 'mp4'), 4)

    def test_find_max_version_missing_directory(self):
        self.assertEqual(export_svc.find_max_version(self.dir / 'nope', 'video', 'mp4'), 0)

    def test_generate_next_filename_for_base_file(self):
        src = self.dir / 'video.mp4'
        _touch(src)
        self.assertEqual(export_svc.generate_next_filename(src), self.dir / 'video_1.mp4')
        _touch(self.dir / 'video_1.mp4')
        _touch(self.dir / 'video_2_old.mp4')
        self.assertEqual(export_svc.generate_next_filename(src, 'new take'),
                         self.dir / 'video_3_new take.mp4')

    def test_generate_next_filename_for_versioned_file(self):
        src = self.dir / 'video_1.mp4'
        _touch(src)
        _touch(self.dir / 'video_1_1.mp4')
        self.assertEqual(export_svc.generate_next_filename(src), self.dir / 'video_1_2.mp4')

    def test_generate_next_filename_in_output_dir(self):
        src = self.dir / 'video.mp4'
        out = self.dir / 'out'
        self.assertEqual(export_svc.generate_next_filename(src, output_dir=out), out / 'video_1.mp4')


class TestExportSizing(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.src = Path(self.tmpdir.name) / 'video.mp4'
        _touch(self.src, 1000)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_estimate_output_size(self):
        self.assertEqual(export_svc.estimate_output_size(self.src, 0, 50, 100), 550)
        self.assertEqual(export_svc.estimate_output_size(self.src, 0, 50, 100, size_buffer=0), 500)

    def test_estimate_output_size_missing_file(self):
        with self.assertRaises(FilesystemError):
            export_svc.estimate_output_size(self.src.with_name('x.mp4'), 0, 1, 2)

    @patch('shutil.disk_usage', return_value=DiskUsage(10 ** 12, 0, 1100))
    def test_check_disk_space_ok(self, _):
        export_svc.check_disk_space(self.src, 1000, margin=0.1)

    @patch('shutil.disk_usage', return_value=DiskUsage(10 ** 12, 0, 1000))
    def test_check_disk_space_insufficient(self, _):
        with self.assertRaises(InsufficientSpaceError) as ctx:
            export_svc.check_disk_space(self.src, 1000, margin=0.2)
        self.assertEqual(ctx.exception.path, str(self.src.parent))


class TestCutVideo(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)
        self.src = self.dir / 'holiday.mp4'
        _touch(self.src, 2048)

    def tearDown(self):
        self.tmpdir.cleanup()

    @patch('video_trimmer.services.export.extract_clip', side_effect=_fake_extract)
    @patch('video_trimmer.services.export.get_video_duration', return_value=120.0)
    def test_cut_video_writes_next_version(self, _dur, mock_extract):
        out = export_svc.cut_video(self.src, 10, 20, notes='beach')
        self.assertEqual(out, self.dir / 'holiday_1_beach.mp4')
        self.assertTrue(out.exists())
        args = mock_extract.call_args[0]
        self.assertEqual((args[1], args[2]), (10, 20))

        second = export_svc.cut_video(self.src, 0, 5)
        self.assertEqual(second, self.dir / 'holiday_2.mp4')

    @patch('video_trimmer.services.export.extract_clip', side_effect=_fake_extract)
    @patch('video_trimmer.services.export.get_video_duration', return_value=120.0)
    def test_cut_video_creates_output_dir(self, _dur, _extract):
        out = export_svc.cut_video(self.src, 0, 5, output_dir=self.dir / 'trims')
        self.assertEqual(out, self.dir / 'trims' / 'holiday_1.mp4')

    @patch('video_trimmer.services.export.extract_clip')
    @patch('video_trimmer.services.export.get_video_duration', return_value=30.0)
    def test_cut_video_rejects_invalid_range(self, _dur, mock_extract):
        with self.assertRaises(ValidationError) as ctx:
            export_svc.cut_video(self.src, 10, 40)
        self.assertIn('End time exceeds video duration', str(ctx.exception))
        mock_extract.assert_not_called()

    @patch('video_trimmer.services.export.extract_clip', return_value='ignored')
    @patch('video_trimmer.services.export.get_video_duration', return_value=30.0)
    def test_cut_video_missing_output_raises(self, _dur, _extract):
        with self.assertRaises(FilesystemError):
            export_svc.cut_video(self.src, 0, 10)


if __name__ == "__main__":
    unittest.main()
