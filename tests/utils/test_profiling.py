import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from sorty.utils.profiling import (
    get_profile_dir,
    generate_profile_filename,
    profile_function,
    profile_main,
)


class ProfilingTest(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop('SORTY_PROFILE', None)

    def test_get_profile_dir_when_not_set(self):
        self.assertIsNone(get_profile_dir())

    def test_get_profile_dir_when_set(self):
        os.environ['SORTY_PROFILE'] = '/tmp/test_profile'

        result = get_profile_dir()

        self.assertEqual(Path('/tmp/test_profile'), result.parent)
        timestamp, pid = result.name.split('_')
        self.assertTrue(timestamp.isdigit())
        self.assertEqual(str(os.getpid()), pid)

    def test_generate_profile_filename_format(self):
        first = generate_profile_filename("test")
        second = generate_profile_filename("test")

        prefix, pid, seq = first.split('_')
        self.assertEqual("test", prefix)
        self.assertEqual(str(os.getpid()), pid)
        self.assertTrue(seq.endswith(".prof"))
        self.assertTrue(seq[:-5].isdigit())
        self.assertNotEqual(first, second)

    def test_profile_function_disabled(self):
        wrapped = profile_function(lambda x: x * 2)

        self.assertEqual(42, wrapped(21))

    def test_profile_main_writes_stats(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            os.environ['SORTY_PROFILE'] = tmpdir

            @profile_main
            def main():
                return sum(range(100))

            self.assertEqual(4950, main())

            profiles = list(Path(tmpdir).glob('*/main_*.prof'))
            self.assertEqual(1, len(profiles))
            self.assertGreater(profiles[0].stat().st_size, 0)

    def test_profile_function_writes_stats_on_exception(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            os.environ['SORTY_PROFILE'] = tmpdir

            def fail():
                raise RuntimeError("boom")

            with self.assertRaises(RuntimeError):
                profile_function(fail, prefix="failing")()

            self.assertEqual(1, len(list(Path(tmpdir).glob('*/failing_*.prof'))))


if __name__ == '__main__':
    unittest.main()
