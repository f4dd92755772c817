import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

import main


class MainTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    def run_main(self, files):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main.main(files)
        return code, out.getvalue()

    def test_success(self):
        path = self.write("match0.txt", "2\n0 1 5 3\n")
        code, text = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertTrue(text.startswith("\n************ Find Flow " + path))
        self.assertIn("(0 -> 1) (5) $3", text)
        self.assertIn("Flow 0 -> 1 (5) $3", text)

    def test_errors_do_not_stop_the_batch(self):
        missing = os.path.join(self.tmp, "missing.txt")
        bad = self.write("bad.txt", "3\n0 7 1 1\n")
        good = self.write("good.txt", "4\n0 1 2 1\n1 3 2 1\n0 2 3 5\n2 3 3 5\n")
        code, text = self.run_main([missing, bad, good])
        self.assertEqual(code, 1)
        self.assertEqual(text.count("Error: "), 2)
        self.assertIn("(0 -> 2 -> 3) (3) $10", text)
        self.assertLess(text.index("Error: "), text.index("Find Flow " + good))

    def test_undecodable_file_does_not_stop_the_batch(self):
        binary = os.path.join(self.tmp, "binary.txt")
        with open(binary, "wb") as f:
            f.write(b"\xff")
        good = self.write("good.txt", "2\n0 1 5 3\n")
        code, text = self.run_main([binary, good])
        self.assertEqual(code, 1)
        self.assertEqual(text.count("Error: "), 1)
        self.assertIn("Find Flow " + good, text)
        self.assertIn("(0 -> 1) (5) $3", text)

    def test_duplicate_edges_warn(self):
        path = self.write("dups.txt", "2\n0 1 5 3\n0 1 2 3\n")
        code, text = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertIn("Warning: duplicate edges 0->1", text)
        self.assertIn("(0 -> 1) (2) $3", text)

    def test_unit_mode_setting(self):
        path = self.write("m.txt", "2\n0 1 2 3\n")
        with mock.patch.object(main, "augment_mode", "unit"):
            _, text = self.run_main([path])
        self.assertEqual(text.count("(0 -> 1) "), 2)

    def test_default_files(self):
        self.write("match1.txt", "2\n0 1 1 1\n")
        self.write("match0.txt", "2\n0 1 1 1\n")
        self.write("other.txt", "2\n0 1 1 1\n")
        with mock.patch.object(main, "input_dir", self.tmp):
            files = main.default_files()
            code, text = self.run_main([])
        self.assertEqual([os.path.basename(f) for f in files], ["match0.txt", "match1.txt"])
        self.assertEqual(code, 0)
        self.assertEqual(text.count("Find Flow"), 2)

    def test_deterministic_output(self):
        path = self.write("m.txt", "5\n0 1 2 3\n0 2 2 3\n1 3 1 1\n2 3 1 1\n1 4 1 4\n3 4 2 2\n2 4 1 4\n")
        self.assertEqual(self.run_main([path]), self.run_main([path]))


if __name__ == "__main__":
    unittest.main()
