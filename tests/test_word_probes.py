import os
import tempfile
import unittest

from tests.word_probes import run_word_probes


class TestWordProbes(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.temp_dir = tempfile.TemporaryDirectory()
        cls.report_path = os.path.join(cls.temp_dir.name, "probes.html")
        run_word_probes(output_path=cls.report_path, open_browser=False)
        with open(cls.report_path, encoding="utf-8") as handle:
            cls.html = handle.read()

    @classmethod
    def tearDownClass(cls):
        cls.temp_dir.cleanup()

    def test_report_counts_whole_range(self):
        self.assertIn("count: 9999,", self.html)

    def test_charts_written(self):
        asset_dirs = [
            name for name in os.listdir(self.temp_dir.name) if name.endswith("-assets")
        ]
        self.assertEqual(len(asset_dirs), 1)
        assets = sorted(os.listdir(os.path.join(self.temp_dir.name, asset_dirs[0])))
        self.assertEqual(assets, ["lengths.png", "whitespace.png"])
        for name in assets:
            self.assertIn(f"{asset_dirs[0]}/{name}", self.html)


if __name__ == "__main__":
    unittest.main()
