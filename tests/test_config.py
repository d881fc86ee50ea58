import json
import os
import shutil
import tempfile
import unittest

from swf_fleet.simulator_utils.config import load_config
from swf_fleet.simulator_utils.values import JobKind


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.tmp_dir, "config.json")

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def write_config(self, config):
        with open(self.config_path, "w") as file_handler:
            json.dump(config, file_handler)

    def test_defaults(self):
        self.write_config({"trace_file": "trace.swf", "mips": 2500,
                           "comment": "ignored"})
        config = load_config(self.config_path)
        self.assertEqual(config, {"trace_file": "trace.swf",
                                  "mips": 2500,
                                  "job_number_index": 0})

    def test_generated_job_numbers(self):
        self.write_config({"trace_file": "trace.swf", "mips": 2500,
                           "job_number_index": None})
        self.assertIsNone(load_config(self.config_path)["job_number_index"])

    def test_missing_key(self):
        self.write_config({"trace_file": "trace.swf"})
        with self.assertRaises(ValueError):
            load_config(self.config_path)

    def test_wrong_types(self):
        self.write_config({"trace_file": "trace.swf", "mips": "fast"})
        with self.assertRaises(ValueError):
            load_config(self.config_path)

        self.write_config({"trace_file": "trace.swf", "mips": 2500,
                           "job_number_index": "0"})
        with self.assertRaises(ValueError):
            load_config(self.config_path)

    def test_job_number_index_out_of_range(self):
        for job_number_index in (18, 20):
            self.write_config({"trace_file": "trace.swf", "mips": 2500,
                               "job_number_index": job_number_index})
            with self.assertRaises(ValueError):
                load_config(self.config_path)

    def test_negative_job_number_index(self):
        self.write_config({"trace_file": "trace.swf", "mips": 2500,
                           "job_number_index": -1})
        self.assertEqual(load_config(self.config_path)["job_number_index"],
                         -1)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_config(os.path.join(self.tmp_dir, "missing.json"))


class TestJobKind(unittest.TestCase):

    def test_from_code(self):
        self.assertIs(JobKind.from_code(2), JobKind.BATCH)
        self.assertIs(JobKind.from_code(1), JobKind.INTERACTIVE)
        self.assertIs(JobKind.from_code(0), JobKind.UNKNOWN)
        self.assertIs(JobKind.from_code(-1), JobKind.UNKNOWN)
        self.assertIs(JobKind.from_code(3), JobKind.UNKNOWN)


if __name__ == '__main__':
    unittest.main()
