import io
import os
import shutil
import tempfile
import unittest
from pathlib import Path

from swf_fleet.reader.workload_reader import WorkloadReader
from swf_fleet.simulation_logger.logger import Logger, SimulatorLogger
from tests.helpers import make_fields, new_context


class TestSimulatorLogger(unittest.TestCase):

    def test_single_logger(self):
        first = SimulatorLogger(__name__).get_logger()
        second = SimulatorLogger("another.module").get_logger()
        self.assertIs(first, second)
        self.assertTrue(SimulatorLogger.LOG_FILE_NAME.exists())

    def test_pipeline_events_are_counted(self):
        logger = SimulatorLogger(__name__).get_logger()
        before = dict(logger.data_points)

        reader = WorkloadReader(io.BytesIO(b""), 2500)
        context = new_context()
        reader.process_line(make_fields(submit_time="500"), context)
        reader.process_line(make_fields(batch_code="1"), context)
        reader.process_line(make_fields(submit_time="86400"), context)
        reader.process_line(make_fields(field_count=3), context)

        after = logger.data_points
        delta = {key: after[key] - before[key] for key in before}
        self.assertEqual(delta["job_arrival_event"], 3)
        self.assertEqual(delta["trace_line_rejected_event"], 1)
        self.assertEqual(delta["job_skipped_event"], 1)
        self.assertEqual(delta["no_window_event"], 1)
        self.assertEqual(delta["fleet_provisioned_event"], 1)
        self.assertEqual(delta["vm_submitted_event"], 5)
        self.assertEqual(delta["cloudlet_submitted_event"], 5)
        self.assertEqual(delta["cloudlet_bound_event"], 5)
        self.assertEqual(delta["admission_accepted_event"], 3)


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.output_file_path = Path(self.tmp_dir) / "record-test.log"
        self.logger = Logger(self.output_file_path)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def log_fleet(self):
        self.logger.info("86400 , FleetProvisioned , 1 , 0_1_2_3_4")
        for index, cores in enumerate([1, 4, 2, 1, 2]):
            self.logger.info(f"86400 , VmSubmitted , {index} , {cores}")
        for index, cores in enumerate([1, 4, 2, 1, 2]):
            self.logger.info(f"86400 , CloudletSubmitted , {index} , "
                             f"{cores} , 100")
        for index in range(5):
            self.logger.info(f"86400 , CloudletBound , {index} , {index}")

    def test_output_file_created_on_init(self):
        self.assertTrue(self.output_file_path.exists())

    def test_cloudlet_info(self):
        self.log_fleet()
        self.logger.info("86400.0 , CloudletStart , 1 , 1")
        self.logger.info("86500.0 , CloudletFinish , 1 , 1")

        info = self.logger.cloudlets_info["1"]
        self.assertEqual(info["vm_id"], "1")
        self.assertEqual(info["processors"], 4)
        self.assertEqual(info["length"], 100)
        self.assertEqual(info["fleet_start_time"], 86400)
        self.assertEqual(info["start_time"], 86400)
        self.assertEqual(info["finish_time"], 86500)
        self.assertEqual(self.logger.cloudlets_info["0"]["start_time"], -1)

    def test_admission_result(self):
        self.logger.info("- , AdmissionResult , True")
        self.logger.info("- , AdmissionResult , False")
        self.logger.info("- , AdmissionResult , False")
        self.assertEqual(self.logger.data_points["admission_accepted_event"],
                         1)
        self.assertEqual(self.logger.data_points["admission_rejected_event"],
                         2)

    def test_events_of_untracked_cloudlets(self):
        self.logger.info("86400 , CloudletBound , 1000 , 0")
        self.logger.info("86400 , CloudletStart , 1000 , 0")
        self.logger.info("86500 , CloudletFinish , 1000 , 0")

        self.assertEqual(self.logger.data_points["cloudlet_bound_event"], 1)
        self.assertEqual(self.logger.data_points["cloudlet_start_event"], 1)
        self.assertEqual(self.logger.data_points["cloudlet_finish_event"], 1)
        self.assertEqual(self.logger.cloudlets_info, {})
        self.assertEqual(self.logger.cloudlets_rows, [])

    def test_reused_cloudlet_id_keeps_every_row(self):
        self.logger.info("86400 , CloudletSubmitted , 0 , 1 , 100")
        self.logger.info("86400 , CloudletBound , 0 , 0")
        self.logger.info("172800 , CloudletSubmitted , 0 , 4 , 50")
        self.logger.info("172800 , CloudletBound , 0 , 7")
        self.logger.flush()

        csv_path = Path(self.tmp_dir) / "record-test_cloudlets_info.csv"
        rows = csv_path.read_text().splitlines()
        self.assertEqual(rows[1:], ["0,0,1,100,86400.0,-1,-1",
                                    "0,7,4,50,172800.0,-1,-1"])

    def test_unknown_event(self):
        with self.assertRaises(AssertionError):
            self.logger.info("0 , SomethingElse")

    def test_flush_consistent_run(self):
        self.logger.metadata("Reading trace file: test.swf")
        self.log_fleet()
        self.logger.integrity()
        self.logger.flush()

        text = self.output_file_path.read_text()
        self.assertIn("Reading trace file: test.swf", text)
        self.assertIn("SUCCESS:", text)
        self.assertTrue(self.logger.has_integrity)

        csv_path = Path(self.tmp_dir) / "record-test_cloudlets_info.csv"
        rows = csv_path.read_text().splitlines()
        self.assertEqual(rows[0], ("Cloudlet ID,VM ID,Processors,Length,"
                                   "Fleet Start Time,Start Time,Finish Time"))
        self.assertEqual(len(rows), 6)
        self.assertEqual(rows[2], "1,1,4,100,86400.0,-1,-1")

    def test_flush_partial_fleet(self):
        self.log_fleet()
        self.logger.info("86400 , VmSubmitted , 5 , 1")
        self.logger.integrity()
        self.logger.flush()

        self.assertFalse(self.logger.has_integrity)
        self.assertIn("FAILURE:", self.output_file_path.read_text())

    def test_flush_finish_without_start(self):
        self.log_fleet()
        self.logger.info("86500 , CloudletFinish , 0 , 0")
        self.logger.integrity()
        self.logger.flush()
        self.assertFalse(self.logger.has_integrity)


class TestLogDirectory(unittest.TestCase):

    def test_log_dir_from_environment(self):
        log_dir = os.environ[SimulatorLogger.LOG_DIR_ENV_VAR]
        self.assertEqual(SimulatorLogger.LOG_FILE_NAME.parent, Path(log_dir))


if __name__ == '__main__':
    unittest.main()
