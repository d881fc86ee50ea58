"""
Create the logging object to use in the different components of the reader.

The logging object is used to log the different events of the admission \
pipeline and analyse them at runtime, as the trace is replayed.
This provides a detailed and uniform manner for analysis, without generating \
large log files.

Every message has the format `<time> , <EventName> , <field> , ...` where \
`<time>` is the simulated instant the message refers to, or `-` when there \
is none.
"""
import os
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from typing_extensions import TypedDict

from swf_fleet.simulation_logger.msg_list import (
    MSG_SEPARATOR, TRACE_LINE_REJECTED_MSG, JOB_ARRIVAL_MSG, JOB_SKIPPED_MSG,
    NO_WINDOW_MSG, FLEET_PROVISIONED_MSG, VM_SUBMITTED_MSG,
    CLOUDLET_SUBMITTED_MSG, CLOUDLET_BOUND_MSG, CLOUDLET_START_MSG,
    CLOUDLET_FINISH_MSG, ADMISSION_RESULT_MSG)
from swf_fleet.simulator_utils.values import FLEET_CORES


class TColors():
    """Class for declaring common ANSI escape sequences."""

    HEADER = '\033[95m'
    OK_BLUE = '\033[94m'
    OK_CYAN = '\033[96m'
    OK_GREEN = '\033[92m'
    SUCCESS = '\033[92;1m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    END = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'


class DataPoints(TypedDict):
    """
    Store the statistics of the data points measured.

    Args:
        TypedDict (TypedDict): The `TypedDict` base class.
    """

    trace_line_rejected_event: int
    job_arrival_event: int
    job_skipped_event: int
    no_window_event: int
    fleet_provisioned_event: int
    vm_submitted_event: int
    cloudlet_submitted_event: int
    cloudlet_bound_event: int
    cloudlet_start_event: int
    cloudlet_finish_event: int
    admission_accepted_event: int
    admission_rejected_event: int


class CloudletInfo(TypedDict):
    """
    Store the information about the cloudlets.

    Args:
        TypedDict (TypedDict): The `TypedDict` base class.
    """

    vm_id: str
    processors: int
    length: int
    fleet_start_time: float  # Instant the fleet of the cloudlet starts
    start_time: float  # Set by the CloudletStart event
    finish_time: float  # Set by the CloudletFinish event


EVENT_TO_DATA_POINT: Dict[str, str] = {
    TRACE_LINE_REJECTED_MSG: "trace_line_rejected_event",
    JOB_ARRIVAL_MSG: "job_arrival_event",
    JOB_SKIPPED_MSG: "job_skipped_event",
    NO_WINDOW_MSG: "no_window_event",
    FLEET_PROVISIONED_MSG: "fleet_provisioned_event",
    VM_SUBMITTED_MSG: "vm_submitted_event",
    CLOUDLET_SUBMITTED_MSG: "cloudlet_submitted_event",
    CLOUDLET_BOUND_MSG: "cloudlet_bound_event",
    CLOUDLET_START_MSG: "cloudlet_start_event",
    CLOUDLET_FINISH_MSG: "cloudlet_finish_event",
}


class Logger:
    """Class to analyses the generate logs during runtime."""

    LINE_SEPARATOR = "\n\n" + "-" * 80 + "\n\n"
    INTEGRITY_MESSAGE = ("The reader statistics generated, are from a "
                         "successful run of the reader over the trace "
                         "dataset.\n")

    def __init__(self, output_file_path: Path) -> None:
        """
        Initialise the object.

        Args:
            output_file_path (Path): The path to the output file.
        """
        self.output_file_path = output_file_path

        self.has_integrity: bool = False
        self.metadata_text: List[str] = list()
        self.data_points: DataPoints = \
            DataPoints(trace_line_rejected_event=0,
                       job_arrival_event=0,
                       job_skipped_event=0,
                       no_window_event=0,
                       fleet_provisioned_event=0,
                       vm_submitted_event=0,
                       cloudlet_submitted_event=0,
                       cloudlet_bound_event=0,
                       cloudlet_start_event=0,
                       cloudlet_finish_event=0,
                       admission_accepted_event=0,
                       admission_rejected_event=0)
        # Latest cloudlet submitted under each id. A cloudlet id can be
        # reused, so the rows of the CSV are kept in submission order.
        self.cloudlets_info: Dict[str, CloudletInfo] = dict()
        self.cloudlets_rows: List[Tuple[str, CloudletInfo]] = list()

        # Create the output file to test the path and create the empty file.
        # Any path related errors will now be generated at the beginning of
        # the run rather than at the end of it.
        with open(self.output_file_path, "w") as _:
            ...

    def metadata(self, msg: str) -> None:
        """
        Store the data to write out into the top of the generated statistics \
        file.

        Args:
            msg (str): The metadata message to write.
        """
        self.metadata_text.append(msg)

    def info(self, msg: str) -> None:
        """
        Take the log message and run the analysis on it.

        Args:
            msg (str): The log message to run analysis on.
        """
        vals = msg.split(MSG_SEPARATOR)
        event_name = vals[1]

        if event_name == ADMISSION_RESULT_MSG:
            is_accepted = vals[2]
            assert is_accepted == "True" or is_accepted == "False"
            if is_accepted == "True":
                self.data_points["admission_accepted_event"] += 1
            else:
                self.data_points["admission_rejected_event"] += 1
            return

        data_point = EVENT_TO_DATA_POINT.get(event_name)
        assert data_point is not None, f"Unknown event in log: {event_name}"
        self.data_points[data_point] += 1

        if event_name == CLOUDLET_SUBMITTED_MSG:
            cloudlet_id = vals[2]
            cloudlet_info = CloudletInfo(vm_id="",
                                         processors=int(vals[3]),
                                         length=int(vals[4]),
                                         fleet_start_time=float(vals[0]),
                                         start_time=-1,
                                         finish_time=-1)
            self.cloudlets_info[cloudlet_id] = cloudlet_info
            self.cloudlets_rows.append((cloudlet_id, cloudlet_info))
            return

        if event_name not in (CLOUDLET_BOUND_MSG, CLOUDLET_START_MSG,
                              CLOUDLET_FINISH_MSG):
            return

        # Cloudlets not built by the reader are counted but have no row
        tracked_info = self.cloudlets_info.get(vals[2])
        if tracked_info is None:
            return

        if event_name == CLOUDLET_BOUND_MSG:
            tracked_info["vm_id"] = vals[3]
        elif event_name == CLOUDLET_START_MSG:
            tracked_info["start_time"] = float(vals[0])
        elif event_name == CLOUDLET_FINISH_MSG:
            tracked_info["finish_time"] = float(vals[0])

    def integrity(self) -> None:
        """Add a message at the end of the statistics file to mark \
        successful completion of the log analysis."""
        self.has_integrity = True

    def flush(self):
        """
        Write out the generated statistics into an output file.

        The output file is given by `self.output_file_path`.
        """
        vms_per_fleet = len(FLEET_CORES)
        expected_count = (self.data_points["fleet_provisioned_event"] *
                          vms_per_fleet)

        # Every fleet must have all its VMs and cloudlets submitted and bound
        if not (self.data_points["vm_submitted_event"] ==
                self.data_points["cloudlet_submitted_event"] ==
                self.data_points["cloudlet_bound_event"] ==
                expected_count):
            self.has_integrity = False

        # A cloudlet cannot finish without having started
        if (self.data_points["cloudlet_finish_event"] >
                self.data_points["cloudlet_start_event"]):
            self.has_integrity = False

        with open(self.output_file_path, "w") as file_handler:
            for line in self.metadata_text:
                file_handler.write(f"{line}\n")

            file_handler.write(Logger.LINE_SEPARATOR)

            for key in self.data_points:
                file_handler.write(f"{TColors.BOLD}{key}{TColors.END} :"
                                   f" {self.data_points[key]}\n")

            file_handler.write(Logger.LINE_SEPARATOR)

            file_handler.write("Derived attributes:\n")

            # 1. Trace lines that reached the pipeline
            total_lines = (self.data_points["job_arrival_event"] +
                           self.data_points["trace_line_rejected_event"])
            file_handler.write(f"{TColors.BOLD}Total trace lines read :"
                               f"{TColors.END} {total_lines}\n")

            # 2. Fraction of the cloudlets that completed
            total_cloudlets = self.data_points["cloudlet_submitted_event"]
            if total_cloudlets > 0:
                completed_percent = (self.data_points
                                     ["cloudlet_finish_event"] /
                                     total_cloudlets)
                file_handler.write(f"{TColors.BOLD}Percentage of cloudlets "
                                   f"completed{TColors.END} = "
                                   f"{completed_percent:%}\n")

            file_handler.write(Logger.LINE_SEPARATOR)

            file_handler.write(
                f"{TColors.BOLD}Log sanity checks:{TColors.END}\n\n")

            if self.has_integrity is True:
                file_handler.write(Logger.INTEGRITY_MESSAGE)
                file_handler.write(f"{TColors.SUCCESS}SUCCESS:{TColors.END} "
                                   "Every fleet has all its VMs and "
                                   "cloudlets submitted and bound!\n")
            else:
                file_handler.write(f"{TColors.FAIL}FAILURE:{TColors.END}\n")
                file_handler.write(
                    "Fleets provisioned x "
                    f"{vms_per_fleet} ({expected_count}), "
                    "VMs submitted "
                    f"({self.data_points['vm_submitted_event']}), "
                    "cloudlets submitted "
                    f"({self.data_points['cloudlet_submitted_event']}) and "
                    "cloudlets bound "
                    f"({self.data_points['cloudlet_bound_event']}) "
                    "must all be equal\n")
                file_handler.write(
                    "Cloudlets finished "
                    f"({self.data_points['cloudlet_finish_event']}) "
                    "<= cloudlets started "
                    f"({self.data_points['cloudlet_start_event']})\n")

        CLOUDLETS_INFO_FILE_NAME = str(self.output_file_path
                                       .with_suffix("")) + \
            "_cloudlets_info.csv"
        with open(CLOUDLETS_INFO_FILE_NAME, "w") as f:
            HEADER_LINE = ("Cloudlet ID,"
                           "VM ID,"
                           "Processors,"
                           "Length,"
                           "Fleet Start Time,"
                           "Start Time,"
                           "Finish Time\n")
            f.write(HEADER_LINE)
            for cloudlet_id, cloudlet_info in self.cloudlets_rows:
                CLOUDLET_LINE = (f"{cloudlet_id},"
                                 f"{cloudlet_info['vm_id']},"
                                 f"{cloudlet_info['processors']},"
                                 f"{cloudlet_info['length']},"
                                 f"{cloudlet_info['fleet_start_time']},"
                                 f"{cloudlet_info['start_time']},"
                                 f"{cloudlet_info['finish_time']}\n")
                f.write(CLOUDLET_LINE)


class SimulatorLogger:
    """This class is to define and create instances of the logging class."""

    LOG_DIR_ENV_VAR = "SWF_FLEET_LOG_DIR"
    LOG_FILE_PATH = Path("logs")
    LOG_FILE_NAME: Optional[Path] = None

    is_setup: bool = False
    logger_obj: Optional[Logger] = None

    def __init__(self, _: str):
        """
        Initialise the object.

        Args:
            _ (str): Name of the module asking for the logger. Every module \
            shares the same `Logger`.
        """
        if SimulatorLogger.is_setup is False:
            log_dir = Path(os.environ.get(SimulatorLogger.LOG_DIR_ENV_VAR,
                                          SimulatorLogger.LOG_FILE_PATH))
            log_dir.mkdir(parents=True, exist_ok=True)
            SimulatorLogger.LOG_FILE_NAME = (log_dir /
                                             datetime.now()
                                             .strftime("record-%Y-%m-%d-"
                                                       "%H-%M-%S.log"))
            SimulatorLogger.logger_obj = Logger(
                output_file_path=SimulatorLogger.LOG_FILE_NAME)

            # Makes sure that the logger is setup only once
            SimulatorLogger.is_setup = True

    def get_logger(self) -> Logger:
        """
        Return an instance of the `Logger` class to the caller.

        Returns:
            Logger: Object used for logging runtime information.
        """
        assert SimulatorLogger.logger_obj is not None
        return SimulatorLogger.logger_obj
