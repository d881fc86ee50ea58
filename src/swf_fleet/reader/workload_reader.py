"""
Read an SWF trace and provision the batch fleets of its jobs.

For every line of the trace the reader parses the job, finds the day windows \
it belongs to, provisions one fleet of VMs per window, creates the cloudlets \
of the fleet, binds them to the VMs and finally runs the admission predicate \
over the cloudlet queue.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import (BinaryIO, Deque, List, Optional, Sequence, Union,
                    TYPE_CHECKING)

from swf_fleet.admission.admission_filter import (CloudletPredicate,
                                                  accept_all, any_accepted)
from swf_fleet.cloudlet.cloudlet_factory import create_fleet_cloudlets
from swf_fleet.fleet.fleet_provisioner import provision_fleet
from swf_fleet.lifecycle.lifecycle_binder import bind_fleet
from swf_fleet.simulation_logger import SimulatorLogger
from swf_fleet.simulation_logger.msg_list import (MSG_SEPARATOR, NO_TIME,
                                                  TRACE_LINE_REJECTED_MSG,
                                                  JOB_ARRIVAL_MSG,
                                                  JOB_SKIPPED_MSG,
                                                  NO_WINDOW_MSG,
                                                  FLEET_PROVISIONED_MSG,
                                                  ADMISSION_RESULT_MSG)
from swf_fleet.simulator_utils.config import ReaderConfig
from swf_fleet.simulator_utils.print_utils import debug_print
from swf_fleet.simulator_utils.values import FIELD_COUNT, JOB_NUM_INDEX
from swf_fleet.trace.trace_parser import (is_comment_or_blank,
                                          parse_trace_line, split_trace_line)
from swf_fleet.trace.trace_record import TraceRecord
from swf_fleet.window.window_classifier import WindowBucket, classify

if TYPE_CHECKING:
    from swf_fleet.cloudlet.cloudlet import Cloudlet
    from swf_fleet.context import ProvisioningContext

# Get the logger object for this module
logger = SimulatorLogger(__name__).get_logger()

TraceSource = Union[str, Path, BinaryIO]


class WorkloadReader(object):
    """
    Reader of the batch jobs of an SWF trace.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, source: TraceSource, mips: int,
                 predicate: Optional[CloudletPredicate] = None,
                 job_number_index: Optional[int] = JOB_NUM_INDEX):
        """
        Initialise the instance of the WorkloadReader class.

        Args:
            source (TraceSource): Path to the trace file, or a binary stream \
            already opened on the trace.
            mips (int): The MIPS capacity of the processing elements of the \
            VMs the cloudlets run on.
            predicate (Optional[CloudletPredicate], optional): Admission \
            predicate. Defaults to accepting every cloudlet.
            job_number_index (Optional[int], optional): Column of the job \
            number, or None to generate job numbers from the cloudlet queue \
            size. A negative value also generates them. Defaults to \
            JOB_NUM_INDEX.

        Raises:
            ValueError: If `mips` is not greater than 0, or if \
            `job_number_index` is not lower than FIELD_COUNT.
            OSError: If the trace file cannot be opened.
        """
        # Checked before the trace file is opened
        self.mips = mips
        self.predicate: CloudletPredicate = (accept_all if predicate is None
                                             else predicate)
        if job_number_index is not None and job_number_index >= FIELD_COUNT:
            raise ValueError("The job number index must be lower than "
                             f"{FIELD_COUNT}, got {job_number_index}")
        self.job_number_index = job_number_index
        self.line_number = 0

        self.owns_source: bool
        if isinstance(source, (str, os.PathLike)):
            self.trace_file_path: Optional[str] = str(source)
            self.trace_file: BinaryIO = open(source, "rb")
            self.owns_source = True
        else:
            self.trace_file_path = getattr(source, "name", None)
            self.trace_file = source
            self.owns_source = False

        logger.metadata(f"Reading trace file: {self.trace_file_path}")
        logger.metadata(f"MIPS capacity: {self.mips}")

    @classmethod
    def from_config(cls, config: ReaderConfig,
                    predicate: Optional[CloudletPredicate] = None
                    ) -> WorkloadReader:
        """
        Create a reader from a loaded configuration file.

        Args:
            config (ReaderConfig): The configuration.
            predicate (Optional[CloudletPredicate], optional): Admission \
            predicate. Defaults to accepting every cloudlet.

        Returns:
            WorkloadReader: The reader, with the trace file opened.
        """
        return cls(config["trace_file"], config["mips"], predicate,
                   config.get("job_number_index", JOB_NUM_INDEX))

    @property
    def mips(self) -> int:
        return self._mips

    @mips.setter
    def mips(self, mips: int) -> None:
        if mips <= 0:
            raise ValueError("MIPS must be greater than 0.")
        self._mips = mips

    def set_predicate(self, predicate: CloudletPredicate) -> WorkloadReader:
        """
        Define when the cloudlets read are accepted.

        Args:
            predicate (CloudletPredicate): The admission predicate.

        Returns:
            WorkloadReader: This reader.
        """
        self.predicate = predicate
        return self

    def generate_workload(self, context: ProvisioningContext
                          ) -> Deque[Cloudlet]:
        """
        Read the remaining lines of the trace and provision their fleets.

        Args:
            context (ProvisioningContext): The collaborators and the shared \
            collections to provision into.

        Raises:
            TraceFormatError: If a used column of a line is not an integer. \
            The lines after it are not read.

        Returns:
            Deque[Cloudlet]: The cloudlet queue of the context.
        """
        for raw_line in self.trace_file:
            self.line_number += 1
            line = (raw_line.decode("ascii") if isinstance(raw_line, bytes)
                    else raw_line)
            if is_comment_or_blank(line):
                continue
            self.process_line(split_trace_line(line), context)

        return context.cloudlet_queue

    def process_line(self, fields: Sequence[str],
                     context: ProvisioningContext,
                     line_number: Optional[int] = None) -> bool:
        """
        Run one trace line through the admission pipeline.

        `self.line_number` counts the lines read by `generate_workload`. \
        Callers feeding lines one by one can pass `line_number` to set it.

        Args:
            fields (Sequence[str]): The fields of the trace line.
            context (ProvisioningContext): The collaborators and the shared \
            collections to provision into.
            line_number (Optional[int], optional): Line of the trace the \
            fields come from. Defaults to the current `self.line_number`.

        Raises:
            TraceFormatError: If a used column is not an integer.

        Returns:
            bool: False if the line is too short. Otherwise, True if a \
            cloudlet of the queue satisfies the predicate.
        """
        if line_number is not None:
            self.line_number = line_number

        record = parse_trace_line(fields, len(context.cloudlet_queue),
                                  self.job_number_index, self.line_number)
        if record is None:
            logger.info(MSG_SEPARATOR.join([NO_TIME,
                                            TRACE_LINE_REJECTED_MSG,
                                            str(self.line_number),
                                            str(len(fields))]))
            debug_print("Skipping trace line", self.line_number, "with",
                        len(fields), "fields")
            return False

        # Log the JobArrival
        logger.info(MSG_SEPARATOR.join([str(record.submit_time),
                                        JOB_ARRIVAL_MSG,
                                        str(record.job_id),
                                        record.kind.name]))

        windows = classify(record)
        if not record.is_batch:
            logger.info(MSG_SEPARATOR.join([str(record.submit_time),
                                            JOB_SKIPPED_MSG,
                                            str(record.job_id),
                                            record.kind.name]))
        elif len(windows) == 0:
            logger.info(MSG_SEPARATOR.join([str(record.submit_time),
                                            NO_WINDOW_MSG,
                                            str(record.job_id)]))

        for window in windows:
            self.provision_window(record, window, context)

        is_accepted = any_accepted(context.cloudlet_queue, self.predicate)
        logger.info(MSG_SEPARATOR.join([NO_TIME,
                                        ADMISSION_RESULT_MSG,
                                        str(is_accepted)]))
        return is_accepted

    def provision_window(self, record: TraceRecord, window: WindowBucket,
                         context: ProvisioningContext) -> List[Cloudlet]:
        """
        Provision one fleet for the job and bind its cloudlets.

        The VMs are all submitted before the cloudlets are created, and the \
        cloudlets are all created before any of them is bound.

        Args:
            record (TraceRecord): The job the fleet is provisioned for.
            window (WindowBucket): The window the job belongs to.
            context (ProvisioningContext): The collaborators and the shared \
            collections to provision into.

        Returns:
            List[Cloudlet]: The cloudlets of the fleet, in slot order.
        """
        fleet = provision_fleet(window.fleet_start, context)
        cloudlets = create_fleet_cloudlets(record.run_time, context,
                                           window.fleet_start)
        bind_fleet(cloudlets, fleet, context, window.fleet_start)

        logger.info(MSG_SEPARATOR.join([str(window.fleet_start),
                                        FLEET_PROVISIONED_MSG,
                                        str(record.job_id),
                                        "_".join(str(vm.vm_id)
                                                 for vm in fleet)]))
        return cloudlets

    def close(self) -> None:
        """Close the trace file if it was opened by the reader."""
        if self.owns_source:
            self.trace_file.close()

    def __enter__(self) -> WorkloadReader:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
