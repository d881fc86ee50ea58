from typing import List

from swf_fleet.context import ProvisioningContext
from swf_fleet.fleet.vm_factory import DefaultVmFactory
from swf_fleet.simulation.broker import DatacenterBroker
from swf_fleet.simulator_utils.values import (JOB_NUM_INDEX, SUBMIT_TIME_INDEX,
                                              RUN_TIME_INDEX, NUM_PROC_INDEX,
                                              REQ_NUM_PROC_INDEX,
                                              BATCH_OR_INTERACTIVE_INDEX,
                                              FIELD_COUNT)


def make_fields(job_id="1", submit_time="500", run_time="100", num_proc="1",
                req_num_proc="1", batch_code="2",
                field_count=FIELD_COUNT) -> List[str]:
    """Build the fields of an SWF line, unused columns are set to -1."""
    fields = ["-1"] * field_count
    values = {JOB_NUM_INDEX: job_id,
              SUBMIT_TIME_INDEX: submit_time,
              RUN_TIME_INDEX: run_time,
              NUM_PROC_INDEX: num_proc,
              REQ_NUM_PROC_INDEX: req_num_proc,
              BATCH_OR_INTERACTIVE_INDEX: batch_code}
    for index, value in values.items():
        if index < field_count:
            fields[index] = str(value)
    return fields


def make_line(**kwargs) -> str:
    return " ".join(make_fields(**kwargs)) + "\n"


def new_context() -> ProvisioningContext:
    return ProvisioningContext.create(DatacenterBroker(), DefaultVmFactory())
