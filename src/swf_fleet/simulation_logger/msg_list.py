"""File containing the event names entered in logging statements."""
from typing_extensions import Final


MSG_SEPARATOR: Final[str] = " , "
NO_TIME: Final[str] = "-"

TRACE_LINE_REJECTED_MSG: Final[str] = "TraceLineRejected"
JOB_ARRIVAL_MSG: Final[str] = "JobArrival"
JOB_SKIPPED_MSG: Final[str] = "JobSkipped"
NO_WINDOW_MSG: Final[str] = "NoWindowMatched"
FLEET_PROVISIONED_MSG: Final[str] = "FleetProvisioned"
VM_SUBMITTED_MSG: Final[str] = "VmSubmitted"
CLOUDLET_SUBMITTED_MSG: Final[str] = "CloudletSubmitted"
CLOUDLET_BOUND_MSG: Final[str] = "CloudletBound"
CLOUDLET_START_MSG: Final[str] = "CloudletStart"
CLOUDLET_FINISH_MSG: Final[str] = "CloudletFinish"
ADMISSION_RESULT_MSG: Final[str] = "AdmissionResult"
