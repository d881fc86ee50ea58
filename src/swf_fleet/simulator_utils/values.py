"""
File for constants and name constants.

This file contains the various constants and named constants used thoughout\
 the project: the SWF column layout, the day windows, the fleet composition \
and the cloudlet variant table.
"""

from typing import Dict, Optional, Tuple
from enum import Enum, unique

from typing_extensions import Final


@unique
class JobKind(Enum):
    """
    Enum for the batch/interactive classification of a trace job.

    The raw integer code of the SWF column is decoded into one of these \
    members once, while parsing the trace line.

    Args:
        Enum (Enum): The `Enum` parent class
    """

    INTERACTIVE = 1
    BATCH = 2
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> "JobKind":
        """
        Decode the raw SWF code into a `JobKind`.

        Args:
            code (int): The value read from the batch/interactive column.

        Returns:
            JobKind: The matching member, `UNKNOWN` for any other code.
        """
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

###############################################################################

# Column indices of the Standard Workload Format (SWF)
JOB_NUM_INDEX: Final[int] = 0
SUBMIT_TIME_INDEX: Final[int] = 1
RUN_TIME_INDEX: Final[int] = 3
NUM_PROC_INDEX: Final[int] = 4
REQ_NUM_PROC_INDEX: Final[int] = 7
BATCH_OR_INTERACTIVE_INDEX: Final[int] = 15

# Number of fields a trace line must have to be used
FIELD_COUNT: Final[int] = 18

# SWF header and comment lines start with this character
COMMENT_PREFIX: Final[str] = ";"

###############################################################################

DAY: Final[int] = 86400  # seconds

# (lower bound, upper bound, fleet start instant)
# A lower bound of None means the window is open below.
WINDOWS: Final[Tuple[Tuple[Optional[int], int, int], ...]] = (
    (None, DAY, DAY),
    (DAY, 2 * DAY, 2 * DAY),
    (2 * DAY, 3 * DAY, 3 * DAY),
)

###############################################################################

APPLICATION_TAG: Final[str] = "3"
VMS_PER_SLOT: Final[int] = 1
DEFAULT_VM_MIPS: Final[int] = 2500

# Core count of each VM of a fleet, in submission order
FLEET_CORES: Final[Tuple[int, ...]] = (1, 4, 2, 1, 2)

# Cloudlet variant id -> processor count
CLOUDLET_VARIANTS: Final[Dict[int, int]] = {
    1: 1,
    2: 4,
    3: 2,
    4: 1,
    5: 2,
}

# Cloudlet variant used for each fleet slot.
# The fifth slot reuses variant 3 instead of variant 5.
FLEET_CLOUDLET_VARIANTS: Final[Tuple[int, ...]] = (1, 2, 3, 4, 3)

CLOUDLET_FILE_SIZE: Final[int] = 300
CLOUDLET_OUTPUT_SIZE: Final[int] = 300
CLOUDLET_CPU_UTILIZATION: Final[float] = 0.1
CLOUDLET_RAM_UTILIZATION: Final[float] = 0.5
