"""
Bucket the submission time of a batch job into the fixed day windows.

Each window is tested on its own: a job may in principle match several \
windows and every match provisions one fleet. The bounds are exclusive, so \
a job submitted exactly on a day boundary matches no window.
"""
from typing import List, NamedTuple, Optional

from swf_fleet.trace.trace_record import TraceRecord
from swf_fleet.simulator_utils.values import WINDOWS


class WindowBucket(NamedTuple):
    """
    A submission time range and the instant its fleet starts executing.

    Args:
        NamedTuple (NamedTuple): Typed version of collections.namedtuple().
    """

    lower: Optional[int]  # None when the window is open below
    upper: int
    fleet_start: int

    def contains(self, submit_time: int) -> bool:
        """Check if the submission time falls strictly inside the window."""
        if self.lower is not None and not self.lower < submit_time:
            return False
        return submit_time < self.upper


DAY_WINDOWS: List[WindowBucket] = [WindowBucket(lower, upper, fleet_start)
                                   for lower, upper, fleet_start in WINDOWS]


def classify(record: TraceRecord,
             windows: Optional[List[WindowBucket]] = None
             ) -> List[WindowBucket]:
    """
    Find the windows for which a fleet must be provisioned for the record.

    Args:
        record (TraceRecord): The parsed trace line.
        windows (Optional[List[WindowBucket]], optional): The windows to test\
        , in order. Defaults to the three day windows.

    Returns:
        List[WindowBucket]: The matching windows in test order. Empty for \
        jobs that are not batch jobs.
    """
    if not record.is_batch:
        return []

    if windows is None:
        windows = DAY_WINDOWS

    return [window for window in windows
            if window.contains(record.submit_time)]
