"""The `TraceRecord` is the typed, immutable form of one SWF trace line."""
from typing import NamedTuple

from swf_fleet.simulator_utils.values import JobKind


class TraceRecord(NamedTuple):
    """
    Format and types of the fields used from one trace line.

    Args:
        NamedTuple (NamedTuple): Typed version of collections.namedtuple().
    """

    job_id: int
    submit_time: int  # seconds
    run_time: int  # seconds, never less than 1
    num_proc: int  # max(requested, used), never less than 1
    batch_code: int  # raw value of the batch/interactive column
    kind: JobKind

    @property
    def is_batch(self) -> bool:
        """Check if the job is a batch job."""
        return self.kind is JobKind.BATCH
