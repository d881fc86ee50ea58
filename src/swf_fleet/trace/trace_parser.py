"""
Parse the lines of a Standard Workload Format (SWF) trace.

See https://www.cs.huji.ac.il/labs/parallel/workload/swf.html for the \
description of the columns.

Raises:
    TraceFormatError: This exception is raised when a column used by the \
    reader does not hold an integer.
"""
from typing import List, Optional, Sequence

from swf_fleet.trace.trace_record import TraceRecord
from swf_fleet.simulator_utils.values import (JOB_NUM_INDEX, SUBMIT_TIME_INDEX,
                                              RUN_TIME_INDEX, NUM_PROC_INDEX,
                                              REQ_NUM_PROC_INDEX,
                                              BATCH_OR_INTERACTIVE_INDEX,
                                              FIELD_COUNT, COMMENT_PREFIX,
                                              JobKind)


class TraceFormatError(ValueError):
    """A column of a trace line could not be read as an integer."""

    def __init__(self, column: int, value: str,
                 line_number: Optional[int] = None):
        self.column = column
        self.value = value
        self.line_number = line_number
        location = "" if line_number is None else f" on line {line_number}"
        super().__init__(f"Invalid integer {value!r} in column {column}"
                         f"{location} of the trace")


def is_comment_or_blank(line: str) -> bool:
    """Check if the line is an SWF header/comment line or an empty line."""
    stripped = line.strip()
    return len(stripped) == 0 or stripped.startswith(COMMENT_PREFIX)


def split_trace_line(line: str) -> List[str]:
    """Split a raw trace line into its whitespace separated fields."""
    return line.strip().split()


def parse_int_field(fields: Sequence[str], index: int,
                    line_number: Optional[int] = None) -> int:
    """
    Read the integer held in one column of a trace line.

    Args:
        fields (Sequence[str]): The fields of the trace line.
        index (int): The column to read.
        line_number (Optional[int], optional): Line of the trace the fields \
        come from, used in the error message. Defaults to None.

    Raises:
        TraceFormatError: If the column does not hold an integer.

    Returns:
        int: The value of the column.
    """
    raw_value = fields[index].strip()
    try:
        return int(raw_value)
    except ValueError as err:
        raise TraceFormatError(index, raw_value, line_number) from err


def parse_trace_line(fields: Sequence[str],
                     queue_size: int,
                     job_number_index: Optional[int] = JOB_NUM_INDEX,
                     line_number: Optional[int] = None
                     ) -> Optional[TraceRecord]:
    """
    Build a `TraceRecord` from the fields of one trace line.

    Lines with fewer than `FIELD_COUNT` fields are not used and `None` is \
    returned for them. A column that does not hold an integer aborts the \
    reading of the trace.

    Args:
        fields (Sequence[str]): The fields of the trace line.
        queue_size (int): The current size of the cloudlet queue. Used to \
        generate the job number when `job_number_index` is None.
        job_number_index (Optional[int], optional): Column holding the job \
        number, or None or a negative value to generate it. Defaults to \
        JOB_NUM_INDEX.
        line_number (Optional[int], optional): Line of the trace the fields \
        come from. Defaults to None.

    Raises:
        TraceFormatError: If one of the columns used does not hold an integer.

    Returns:
        Optional[TraceRecord]: The record, or None if the line is too short.
    """
    if len(fields) < FIELD_COUNT:
        return None

    if job_number_index is None or job_number_index < 0:
        job_id = queue_size + 1
    else:
        job_id = parse_int_field(fields, job_number_index, line_number)

    # A run time of 0 is possible in SWF traces, the real run time was
    # rounded down
    run_time = max(parse_int_field(fields, RUN_TIME_INDEX, line_number), 1)

    # The requested processor count may be missing (-1) or zero, then the
    # processors actually used are taken
    max_num_proc = max(parse_int_field(fields, REQ_NUM_PROC_INDEX,
                                       line_number),
                       parse_int_field(fields, NUM_PROC_INDEX, line_number))
    num_proc = max(max_num_proc, 1)

    submit_time = parse_int_field(fields, SUBMIT_TIME_INDEX, line_number)
    batch_code = parse_int_field(fields, BATCH_OR_INTERACTIVE_INDEX,
                                 line_number)

    return TraceRecord(job_id=job_id,
                       submit_time=submit_time,
                       run_time=run_time,
                       num_proc=num_proc,
                       batch_code=batch_code,
                       kind=JobKind.from_code(batch_code))
