"""
Load the reader configuration from a JSON file.

The configuration file has the format:

    {
        "trace_file": "traces/input/LANL-CM5-1994-4.1-cln.swf",
        "mips": 2500,
        "job_number_index": 0
    }

`job_number_index` is optional. A value of `null`, or any negative value, \
makes the reader generate the job numbers from the size of the cloudlet \
queue instead of reading them from the trace. It must be lower than the \
number of fields of an SWF line.
"""

import json
from pathlib import Path
from typing import Optional, Union

from typing_extensions import NotRequired, TypedDict

from .values import FIELD_COUNT, JOB_NUM_INDEX


class ReaderConfig(TypedDict):
    """
    Typed dictionary class to describe the format of the configuration file.

    Args:
        TypedDict (TypedDict): TypedDict base class.
    """

    trace_file: str
    mips: int
    job_number_index: NotRequired[Optional[int]]


REQUIRED_KEYS = ("trace_file", "mips")


def load_config(config_file_path: Union[str, Path]) -> ReaderConfig:
    """
    Read and validate the configuration file.

    Args:
        config_file_path (Union[str, Path]): Path to the JSON file.

    Raises:
        ValueError: When a required key is missing or has the wrong type.

    Returns:
        ReaderConfig: The validated configuration. Unknown keys are dropped.
    """
    with open(config_file_path, "r") as file_handler:
        raw_config = json.load(file_handler)

    for key in REQUIRED_KEYS:
        if key not in raw_config:
            raise ValueError(f"Missing key '{key}' in the configuration "
                             f"file {config_file_path}")

    if not isinstance(raw_config["mips"], int):
        raise ValueError("The 'mips' value must be an integer, got "
                         f"{raw_config['mips']!r}")

    job_number_index = raw_config.get("job_number_index", JOB_NUM_INDEX)
    if job_number_index is not None and not isinstance(job_number_index, int):
        raise ValueError("The 'job_number_index' value must be an integer or"
                         f" null, got {job_number_index!r}")
    if job_number_index is not None and job_number_index >= FIELD_COUNT:
        raise ValueError("The 'job_number_index' value must be lower than "
                         f"{FIELD_COUNT}, got {job_number_index}")

    return ReaderConfig(trace_file=str(raw_config["trace_file"]),
                        mips=raw_config["mips"],
                        job_number_index=job_number_index)
