from .workload_reader import WorkloadReader
