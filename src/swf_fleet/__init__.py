"""
Windowed batch-fleet admission for Standard Workload Format (SWF) traces.

The `WorkloadReader` reads a trace and, for every batch job submitted during \
one of the first three days, provisions a fixed fleet of VMs through the \
broker of the simulation engine, creates one cloudlet per VM and binds them.
"""
from .simulation_logger import SimulatorLogger
from .simulator_utils import JobKind, ReaderConfig, load_config
from .trace import TraceRecord, TraceFormatError, parse_trace_line
from .window import WindowBucket, DAY_WINDOWS, classify
from .simulation import Vm, Host, DatacenterBroker
from .cloudlet import (Cloudlet, CloudletStatus, CloudletEventInfo,
                       UtilizationModel)
from .fleet import DefaultVmFactory, provision_fleet
from .lifecycle import bind_fleet
from .admission import accept_all, any_accepted
from .context import ProvisioningContext
from .reader import WorkloadReader

__version__ = "0.1.0"
