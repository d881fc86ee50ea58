"""
The `Cloudlet` class describes one synthetic task bound to one VM.

The simulation engine calls `notify_start` and `notify_finish` when the \
cloudlet starts and ends running. These fire the listeners registered on \
the cloudlet, at most once each.
"""
from __future__ import annotations
from enum import Enum, unique
from typing import Callable, List, NamedTuple, Optional

from swf_fleet.cloudlet.utilization import UtilizationModel
from swf_fleet.simulation.vm import Vm


@unique
class CloudletStatus(Enum):
    """
    Enum for the execution status of a cloudlet.

    Args:
        Enum (Enum): The `Enum` parent class
    """

    INSTANTIATED = 0
    INEXEC = 1
    SUCCESS = 2
    FAILED = 3
    CANCELED = 4


class CloudletEventInfo(NamedTuple):
    """
    Payload handed to the cloudlet listeners.

    Args:
        NamedTuple (NamedTuple): Typed version of collections.namedtuple().
    """

    time: float
    cloudlet: "Cloudlet"
    vm: Optional[Vm]


CloudletListener = Callable[[CloudletEventInfo], None]


class Cloudlet(object):
    """
    A synthetic unit of work run on exactly one VM.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, cloudlet_id: int, length: int, pes: int,
                 file_size: int, output_size: int,
                 utilization_cpu: UtilizationModel,
                 utilization_ram: UtilizationModel):
        """
        Initialise the instance of the Cloudlet class.

        Args:
            cloudlet_id (int): The cloudlet identifier.
            length (int): Length of the cloudlet.
            pes (int): Number of processing elements the cloudlet needs.
            file_size (int): Size of the input file of the cloudlet.
            output_size (int): Size of the output file of the cloudlet.
            utilization_cpu (UtilizationModel): CPU usage of the cloudlet.
            utilization_ram (UtilizationModel): RAM usage of the cloudlet.
        """
        self.cloudlet_id = cloudlet_id
        self.length = length
        self.pes = pes
        self.file_size = file_size
        self.output_size = output_size
        self.utilization_cpu = utilization_cpu
        self.utilization_ram = utilization_ram

        self.status = CloudletStatus.INSTANTIATED
        self.vm: Optional[Vm] = None  # Set by the broker when bound
        self.start_time: Optional[float] = None
        self.finish_time: Optional[float] = None

        self.on_start_listeners: List[CloudletListener] = []
        self.on_finish_listeners: List[CloudletListener] = []

    def add_on_start_listener(self, listener: CloudletListener) -> Cloudlet:
        self.on_start_listeners.append(listener)
        return self

    def add_on_finish_listener(self, listener: CloudletListener) -> Cloudlet:
        self.on_finish_listeners.append(listener)
        return self

    def notify_start(self, current_time: float,
                     vm: Optional[Vm] = None) -> None:
        """
        Mark the cloudlet as running and fire the start listeners.

        Args:
            current_time (float): The current time in the simulation.
            vm (Optional[Vm], optional): The VM the engine runs the cloudlet \
            on. Defaults to the VM the cloudlet is bound to.
        """
        if self.start_time is not None:
            return
        if vm is not None:
            self.vm = vm
        self.start_time = current_time
        self.status = CloudletStatus.INEXEC

        info = CloudletEventInfo(current_time, self, self.vm)
        for listener in self.on_start_listeners:
            listener(info)

    def notify_finish(self, current_time: float) -> None:
        """
        Fire the finish listeners.

        The listeners are responsible for setting the final status.

        Args:
            current_time (float): The current time in the simulation.
        """
        if self.finish_time is not None:
            return
        self.finish_time = current_time

        info = CloudletEventInfo(current_time, self, self.vm)
        for listener in self.on_finish_listeners:
            listener(info)

    def is_finished(self) -> bool:
        return self.finish_time is not None

    def __repr__(self):
        vm_id = None if self.vm is None else self.vm.vm_id
        return (f"Cloudlet(id={self.cloudlet_id}, length={self.length}, "
                f"pes={self.pes}, vm={vm_id}, status={self.status.name})")
