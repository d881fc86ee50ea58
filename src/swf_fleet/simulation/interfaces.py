"""
Interfaces of the simulation engine collaborators used by the reader.

The simulation engine owns the clock, the placement of VMs on hosts and the \
dispatching of cloudlets. The reader only needs the calls listed here.
"""
from __future__ import annotations
from typing import List, TYPE_CHECKING

from typing_extensions import Protocol

# Imports used only for type checking go here to avoid circular imports
if TYPE_CHECKING:
    from swf_fleet.cloudlet.cloudlet import Cloudlet
    from swf_fleet.simulation.vm import Vm


class Broker(Protocol):
    """Accepts the VMs and cloudlets of a fleet and binds them together."""

    def submit_vm(self, vm: Vm) -> None:
        ...

    def submit_cloudlet(self, cloudlet: Cloudlet) -> None:
        ...

    def bind_cloudlet_to_vm(self, cloudlet: Cloudlet, vm: Vm) -> None:
        ...


class VmFactory(Protocol):
    """
    Creates the VMs of a fleet.

    `vm_queue` holds the VMs created that have not started running a \
    cloudlet yet.
    """

    vm_queue: List[Vm]

    def create_vm(self, count: int, start_time: float,
                  application_tag: str, cores: int) -> Vm:
        ...


class Host(Protocol):
    """The machine a VM was placed on by the simulation engine."""

    def destroy_vm(self, vm: Vm) -> None:
        ...
