"""This module contains a broker that records what the reader submits."""

from __future__ import annotations
from typing import List, Tuple, TYPE_CHECKING

from swf_fleet.simulation.vm import Vm

if TYPE_CHECKING:
    from swf_fleet.cloudlet.cloudlet import Cloudlet


class DatacenterBroker(object):
    """
    Broker keeping the submitted VMs and cloudlets in submission order.

    Binding a cloudlet to a VM assigns the VM to the cloudlet. Dispatching \
    the cloudlets is left to the simulation engine, which reads the waiting \
    lists.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, name: str = "broker"):
        self.name = name
        self.vm_waiting_list: List[Vm] = []
        self.cloudlet_waiting_list: List[Cloudlet] = []
        self.bindings: List[Tuple[Cloudlet, Vm]] = []

    def submit_vm(self, vm: Vm) -> None:
        self.vm_waiting_list.append(vm)

    def submit_cloudlet(self, cloudlet: Cloudlet) -> None:
        self.cloudlet_waiting_list.append(cloudlet)

    def bind_cloudlet_to_vm(self, cloudlet: Cloudlet, vm: Vm) -> None:
        """
        Request the cloudlet to be run on the given VM.

        Args:
            cloudlet (Cloudlet): A cloudlet already submitted to the broker.
            vm (Vm): A VM already submitted to the broker.
        """
        assert vm in self.vm_waiting_list, (f"{self.name}: {vm} must be "
                                            "submitted before binding")
        cloudlet.vm = vm
        self.bindings.append((cloudlet, vm))
