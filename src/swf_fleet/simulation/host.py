"""This module contains the Host class."""

from __future__ import annotations
from typing import List

from swf_fleet.simulation.vm import Vm


class Host(object):
    """
    A physical machine the VMs are placed on.

    Only keeps track of the VMs it holds. Capacity sharing between the VMs \
    is left to the simulation engine.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, host_id: int, num_cores: int):
        self.host_id = host_id
        self.num_cores = num_cores
        self.vms: List[Vm] = []
        self.destroyed_vms: List[Vm] = []

    def cores_in_use(self) -> int:
        return sum(vm.cores for vm in self.vms)

    def place_vm(self, vm: Vm) -> bool:
        """
        Place the VM on the host if there are enough free cores.

        Args:
            vm (Vm): The VM to place.

        Returns:
            bool: True if the VM was placed.
        """
        if self.num_cores - self.cores_in_use() < vm.cores:
            return False
        self.vms.append(vm)
        vm.host = self
        return True

    def destroy_vm(self, vm: Vm) -> None:
        """
        Remove the VM from the host and release its cores.

        Args:
            vm (Vm): The VM to destroy. It must be running on this host.
        """
        assert vm.host is self, (f"Host.destroy_vm: {vm} is not placed on "
                                 f"host {self.host_id}")
        self.vms.remove(vm)
        self.destroyed_vms.append(vm)
        vm.destroyed = True
