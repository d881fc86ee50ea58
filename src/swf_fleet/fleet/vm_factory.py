"""This module contains the factory creating the VMs of the fleets."""

from typing import List

from swf_fleet.simulation.vm import Vm
from swf_fleet.simulator_utils.values import DEFAULT_VM_MIPS


class DefaultVmFactory(object):
    """
    Create VMs with sequential ids and keep the ones not yet in use.

    A VM stays in `vm_queue` until the cloudlet bound to it starts running.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, mips: int = DEFAULT_VM_MIPS, first_vm_id: int = 0):
        self.mips = mips
        self.next_vm_id = first_vm_id
        self.vm_queue: List[Vm] = []

    def create_vm(self, count: int, start_time: float,
                  application_tag: str, cores: int) -> Vm:
        """
        Create a VM and add it to the queue of VMs not yet in use.

        Args:
            count (int): Number of identical instances the VM stands for.
            start_time (float): Instant at which the VM starts executing.
            application_tag (str): Application the VM is created for.
            cores (int): Number of processing elements of the VM.

        Returns:
            Vm: The created VM.
        """
        assert count >= 1, "DefaultVmFactory.create_vm: count must be >= 1"
        assert cores >= 1, "DefaultVmFactory.create_vm: cores must be >= 1"

        vm = Vm(vm_id=self.next_vm_id,
                cores=cores,
                mips=self.mips,
                application_tag=application_tag,
                start_time=start_time,
                instance_count=count)
        self.next_vm_id += 1
        self.vm_queue.append(vm)
        return vm
