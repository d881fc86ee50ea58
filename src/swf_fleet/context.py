"""
The `ProvisioningContext` carries everything a provisioning cycle needs.

It is built once per read of a trace and handed down to every stage of the \
pipeline, so no stage holds half-initialised state of its own.
"""
from __future__ import annotations
from collections import deque
from typing import Deque, List, NamedTuple, Optional

from swf_fleet.cloudlet.cloudlet import Cloudlet
from swf_fleet.simulation.interfaces import Broker, VmFactory
from swf_fleet.simulation.vm import Vm
from swf_fleet.simulator_utils.values import APPLICATION_TAG


class ProvisioningContext(NamedTuple):
    """
    The collaborators and shared collections of one read of a trace.

    Args:
        NamedTuple (NamedTuple): Typed version of collections.namedtuple().
    """

    broker: Broker
    vm_factory: VmFactory
    # Append-only, its length gives the id of the next cloudlet
    cloudlet_queue: Deque[Cloudlet]
    # Append-only, one entry per cloudlet completion
    finished_vms: List[Vm]
    application_tag: str = APPLICATION_TAG

    @classmethod
    def create(cls, broker: Broker, vm_factory: VmFactory,
               cloudlet_queue: Optional[Deque[Cloudlet]] = None,
               application_tag: str = APPLICATION_TAG
               ) -> ProvisioningContext:
        """
        Build a context with an empty finished-VM list.

        Args:
            broker (Broker): The broker VMs and cloudlets are submitted to.
            vm_factory (VmFactory): The factory creating the fleet VMs.
            cloudlet_queue (Optional[Deque[Cloudlet]], optional): A queue \
            shared with other readers. Defaults to a new empty queue.
            application_tag (str, optional): Tag of the fleet VMs. Defaults \
            to APPLICATION_TAG.

        Returns:
            ProvisioningContext: The new context.
        """
        if cloudlet_queue is None:
            cloudlet_queue = deque()
        return cls(broker=broker,
                   vm_factory=vm_factory,
                   cloudlet_queue=cloudlet_queue,
                   finished_vms=[],
                   application_tag=application_tag)
