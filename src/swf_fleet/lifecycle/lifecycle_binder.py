"""Bind the cloudlets of a fleet to its VMs and install their handlers."""
from __future__ import annotations
from typing import Sequence, TYPE_CHECKING

from swf_fleet.lifecycle.handlers import (CloudletStartHandler,
                                          CloudletFinishHandler)
from swf_fleet.simulation_logger import SimulatorLogger
from swf_fleet.simulation_logger.msg_list import (MSG_SEPARATOR,
                                                  CLOUDLET_BOUND_MSG)

if TYPE_CHECKING:
    from swf_fleet.cloudlet.cloudlet import Cloudlet
    from swf_fleet.context import ProvisioningContext
    from swf_fleet.simulation.vm import Vm

# Get the logger object for this module
logger = SimulatorLogger(__name__).get_logger()


def bind_fleet(cloudlets: Sequence[Cloudlet], fleet: Sequence[Vm],
               context: ProvisioningContext, fleet_start: float) -> None:
    """
    Bind each cloudlet to the VM of the same slot, in slot order.

    Each cloudlet gets one start handler and one finish handler.

    Args:
        cloudlets (Sequence[Cloudlet]): The cloudlets of the fleet.
        fleet (Sequence[Vm]): The VMs of the fleet.
        context (ProvisioningContext): Holds the broker, the VM factory and \
        the finished-VM list.
        fleet_start (float): Instant the fleet starts.
    """
    assert len(cloudlets) == len(fleet), ("bind_fleet: every VM of the fleet"
                                          " needs exactly one cloudlet")

    for cloudlet, vm in zip(cloudlets, fleet):
        context.broker.bind_cloudlet_to_vm(cloudlet, vm)
        cloudlet.add_on_start_listener(
            CloudletStartHandler(context.vm_factory))
        cloudlet.add_on_finish_listener(
            CloudletFinishHandler(context.finished_vms))

        logger.info(MSG_SEPARATOR.join([str(fleet_start),
                                        CLOUDLET_BOUND_MSG,
                                        str(cloudlet.cloudlet_id),
                                        str(vm.vm_id)]))
