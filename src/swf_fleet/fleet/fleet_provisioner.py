"""Provision the fixed fleet of VMs of a day window."""
from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING

from swf_fleet.simulation.vm import Vm
from swf_fleet.simulation_logger import SimulatorLogger
from swf_fleet.simulation_logger.msg_list import (MSG_SEPARATOR,
                                                  VM_SUBMITTED_MSG)
from swf_fleet.simulator_utils.values import FLEET_CORES, VMS_PER_SLOT

if TYPE_CHECKING:
    from swf_fleet.context import ProvisioningContext

# Get the logger object for this module
logger = SimulatorLogger(__name__).get_logger()


def provision_fleet(fleet_start: float,
                    context: ProvisioningContext,
                    fleet_cores: Sequence[int] = FLEET_CORES) -> List[Vm]:
    """
    Create the VMs of a fleet and submit them to the broker, in order.

    All the VMs carry the application tag of the context and start \
    executing at `fleet_start`. Failures of the broker are not handled here.

    Args:
        fleet_start (float): Instant at which the fleet starts executing.
        context (ProvisioningContext): Holds the VM factory and the broker.
        fleet_cores (Sequence[int], optional): Core count of each VM. \
        Defaults to FLEET_CORES.

    Returns:
        List[Vm]: The submitted VMs in submission order.
    """
    fleet: List[Vm] = []
    for cores in fleet_cores:
        vm = context.vm_factory.create_vm(VMS_PER_SLOT, fleet_start,
                                          context.application_tag, cores)
        context.broker.submit_vm(vm)
        logger.info(MSG_SEPARATOR.join([str(fleet_start),
                                        VM_SUBMITTED_MSG,
                                        str(vm.vm_id),
                                        str(vm.cores)]))
        fleet.append(vm)
    return fleet
