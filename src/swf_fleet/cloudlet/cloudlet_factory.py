"""
Create the cloudlets of a fleet.

A cloudlet variant only fixes the number of processing elements; every \
other attribute is shared by all the variants. The fleet slots use the \
variants listed in `FLEET_CLOUDLET_VARIANTS`.
"""
from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING

from swf_fleet.cloudlet.cloudlet import Cloudlet
from swf_fleet.cloudlet.utilization import UtilizationModel
from swf_fleet.simulation_logger import SimulatorLogger
from swf_fleet.simulation_logger.msg_list import (MSG_SEPARATOR,
                                                  CLOUDLET_SUBMITTED_MSG)
from swf_fleet.simulator_utils.values import (CLOUDLET_VARIANTS,
                                              FLEET_CLOUDLET_VARIANTS,
                                              CLOUDLET_FILE_SIZE,
                                              CLOUDLET_OUTPUT_SIZE,
                                              CLOUDLET_CPU_UTILIZATION,
                                              CLOUDLET_RAM_UTILIZATION)

if TYPE_CHECKING:
    from swf_fleet.context import ProvisioningContext

# Get the logger object for this module
logger = SimulatorLogger(__name__).get_logger()


def create_cloudlet(variant: int, run_time: int,
                    context: ProvisioningContext,
                    fleet_start: float) -> Cloudlet:
    """
    Create one cloudlet, queue it and submit it to the broker.

    The id of the cloudlet is the length of the cloudlet queue before the \
    cloudlet is added to it. The length of the cloudlet is the run time of \
    the job, it is not scaled by the MIPS of the VM.

    Args:
        variant (int): Key of the variant in `CLOUDLET_VARIANTS`.
        run_time (int): Run time of the job from the trace.
        context (ProvisioningContext): Holds the queue and the broker.
        fleet_start (float): Instant the fleet of the cloudlet starts.

    Raises:
        ValueError: If the variant is unknown.

    Returns:
        Cloudlet: The created cloudlet.
    """
    if variant not in CLOUDLET_VARIANTS:
        raise ValueError(f"Unknown cloudlet variant {variant}, expected one "
                         f"of {sorted(CLOUDLET_VARIANTS)}")

    cloudlet = Cloudlet(cloudlet_id=len(context.cloudlet_queue),
                        length=run_time,
                        pes=CLOUDLET_VARIANTS[variant],
                        file_size=CLOUDLET_FILE_SIZE,
                        output_size=CLOUDLET_OUTPUT_SIZE,
                        utilization_cpu=UtilizationModel(
                            CLOUDLET_CPU_UTILIZATION),
                        utilization_ram=UtilizationModel(
                            CLOUDLET_RAM_UTILIZATION))
    context.cloudlet_queue.append(cloudlet)
    context.broker.submit_cloudlet(cloudlet)

    logger.info(MSG_SEPARATOR.join([str(fleet_start),
                                    CLOUDLET_SUBMITTED_MSG,
                                    str(cloudlet.cloudlet_id),
                                    str(cloudlet.pes),
                                    str(cloudlet.length)]))
    return cloudlet


def create_fleet_cloudlets(run_time: int,
                           context: ProvisioningContext,
                           fleet_start: float,
                           variants: Sequence[int] = FLEET_CLOUDLET_VARIANTS
                           ) -> List[Cloudlet]:
    """
    Create one cloudlet per fleet slot, in slot order.

    Args:
        run_time (int): Run time of the job from the trace.
        context (ProvisioningContext): Holds the queue and the broker.
        fleet_start (float): Instant the fleet starts.
        variants (Sequence[int], optional): Variant of each slot. Defaults \
        to FLEET_CLOUDLET_VARIANTS.

    Returns:
        List[Cloudlet]: The cloudlets, one per slot.
    """
    return [create_cloudlet(variant, run_time, context, fleet_start)
            for variant in variants]
