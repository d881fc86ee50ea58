"""
This file contains the handlers run on the lifecycle events of a cloudlet.

The handlers are registered as listeners on the cloudlets and are run by \
the simulation engine, inside its event processing step.

Raises:
    NotImplementedError: This exception is raised when attempting to create \
    an instance of the `CloudletHandler` class.
    NotImplementedError: This exception is raised when attempting to call \
    `run` on an instance of the `CloudletHandler` class.
"""
from __future__ import annotations
from typing import List, TYPE_CHECKING

from swf_fleet.cloudlet.cloudlet import CloudletEventInfo, CloudletStatus
from swf_fleet.simulation_logger import SimulatorLogger
from swf_fleet.simulation_logger.msg_list import (MSG_SEPARATOR,
                                                  CLOUDLET_START_MSG,
                                                  CLOUDLET_FINISH_MSG)

# Imports used only for type checking go here to avoid circular imports
if TYPE_CHECKING:
    from swf_fleet.simulation.interfaces import VmFactory
    from swf_fleet.simulation.vm import Vm

# Get the logger object for this module
logger = SimulatorLogger(__name__).get_logger()


class CloudletHandler(object):
    """
    This is the abstract `CloudletHandler` object class.

    Args:
        object (Object): Parent object class.
    """

    def __init__(self):
        """
        One cannot initialise the object of the abstract class \
        `CloudletHandler`.

        Raises:
            NotImplementedError: This exception is raised when attempting to \
            create an instance of the `CloudletHandler` class.
        """
        raise NotImplementedError(
            "CloudletHandler is an abstract class and cannot be instantiated"
            " directly")

    def __call__(self, info: CloudletEventInfo) -> None:
        self.run(info)

    def run(self, info: CloudletEventInfo) -> None:
        """
        Run the actions to handle the lifecycle event.

        Args:
            info (CloudletEventInfo): The cloudlet, its VM and the current \
            time in the simulation.

        Raises:
            NotImplementedError: This exception is raised when attempting to \
            call `run` on an instance of the `CloudletHandler` class.
        """
        raise NotImplementedError(
            "The run() method must be implemented by each class subclassing "
            "CloudletHandler")


##########################################################################
##########################################################################


class CloudletStartHandler(CloudletHandler):
    """
    Handler run when a cloudlet starts running on its VM.

    The VM is now in use, so it is taken out of the queue of VMs of the \
    factory that are waiting for a cloudlet.

    Args:
        CloudletHandler (CloudletHandler): Parent CloudletHandler class.
    """

    def __init__(self, vm_factory: VmFactory):
        """
        Initialise the instance of the `CloudletStartHandler` class.

        Args:
            vm_factory (VmFactory): The factory that created the VM.
        """
        self.vm_factory = vm_factory

    def run(self, info: CloudletEventInfo) -> None:
        """
        Run the actions to perform when the cloudlet starts.

        Args:
            info (CloudletEventInfo): The cloudlet, its VM and the current \
            time in the simulation.
        """
        vm = info.vm
        assert vm is not None, (f"CloudletStartHandler.run: cloudlet "
                                f"{info.cloudlet.cloudlet_id} has no VM")

        # Log the CloudletStart
        logger.info(MSG_SEPARATOR.join([str(info.time),
                                        CLOUDLET_START_MSG,
                                        str(info.cloudlet.cloudlet_id),
                                        str(vm.vm_id)]))

        if vm in self.vm_factory.vm_queue:
            self.vm_factory.vm_queue.remove(vm)

###############################################################################
###############################################################################


class CloudletFinishHandler(CloudletHandler):
    """
    Handler run when a cloudlet has completed.

    The VM of the cloudlet is recorded as finished and destroyed on its host.

    Args:
        CloudletHandler (CloudletHandler): Parent CloudletHandler class.
    """

    def __init__(self, finished_vms: List[Vm]):
        """
        Initialise the instance of the `CloudletFinishHandler` class.

        Args:
            finished_vms (List[Vm]): The list the VMs are recorded into.
        """
        self.finished_vms = finished_vms

    def run(self, info: CloudletEventInfo) -> None:
        """
        Run the actions to perform on the event of cloudlet completion.

        Args:
            info (CloudletEventInfo): The cloudlet, its VM and the current \
            time in the simulation.
        """
        vm = info.vm
        assert vm is not None, (f"CloudletFinishHandler.run: cloudlet "
                                f"{info.cloudlet.cloudlet_id} has no VM")
        assert vm.host is not None, (f"CloudletFinishHandler.run: {vm} was "
                                     "never placed on a host")

        # Log the CloudletFinish
        logger.info(MSG_SEPARATOR.join([str(info.time),
                                        CLOUDLET_FINISH_MSG,
                                        str(info.cloudlet.cloudlet_id),
                                        str(vm.vm_id)]))

        self.finished_vms.append(vm)
        info.cloudlet.status = CloudletStatus.SUCCESS
        vm.host.destroy_vm(vm)
