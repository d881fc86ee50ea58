"""The `Vm` class is just like a struct or Plain Old Data format."""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING


if TYPE_CHECKING:
    from swf_fleet.simulation.interfaces import Host


class Vm(object):
    """
    Descriptor of one virtual machine of a fleet.

    The reader only creates the descriptor. Once submitted to the broker, the \
    simulation engine places it on a host and runs it.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, vm_id: int, cores: int, mips: int,
                 application_tag: str, start_time: float,
                 instance_count: int = 1):
        """
        Initialise the instance of the Vm class.

        Args:
            vm_id (int): The VM identifier.
            cores (int): Number of processing elements of the VM.
            mips (int): Capacity of each processing element.
            application_tag (str): Identifier of the application the VM \
            is created for.
            start_time (float): Instant at which the VM starts executing.
            instance_count (int, optional): Number of identical instances \
            the descriptor stands for. Defaults to 1.
        """
        self.vm_id = vm_id
        self.cores = cores
        self.mips = mips
        self.application_tag = application_tag
        self.start_time = start_time
        self.instance_count = instance_count
        self.host: Optional[Host] = None  # Set when placed by the engine
        self.destroyed = False

    def __repr__(self):
        return (f"Vm(id={self.vm_id}, cores={self.cores}, "
                f"start={self.start_time}, app={self.application_tag})")
