from .vm_factory import DefaultVmFactory
from .fleet_provisioner import provision_fleet
