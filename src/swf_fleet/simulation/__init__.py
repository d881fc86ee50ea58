from .interfaces import Broker, VmFactory
from .vm import Vm
from .host import Host
from .broker import DatacenterBroker
