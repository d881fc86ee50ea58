from .utilization import UtilizationModel
from .cloudlet import Cloudlet, CloudletStatus, CloudletEventInfo
from .cloudlet_factory import create_cloudlet, create_fleet_cloudlets
