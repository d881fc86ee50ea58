from .handlers import (CloudletHandler, CloudletStartHandler,
                       CloudletFinishHandler)
from .lifecycle_binder import bind_fleet
