"""
This file contains the global variables used by the reader.

`DEBUG_MODE` is switched on through the `SWF_FLEET_DEBUG` environment \
variable.
"""

import os

DEBUG_MODE: bool = os.environ.get("SWF_FLEET_DEBUG", "") not in ("", "0")
