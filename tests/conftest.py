import os
import tempfile

# The logger creates its output file when the package is first imported
os.environ.setdefault("SWF_FLEET_LOG_DIR",
                      tempfile.mkdtemp(prefix="swf_fleet_logs_"))
