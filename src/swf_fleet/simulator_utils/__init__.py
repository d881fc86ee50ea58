from .values import JobKind
from .config import ReaderConfig, load_config
from .print_utils import debug_print
