from .trace_record import TraceRecord
from .trace_parser import (TraceFormatError, parse_trace_line,
                           split_trace_line, is_comment_or_blank)
