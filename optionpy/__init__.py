from .option import Option, Some, NONE, InvalidState, some, none, from_nullable
from .logger import ConsoleLogger, get_logger, configure_logging
from . import ops
