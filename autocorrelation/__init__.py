from .exceptions import *
from .tools import *

__all__ = list(exceptions.__all__)
__all__.extend(tools.__all__)
