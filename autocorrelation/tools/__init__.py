from .functions import *
from .series import *


__all__ = list(functions.__all__)
__all__.extend(series.__all__)
