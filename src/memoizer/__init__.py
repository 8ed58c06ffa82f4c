__version__ = "1.0"
__date__ = ""

from zuper_commons.logs import ZLogger

version = __version__

logger = ZLogger(__name__)

from .constants import *
from .keys import *
from .memoize_imp import *
from .memoize_debug_imp import *
