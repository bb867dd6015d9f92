"""Built-in chip tables, in catalog declaration order."""

from .lm78 import LM78, LM78J, LM79
from .lm75 import LM75
from .adm1021 import ADM1021
from .gl518sm import GL518SM_R00, GL518SM_R80
from .lm80 import LM80
from .w83781d import W83781D
from .adm9240 import ADM9240

BUILTIN_CHIPS = (
    LM78,
    LM78J,
    LM79,
    LM75,
    ADM1021,
    GL518SM_R00,
    GL518SM_R80,
    LM80,
    W83781D,
    ADM9240,
)

__all__ = [
    'BUILTIN_CHIPS',
    'LM78',
    'LM78J',
    'LM79',
    'LM75',
    'ADM1021',
    'GL518SM_R00',
    'GL518SM_R80',
    'LM80',
    'W83781D',
    'ADM9240',
]
