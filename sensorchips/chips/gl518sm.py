"""
Genesys Logic GL518SM, revisions 0x00 and 0x80.

Revision 0x00 cannot read VDD, VIN1 and VIN2; only VIN3 is readable.
Their limits are still writable.
"""

from ..models import ChipModel
from .common import NONE, R, RW

GL518SM_R00 = ChipModel.declare("gl518sm-r00", [
    ("VDD", 1, NONE),
    ("VIN1", 2, NONE),
    ("VIN2", 3, NONE),
    ("VIN3", 4, R),
    ("VDD_MIN", 11, RW),
    ("VIN1_MIN", 12, RW),
    ("VIN2_MIN", 13, RW),
    ("VIN3_MIN", 14, RW),
    ("VDD_MAX", 21, RW),
    ("VIN1_MAX", 22, RW),
    ("VIN2_MAX", 23, RW),
    ("VIN3_MAX", 24, RW),
    ("FAN1", 31, R),
    ("FAN2", 32, R),
    ("FAN1_MIN", 41, RW),
    ("FAN2_MIN", 42, RW),
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
    ("VID", 61, R),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("ALARMS", 81, R),
    ("BEEP_ENABLE", 82, RW),
    ("BEEPS", 83, RW),
], similar_to="gl518sm-r80", description="Genesys Logic GL518SM rev 0x00")

GL518SM_R80 = ChipModel.declare("gl518sm-r80", [
    ("VDD", 1, R),
    ("VIN1", 2, R),
    ("VIN2", 3, R),
    ("VIN3", 4, R),
    ("VDD_MIN", 11, RW),
    ("VIN1_MIN", 12, RW),
    ("VIN2_MIN", 13, RW),
    ("VIN3_MIN", 14, RW),
    ("VDD_MAX", 21, RW),
    ("VIN1_MAX", 22, RW),
    ("VIN2_MAX", 23, RW),
    ("VIN3_MAX", 24, RW),
    ("FAN1", 31, R),
    ("FAN2", 32, R),
    ("FAN1_MIN", 41, RW),
    ("FAN2_MIN", 42, RW),
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
    ("VID", 61, R),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("ALARMS", 81, R),
    ("BEEP_ENABLE", 82, RW),
    ("BEEPS", 83, RW),
], description="Genesys Logic GL518SM rev 0x80")
