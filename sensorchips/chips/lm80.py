"""
National Semiconductor LM80.

Has two temperature limit pairs (hot and overtemperature shutdown) instead
of the single hysteresis/over pair of the LM78.
"""

from ..models import ChipModel
from .common import R, RW

LM80 = ChipModel.declare("lm80", [
    ("IN0", 1, R),
    ("IN1", 2, R),
    ("IN2", 3, R),
    ("IN3", 4, R),
    ("IN4", 5, R),
    ("IN5", 6, R),
    ("IN6", 7, R),
    ("IN0_MIN", 11, RW),
    ("IN1_MIN", 12, RW),
    ("IN2_MIN", 13, RW),
    ("IN3_MIN", 14, RW),
    ("IN4_MIN", 15, RW),
    ("IN5_MIN", 16, RW),
    ("IN6_MIN", 17, RW),
    ("IN0_MAX", 21, RW),
    ("IN1_MAX", 22, RW),
    ("IN2_MAX", 23, RW),
    ("IN3_MAX", 24, RW),
    ("IN4_MAX", 25, R),
    ("IN5_MAX", 26, R),
    ("IN6_MAX", 27, R),
    ("FAN1", 31, R),
    ("FAN2", 32, R),
    ("FAN1_MIN", 41, RW),
    ("FAN2_MIN", 42, RW),
    ("TEMP", 51, R),
    ("TEMP_HOT_HYST", 52, RW),
    ("TEMP_HOT_MAX", 53, RW),
    ("TEMP_OS_HYST", 54, RW),
    ("TEMP_OS_MAX", 55, RW),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("ALARMS", 81, R),
], description="National Semiconductor LM80")
