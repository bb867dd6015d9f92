"""Winbond W83781D: three temperature channels and beep control."""

from ..models import ChipModel
from .common import R, RW

W83781D = ChipModel.declare("w83781d", [
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
    ("IN4_MAX", 25, RW),
    ("IN5_MAX", 26, RW),
    ("IN6_MAX", 27, RW),
    ("FAN1", 31, R),
    ("FAN2", 32, R),
    ("FAN3", 33, R),
    ("FAN1_MIN", 41, RW),
    ("FAN2_MIN", 42, RW),
    ("FAN3_MIN", 43, RW),
    ("TEMP1", 51, R),
    ("TEMP1_HYST", 52, RW),
    ("TEMP1_OVER", 53, RW),
    ("TEMP2", 54, R),
    ("TEMP2_HYST", 55, RW),
    ("TEMP2_OVER", 56, RW),
    ("TEMP3", 57, R),
    ("TEMP3_HYST", 58, RW),
    ("TEMP3_OVER", 59, RW),
    ("VID", 61, R),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("FAN3_DIV", 73, R),  # read-only, unlike FAN1_DIV and FAN2_DIV
    ("ALARMS", 81, R),
    ("BEEP_ENABLE", 82, RW),
    ("BEEPS", 83, RW),
], description="Winbond W83781D")
