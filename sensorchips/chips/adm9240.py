"""Analog Devices ADM9240: six voltage inputs and an analog output."""

from ..models import ChipModel
from .common import R, RW

ADM9240 = ChipModel.declare("adm9240", [
    ("IN0", 1, R),
    ("IN1", 2, R),
    ("IN2", 3, R),
    ("IN3", 4, R),
    ("IN4", 5, R),
    ("IN5", 6, R),
    ("IN0_MIN", 11, RW),
    ("IN1_MIN", 12, RW),
    ("IN2_MIN", 13, RW),
    ("IN3_MIN", 14, RW),
    ("IN4_MIN", 15, RW),
    ("IN5_MIN", 16, RW),
    ("IN0_MAX", 21, RW),
    ("IN1_MAX", 22, RW),
    ("IN2_MAX", 23, RW),
    ("IN3_MAX", 24, RW),
    ("IN4_MAX", 25, RW),
    ("IN5_MAX", 26, RW),
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
    ("ANALOG_OUT", 82, RW),
], description="Analog Devices ADM9240")
