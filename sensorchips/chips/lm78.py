"""
National Semiconductor LM78 family: LM78, LM78-J and LM79.

The three tables are numerically alike and it is safe to use the LM78
numbers on the other two, but each chip keeps its own table: the LM79
cannot write the IN4..IN6 upper limits.
"""

from ..models import ChipModel
from .common import R, RW

LM78 = ChipModel.declare("lm78", [
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
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
    ("VID", 61, R),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("FAN3_DIV", 73, R),  # read-only, unlike FAN1_DIV and FAN2_DIV
    ("ALARMS", 81, R),
], description="National Semiconductor LM78")

LM78J = ChipModel.declare("lm78-j", [
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
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
    ("VID", 61, R),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("FAN3_DIV", 73, R),
    ("ALARMS", 81, R),
], similar_to="lm78", description="National Semiconductor LM78-J")

LM79 = ChipModel.declare("lm79", [
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
    ("FAN3", 33, R),
    ("FAN1_MIN", 41, RW),
    ("FAN2_MIN", 42, RW),
    ("FAN3_MIN", 43, RW),
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
    ("VID", 61, R),
    ("FAN1_DIV", 71, RW),
    ("FAN2_DIV", 72, RW),
    ("FAN3_DIV", 73, R),
    ("ALARMS", 81, R),
], similar_to="lm78", description="National Semiconductor LM79")
