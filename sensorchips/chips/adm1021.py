"""Analog Devices ADM1021: local and remote temperature."""

from ..models import ChipModel
from .common import R, RW

ADM1021 = ChipModel.declare("adm1021", [
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
    ("REMOTE_TEMP", 54, R),
    ("REMOTE_TEMP_HYST", 55, RW),
    ("REMOTE_TEMP_OVER", 56, RW),
    ("STATUS", 81, R),
], description="Analog Devices ADM1021")
