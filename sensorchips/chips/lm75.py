"""National Semiconductor LM75 temperature sensor."""

from ..models import ChipModel
from .common import R, RW

LM75 = ChipModel.declare("lm75", [
    ("TEMP", 51, R),
    ("TEMP_HYST", 52, RW),
    ("TEMP_OVER", 53, RW),
], description="National Semiconductor LM75")
