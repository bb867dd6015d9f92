"""
Extra chip declarations loaded from YAML.

File format:

    chips:
      - prefix: lm81
        similar_to: lm80
        description: National Semiconductor LM81
        features:
          - {name: IN0, number: 1, mode: R}
          - {name: IN0_MIN, number: 11, mode: RW}

Entries are validated with pydantic, then turned into ChipModel objects which
re-check uniqueness of names and numbers.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import InvalidChipDeclaration
from .models import AccessMode, ChipModel, Feature

logger = logging.getLogger(__name__)


class FeatureDeclaration(BaseModel):
    name: str = Field(..., pattern=r"^[A-Z][A-Z0-9_]*$")
    number: int = Field(..., gt=0)
    mode: AccessMode

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value):
        if isinstance(value, AccessMode):
            return value
        return AccessMode.parse(value)


class ChipDeclaration(BaseModel):
    prefix: str = Field(..., min_length=1, pattern=r"^[\x21-\x7e]+$")
    similar_to: Optional[str] = None
    description: Optional[str] = None
    features: List[FeatureDeclaration] = Field(..., min_length=1)

    def to_model(self) -> ChipModel:
        features = tuple(Feature(f.name, f.number, f.mode) for f in self.features)
        return ChipModel(self.prefix, features, similar_to=self.similar_to, description=self.description)


class ChipFile(BaseModel):
    chips: List[ChipDeclaration] = []


def parse_chip_declarations(data: Optional[dict], source: str = "<data>") -> List[ChipModel]:
    """Validate already-parsed YAML data and build chip models."""
    try:
        parsed = ChipFile(**(data or {}))
    except ValidationError as e:
        raise InvalidChipDeclaration(f"{source}: {e}") from e
    except TypeError as e:
        raise InvalidChipDeclaration(f"{source}: expected a mapping with a 'chips' list") from e

    try:
        return [decl.to_model() for decl in parsed.chips]
    except InvalidChipDeclaration as e:
        raise InvalidChipDeclaration(f"{source}: {e}") from e


def load_chip_file(path: Union[str, Path]) -> List[ChipModel]:
    """Load chip models declared in a YAML file."""
    path = Path(path)
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidChipDeclaration(f"{path}: invalid YAML: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise InvalidChipDeclaration(f"{path}: expected a mapping with a 'chips' list")

    chips = parse_chip_declarations(data, str(path))
    prefixes = ", ".join(c.prefix for c in chips)
    logger.info(f"loaded {len(chips)} chip(s) from {path}: {prefixes}")
    return chips
