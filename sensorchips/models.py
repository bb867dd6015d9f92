"""
Data model of the register catalog.

A ChipModel owns an ordered tuple of Features. Each Feature carries a register
number that is only meaningful inside its chip: the same number may denote
unrelated features on two different chips.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import InvalidChipDeclaration, UnknownFeature


class AccessMode(Enum):
    """Declared access mode of a feature"""
    READ_ONLY = "R"
    READ_WRITE = "RW"
    NO_ACCESS = "NONE"  # register exists but the chip revision cannot read it

    @classmethod
    def parse(cls, value: str) -> "AccessMode":
        """Accept 'R', 'RW', 'NONE' or the member name, case-insensitive."""
        key = str(value).strip().upper()
        for mode in cls:
            if key in (mode.value, mode.name):
                return mode
        raise ValueError(f"invalid access mode: {value!r}")

    def __str__(self) -> str:
        return self.value


class FeatureKind(Enum):
    """Sensor class a feature belongs to, derived from its name"""
    VOLTAGE = "voltage"
    FAN = "fan"
    TEMP = "temperature"
    VID = "vid"
    ALARMS = "alarms"
    BEEP = "beep"
    OUTPUT = "output"
    OTHER = "other"


# Format: (name pattern, kind). First match wins.
KIND_RULES: List[Tuple[re.Pattern, FeatureKind]] = [
    (re.compile(r"^(IN\d+|VDD|VIN\d+)(_|$)"), FeatureKind.VOLTAGE),
    (re.compile(r"^FAN\d*(_|$)"), FeatureKind.FAN),
    (re.compile(r"^(REMOTE_)?TEMP\d*(_|$)"), FeatureKind.TEMP),
    (re.compile(r"^VID$"), FeatureKind.VID),
    (re.compile(r"^(ALARMS|STATUS)$"), FeatureKind.ALARMS),
    (re.compile(r"^BEEP"), FeatureKind.BEEP),
    (re.compile(r"^ANALOG_OUT$"), FeatureKind.OUTPUT),
]

FEATURE_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")


@dataclass(frozen=True)
class Feature:
    """One readable/writable quantity of a chip"""
    name: str
    number: int
    mode: AccessMode

    @property
    def readable(self) -> bool:
        return self.mode in (AccessMode.READ_ONLY, AccessMode.READ_WRITE)

    @property
    def writable(self) -> bool:
        return self.mode is AccessMode.READ_WRITE

    @property
    def label(self) -> str:
        """libsensors style lower-case name, e.g. 'in0_min'"""
        return self.name.lower()

    @property
    def kind(self) -> FeatureKind:
        for pattern, kind in KIND_RULES:
            if pattern.search(self.name):
                return kind
        return FeatureKind.OTHER

    def as_tuple(self) -> Tuple[str, int, AccessMode]:
        return self.name, self.number, self.mode


@dataclass(frozen=True)
class ChipModel:
    """
    A supported chip: its prefix and the features it declares.

    similar_to is an informational note only (e.g. lm79 resembles lm78).
    It is never consulted for lookups.
    """
    prefix: str
    features: Tuple[Feature, ...]
    similar_to: Optional[str] = None
    description: Optional[str] = None
    _by_name: Mapping[str, Feature] = field(init=False, repr=False, compare=False)
    _by_number: Mapping[int, Feature] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.prefix, str) or not self.prefix or not self.prefix.isascii():
            raise InvalidChipDeclaration(f"chip prefix must be a non-empty ASCII string: {self.prefix!r}")

        features = tuple(self.features)
        by_name: Dict[str, Feature] = {}
        by_number: Dict[int, Feature] = {}

        for feature in features:
            if not FEATURE_NAME.match(feature.name):
                raise InvalidChipDeclaration(f"{self.prefix}: invalid feature name {feature.name!r}")
            if isinstance(feature.number, bool) or not isinstance(feature.number, int) or feature.number <= 0:
                raise InvalidChipDeclaration(
                    f"{self.prefix}/{feature.name}: register number must be a positive integer, "
                    f"got {feature.number!r}"
                )
            if not isinstance(feature.mode, AccessMode):
                raise InvalidChipDeclaration(f"{self.prefix}/{feature.name}: invalid access mode {feature.mode!r}")
            if feature.name in by_name:
                raise InvalidChipDeclaration(f"{self.prefix}: duplicate feature name {feature.name}")
            if feature.number in by_number:
                raise InvalidChipDeclaration(
                    f"{self.prefix}: register number {feature.number} used by both "
                    f"{by_number[feature.number].name} and {feature.name}"
                )
            by_name[feature.name] = feature
            by_number[feature.number] = feature

        object.__setattr__(self, "features", features)
        object.__setattr__(self, "_by_name", MappingProxyType(by_name))
        object.__setattr__(self, "_by_number", MappingProxyType(by_number))

    @classmethod
    def declare(
        cls,
        prefix: str,
        table: Iterable[Tuple[str, int, AccessMode]],
        similar_to: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "ChipModel":
        """Build a chip from (name, number, mode) rows in declaration order."""
        features = tuple(Feature(name, number, mode) for name, number, mode in table)
        return cls(prefix, features, similar_to=similar_to, description=description)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def feature(self, name: str) -> Feature:
        try:
            return self._by_name[name]
        except (KeyError, TypeError):
            raise UnknownFeature(self.prefix, name) from None

    def feature_by_number(self, number: int) -> Feature:
        try:
            return self._by_number[number]
        except (KeyError, TypeError):
            raise UnknownFeature(self.prefix, number) from None

    def names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.features)

    def mapping_of(self, name: str) -> Optional[str]:
        """
        Main feature a limit, hysteresis or divisor belongs to.

        IN0_MIN maps to IN0, TEMP_HOT_HYST to TEMP, FAN3_DIV to FAN3.
        Main features (IN0, ALARMS, BEEP_ENABLE, ...) map to None.
        """
        self.feature(name)
        parts = name.split("_")
        for i in range(len(parts) - 1, 0, -1):
            candidate = "_".join(parts[:i])
            if candidate in self._by_name:
                return candidate
        return None

    def main_features(self) -> Tuple[Feature, ...]:
        return tuple(f for f in self.features if self.mapping_of(f.name) is None)

    def subfeatures(self, name: str) -> Tuple[Feature, ...]:
        """Features whose mapping is the given main feature"""
        self.feature(name)
        return tuple(f for f in self.features if self.mapping_of(f.name) == name)
