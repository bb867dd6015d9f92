"""
Register Catalog

Two-level mapping: chip prefix -> feature name -> (register number, access mode).
A catalog is populated once in its constructor and never mutated afterwards, so
it can be shared between threads without locking.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Tuple

from .chips import BUILTIN_CHIPS
from .errors import InvalidChipDeclaration, ReadOnlyFeature, UnknownChip
from .models import AccessMode, ChipModel, Feature

logger = logging.getLogger(__name__)


class RegisterCatalog:
    """Read-only catalog of chip models, keyed by prefix in declaration order"""

    def __init__(self, chips: Iterable[ChipModel]):
        by_prefix: Dict[str, ChipModel] = {}
        for chip in chips:
            if not isinstance(chip, ChipModel):
                raise InvalidChipDeclaration(f"not a chip model: {chip!r}")
            if chip.prefix in by_prefix:
                raise InvalidChipDeclaration(f"duplicate chip prefix: {chip.prefix}")
            by_prefix[chip.prefix] = chip
            logger.debug(f"Registered chip: {chip.prefix} ({len(chip)} features)")

        self._chips = MappingProxyType(by_prefix)
        self._prefixes = tuple(by_prefix)

    def __contains__(self, prefix: str) -> bool:
        return prefix in self._chips

    def __iter__(self) -> Iterator[ChipModel]:
        return iter(self._chips.values())

    def __len__(self) -> int:
        return len(self._chips)

    def __repr__(self) -> str:
        return f"RegisterCatalog({len(self)} chips)"

    # ----- core lookups -----

    def chip(self, prefix: str) -> ChipModel:
        """Get chip model by prefix, raising UnknownChip if absent."""
        try:
            return self._chips[prefix]
        except (KeyError, TypeError):
            raise UnknownChip(prefix) from None

    def feature(self, prefix: str, feature_name: str) -> Feature:
        return self.chip(prefix).feature(feature_name)

    def lookup(self, prefix: str, feature_name: str) -> Tuple[int, AccessMode]:
        """
        Resolve a feature of a chip.

        Args:
            prefix: Chip prefix, e.g. "lm78" (case-sensitive)
            feature_name: Symbolic feature name, e.g. "IN0_MIN"

        Returns:
            Tuple of (register number, access mode)

        Raises:
            UnknownChip: prefix is not in the catalog
            UnknownFeature: the chip does not declare feature_name
        """
        feature = self.feature(prefix, feature_name)
        return feature.number, feature.mode

    def features_of(self, prefix: str) -> Tuple[Tuple[str, int, AccessMode], ...]:
        """All (name, number, mode) entries of a chip in declaration order."""
        return tuple(f.as_tuple() for f in self.chip(prefix).features)

    def prefixes(self) -> Tuple[str, ...]:
        """All chip prefixes in declaration order."""
        return self._prefixes

    # ----- helpers for the bus-access layer -----

    def feature_by_number(self, prefix: str, number: int) -> Feature:
        """Reverse lookup: the feature a register number denotes on one chip."""
        return self.chip(prefix).feature_by_number(number)

    def require_writable(self, prefix: str, feature_name: str) -> Feature:
        """Return the feature, raising ReadOnlyFeature unless it is declared RW."""
        feature = self.feature(prefix, feature_name)
        if not feature.writable:
            raise ReadOnlyFeature(prefix, feature_name, feature.mode)
        return feature

    def extended(self, chips: Iterable[ChipModel]) -> "RegisterCatalog":
        """New catalog with extra chips appended after this catalog's chips."""
        return RegisterCatalog(list(self) + list(chips))


default_catalog = RegisterCatalog(BUILTIN_CHIPS)


def lookup(prefix: str, feature_name: str) -> Tuple[int, AccessMode]:
    return default_catalog.lookup(prefix, feature_name)


def features_of(prefix: str) -> Tuple[Tuple[str, int, AccessMode], ...]:
    return default_catalog.features_of(prefix)


def prefixes() -> Tuple[str, ...]:
    return default_catalog.prefixes()
