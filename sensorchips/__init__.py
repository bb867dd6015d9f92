"""
sensorchips - register catalog for hardware monitoring chips

For each supported chip (lm78, w83781d, adm9240, ...) the catalog maps
feature names (IN0, FAN1_MIN, TEMP_OVER, ALARMS, ...) to the register number
and access mode a bus-access layer needs:

    >>> from sensorchips import lookup
    >>> lookup("lm78", "IN0_MIN")
    (11, <AccessMode.READ_WRITE: 'RW'>)
"""

from .models import AccessMode, ChipModel, Feature, FeatureKind
from .errors import (
    CatalogError,
    InvalidChipDeclaration,
    ReadOnlyFeature,
    UnknownChip,
    UnknownFeature,
)
from .catalog import RegisterCatalog, default_catalog, features_of, lookup, prefixes

__all__ = [
    # Data model
    'AccessMode',
    'ChipModel',
    'Feature',
    'FeatureKind',

    # Errors
    'CatalogError',
    'InvalidChipDeclaration',
    'ReadOnlyFeature',
    'UnknownChip',
    'UnknownFeature',

    # Catalog
    'RegisterCatalog',
    'default_catalog',
    'lookup',
    'features_of',
    'prefixes',
]
