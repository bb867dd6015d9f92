"""Exceptions raised by the register catalog."""


class CatalogError(LookupError):
    """Base class for all catalog errors"""


class UnknownChip(CatalogError):
    """Chip prefix is not present in the catalog"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"unknown chip: {prefix!r}")


class UnknownFeature(CatalogError):
    """Chip is known but does not declare the requested feature"""

    def __init__(self, prefix: str, feature):
        self.prefix = prefix
        self.feature = feature
        super().__init__(f"chip {prefix!r} has no feature {feature!r}")


class ReadOnlyFeature(CatalogError):
    """Write requested for a feature that is not declared read-write"""

    def __init__(self, prefix: str, feature: str, mode):
        self.prefix = prefix
        self.feature = feature
        self.mode = mode
        super().__init__(f"{prefix}/{feature} is not writable (mode {mode})")


class InvalidChipDeclaration(CatalogError, ValueError):
    """A chip model or catalog was declared with conflicting entries"""
