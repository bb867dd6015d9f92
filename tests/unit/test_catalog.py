"""
Tests for the register catalog lookups.

Covers lookup/features_of/prefixes on the built-in tables plus the
reverse and write-check helpers.
"""

import threading

import pytest

from sensorchips import (
    AccessMode,
    ChipModel,
    InvalidChipDeclaration,
    ReadOnlyFeature,
    RegisterCatalog,
    UnknownChip,
    UnknownFeature,
    features_of,
    lookup,
    prefixes,
)

R = AccessMode.READ_ONLY
RW = AccessMode.READ_WRITE


class TestLookup:
    """lookup(prefix, feature) -> (number, mode)"""

    def test_lm78_in0(self):
        assert lookup("lm78", "IN0") == (1, R)

    def test_lm78_in0_min(self):
        assert lookup("lm78", "IN0_MIN") == (11, RW)

    def test_w83781d_temp3_over(self):
        assert lookup("w83781d", "TEMP3_OVER") == (59, RW)

    def test_adm9240_analog_out(self):
        assert lookup("adm9240", "ANALOG_OUT") == (82, RW)

    def test_unknown_feature(self):
        with pytest.raises(UnknownFeature) as exc_info:
            lookup("lm78", "NONEXISTENT")
        assert exc_info.value.prefix == "lm78"
        assert exc_info.value.feature == "NONEXISTENT"

    def test_unhashable_feature_name(self):
        with pytest.raises(UnknownFeature):
            lookup("lm78", ["IN0"])

    def test_unknown_chip(self):
        with pytest.raises(UnknownChip) as exc_info:
            lookup("not-a-chip", "IN0")
        assert exc_info.value.prefix == "not-a-chip"

    def test_errors_are_lookup_errors(self):
        with pytest.raises(LookupError):
            lookup("not-a-chip", "IN0")
        with pytest.raises(LookupError):
            lookup("lm78", "NONEXISTENT")

    def test_idempotent(self, catalog):
        first = catalog.lookup("lm79", "IN4_MAX")
        for _ in range(5):
            assert catalog.lookup("lm79", "IN4_MAX") == first

    def test_prefix_is_case_sensitive(self):
        with pytest.raises(UnknownChip):
            lookup("LM78", "IN0")

    def test_feature_name_is_case_sensitive(self):
        with pytest.raises(UnknownFeature):
            lookup("lm78", "in0")

    def test_prefix_is_opaque(self):
        """gl518sm-r00 and gl518sm-r80 are unrelated keys, and no prefix is parsed"""
        assert lookup("gl518sm-r00", "VDD")[1] is AccessMode.NO_ACCESS
        assert lookup("gl518sm-r80", "VDD") == (1, R)
        with pytest.raises(UnknownChip):
            lookup("gl518sm", "VDD")

    def test_same_number_means_different_features_on_different_chips(self):
        assert lookup("lm78", "TEMP_OVER") == (53, RW)
        assert lookup("lm80", "TEMP_HOT_MAX") == (53, RW)
        assert lookup("w83781d", "TEMP1_OVER") == (53, RW)


class TestFeaturesOf:
    """features_of(prefix) enumerates in declaration order"""

    def test_gl518sm_r00_entries(self):
        entries = features_of("gl518sm-r00")
        assert len(entries) == 25
        assert entries[0] == ("VDD", 1, AccessMode.NO_ACCESS)
        assert entries[1] == ("VIN1", 2, AccessMode.NO_ACCESS)
        assert entries[2] == ("VIN2", 3, AccessMode.NO_ACCESS)
        assert entries[3] == ("VIN3", 4, R)
        assert entries[-1] == ("BEEPS", 83, RW)
        assert [number for _, number, _ in entries] == [
            1, 2, 3, 4, 11, 12, 13, 14, 21, 22, 23, 24,
            31, 32, 41, 42, 51, 52, 53, 61, 71, 72, 81, 82, 83,
        ]

    def test_limits_stay_writable_where_input_is_unreadable(self):
        entries = dict((name, mode) for name, _, mode in features_of("gl518sm-r00"))
        assert entries["VDD_MIN"] is RW
        assert entries["VIN2_MAX"] is RW

    def test_restartable(self):
        assert features_of("lm75") == features_of("lm75")
        entries = features_of("lm75")
        assert list(entries) == list(entries)

    def test_lm75(self):
        assert features_of("lm75") == (
            ("TEMP", 51, R),
            ("TEMP_HYST", 52, RW),
            ("TEMP_OVER", 53, RW),
        )

    def test_unknown_chip(self):
        with pytest.raises(UnknownChip):
            features_of("lm99")


class TestPrefixes:
    def test_declaration_order(self):
        assert prefixes() == (
            "lm78",
            "lm78-j",
            "lm79",
            "lm75",
            "adm1021",
            "gl518sm-r00",
            "gl518sm-r80",
            "lm80",
            "w83781d",
            "adm9240",
        )

    def test_restartable(self, catalog):
        assert list(catalog.prefixes()) == list(catalog.prefixes())

    def test_iteration_matches_prefixes(self, catalog):
        assert tuple(chip.prefix for chip in catalog) == catalog.prefixes()
        assert len(catalog) == 10
        assert "adm1021" in catalog
        assert "adm1022" not in catalog


class TestHelpers:
    def test_feature_by_number(self, catalog):
        assert catalog.feature_by_number("w83781d", 59).name == "TEMP3_OVER"
        assert catalog.feature_by_number("adm1021", 81).name == "STATUS"

    def test_feature_by_number_unknown(self, catalog):
        with pytest.raises(UnknownFeature):
            catalog.feature_by_number("lm75", 1)
        with pytest.raises(UnknownChip):
            catalog.feature_by_number("nope", 1)

    def test_require_writable(self, catalog):
        assert catalog.require_writable("lm78", "FAN1_DIV").number == 71

    def test_require_writable_rejects_read_only(self, catalog):
        with pytest.raises(ReadOnlyFeature) as exc_info:
            catalog.require_writable("lm78", "FAN3_DIV")
        assert exc_info.value.mode is R

    def test_require_writable_rejects_no_access(self, catalog):
        with pytest.raises(ReadOnlyFeature):
            catalog.require_writable("gl518sm-r00", "VIN1")

    def test_chip(self, catalog):
        chip = catalog.chip("lm80")
        assert isinstance(chip, ChipModel)
        assert chip.prefix == "lm80"


class TestConstruction:
    def test_duplicate_prefix_rejected(self, toy_chip):
        with pytest.raises(InvalidChipDeclaration):
            RegisterCatalog([toy_chip, toy_chip])

    def test_non_chip_rejected(self):
        with pytest.raises(InvalidChipDeclaration):
            RegisterCatalog(["lm78"])

    def test_extended_appends_after_existing(self, catalog, toy_chip):
        bigger = catalog.extended([toy_chip])
        assert bigger.prefixes()[-1] == "toy1"
        assert bigger.prefixes()[:-1] == catalog.prefixes()
        assert "toy1" not in catalog

    def test_extended_rejects_builtin_prefix(self, catalog):
        clash = ChipModel.declare("lm78", [("IN0", 1, R)])
        with pytest.raises(InvalidChipDeclaration):
            catalog.extended([clash])

    def test_empty_catalog(self):
        empty = RegisterCatalog([])
        assert empty.prefixes() == ()
        with pytest.raises(UnknownChip):
            empty.lookup("lm78", "IN0")


class TestConcurrentReaders:
    def test_parallel_lookups_agree(self, catalog):
        results = []

        def worker():
            results.append(tuple(catalog.lookup(p, catalog.features_of(p)[0][0]) for p in catalog.prefixes()))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert len(set(results)) == 1
