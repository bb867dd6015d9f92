"""Pytest configuration and shared fixtures"""
import pytest
import yaml

from sensorchips import AccessMode, ChipModel, RegisterCatalog, default_catalog


@pytest.fixture
def catalog():
    """The process-wide catalog of built-in chips"""
    return default_catalog


@pytest.fixture
def toy_chip():
    """Small chip used where the built-in tables would get in the way"""
    return ChipModel.declare("toy1", [
        ("IN0", 1, AccessMode.READ_ONLY),
        ("IN0_MIN", 11, AccessMode.READ_WRITE),
        ("IN0_MAX", 21, AccessMode.READ_WRITE),
        ("FAN1", 31, AccessMode.READ_ONLY),
        ("FAN1_DIV", 71, AccessMode.READ_WRITE),
        ("ALARMS", 81, AccessMode.READ_ONLY),
    ], description="Toy chip")


@pytest.fixture
def toy_catalog(toy_chip):
    return RegisterCatalog([toy_chip])


@pytest.fixture
def chip_file(tmp_path):
    """Write a chip declaration YAML file and return its path"""
    data = {
        "chips": [
            {
                "prefix": "lm81",
                "similar_to": "lm80",
                "description": "National Semiconductor LM81",
                "features": [
                    {"name": "IN0", "number": 1, "mode": "R"},
                    {"name": "IN0_MIN", "number": 11, "mode": "RW"},
                    {"name": "IN0_MAX", "number": 21, "mode": "rw"},
                    {"name": "TEMP", "number": 51, "mode": "R"},
                    {"name": "ALARMS", "number": 81, "mode": "READ_ONLY"},
                ],
            }
        ]
    }
    path = tmp_path / "lm81.yaml"
    path.write_text(yaml.safe_dump(data, sort_keys=False))
    return path
