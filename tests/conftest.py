"""
Shared fixtures for the Cleanse KB test suite.
"""

import copy
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cleanse_kb.catalog import get_catalog, reset_catalog


@pytest.fixture(autouse=True)
def reset_singleton():
    """Reset the process-wide catalog before and after each test."""
    reset_catalog()
    yield
    reset_catalog()


@pytest.fixture
def catalog():
    """The bundled protocol catalog."""
    return get_catalog()


def make_herb(**overrides):
    herb = {
        "name": "Test Herb",
        "latin_name": "Herba testensis",
        "dosage": "250mg",
        "timing": "2x daily with meals",
        "active_compounds": ["testolin"],
        "mechanism": "Disrupts parasite metabolism in tests",
        "preparations": ["capsules"],
    }
    herb.update(overrides)
    return herb


def make_definition(**overrides):
    """A minimal valid protocol definition; keyword overrides replace top-level fields."""
    definition = {
        "id": "test-protocol",
        "name": "Test Protocol",
        "category": "traditional",
        "target_parasites": ["roundworms"],
        "primary_herbs": [make_herb()],
        "duration": {"minimum": 7, "recommended": 14, "maximum": 21},
        "intensity": "gentle",
        "ailment_targets": ["digestive_issues", "Bloating"],
        "contraindications": ["pregnancy"],
        "evidence": "traditional",
        "description": "A protocol definition used only by the test suite",
        "protocol": [
            {
                "phase": 1,
                "name": "Only Phase",
                "duration": 14,
                "herbs": ["Test Herb"],
                "dietary_restrictions": ["no sugar"],
                "supportive_measures": ["hydration"],
                "objective": "Eliminate test parasites",
            },
        ],
        "effectiveness": {"protozoa": 50, "helminths": 50, "flukes": 50},
        "side_effects": ["mild nausea"],
        "regional_availability": ["europe"],
    }
    definition.update(copy.deepcopy(overrides))
    return definition
