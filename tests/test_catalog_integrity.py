"""
Cleanse KB Protocol Catalog - Integrity Tests
=============================================
The bundled dataset must satisfy every record and cross-record invariant,
and a bad definition must stop the catalog from being built.

Test Categories:
1. Dataset shape (counts, ids, text lengths)
2. Numeric ranges (durations, phases, effectiveness)
3. Safety rules (intensive protocols, contraindications)
4. Construction failures on bad definitions
"""

import re

import pytest

from cleanse_kb.catalog import (
    PARASITE_CLEANSE_PROTOCOLS,
    CatalogIntegrityError,
    Intensity,
    ProtocolCatalog,
    ReasonCode,
    validate_catalog,
)
from cleanse_kb.catalog.models import DOSAGE_UNIT_PATTERN

from conftest import make_definition, make_herb


def all_herbs(protocol):
    return list(protocol.primary_herbs) + list(protocol.supporting_herbs)


# ============================================================
# TEST: DATASET SHAPE
# ============================================================

class TestDatasetShape:
    """Counts, identifiers and descriptive text of the bundled catalog."""

    def test_at_least_twenty_protocols(self, catalog):
        assert len(catalog) >= 20
        assert len(catalog) == len(PARASITE_CLEANSE_PROTOCOLS)

    def test_ids_are_unique(self, catalog):
        ids = catalog.ids()
        assert len(ids) == len(set(ids))

    def test_ids_are_slugs(self, catalog):
        for protocol in catalog:
            assert re.match(r"^[a-z0-9-]+$", protocol.id), protocol.id

    def test_names_and_descriptions_are_meaningful(self, catalog):
        for protocol in catalog:
            assert len(protocol.name) > 5, protocol.id
            assert len(protocol.description) > 20, protocol.id

    def test_every_list_field_is_populated(self, catalog):
        for protocol in catalog:
            assert protocol.target_parasites
            assert protocol.primary_herbs
            assert protocol.ailment_targets
            assert protocol.contraindications
            assert protocol.side_effects
            assert protocol.regional_availability
            assert protocol.protocol

    def test_catalog_covers_many_parasites(self, catalog):
        parasites = {p for protocol in catalog for p in protocol.target_parasites}
        assert len(parasites) > 10
        assert "giardia" in parasites
        assert "roundworms" in parasites

    def test_only_ayurvedic_protocol_has_supporting_herbs(self, catalog):
        with_support = [p.id for p in catalog if p.supporting_herbs]
        assert with_support == ["ayurvedic-comprehensive"]
        assert catalog.get_by_id("ayurvedic-comprehensive").supporting_herbs[0].name == "Triphala"


# ============================================================
# TEST: HERB DETAILS
# ============================================================

class TestHerbDetails:
    """Every herb carries a dose with a unit and a real mechanism."""

    def test_dosage_has_unit(self, catalog):
        for protocol in catalog:
            for herb in all_herbs(protocol):
                assert DOSAGE_UNIT_PATTERN.search(herb.dosage), f"{protocol.id}: {herb.dosage}"

    def test_herb_fields_populated(self, catalog):
        for protocol in catalog:
            for herb in all_herbs(protocol):
                assert herb.latin_name
                assert herb.active_compounds
                assert herb.preparations
                assert len(herb.mechanism) > 10


# ============================================================
# TEST: RANGES
# ============================================================

class TestRanges:
    """Duration, phase and effectiveness invariants."""

    def test_duration_ordering(self, catalog):
        for protocol in catalog:
            d = protocol.duration
            assert 0 < d.minimum <= d.recommended <= d.maximum <= 365, protocol.id

    def test_phases_contiguous_from_one(self, catalog):
        for protocol in catalog:
            numbers = [phase.phase for phase in protocol.protocol]
            assert numbers == list(range(1, len(numbers) + 1)), protocol.id

    def test_phase_durations_fit_range(self, catalog):
        for protocol in catalog:
            total = sum(phase.duration for phase in protocol.protocol)
            assert protocol.duration.minimum <= total <= protocol.duration.maximum, protocol.id
            assert total == protocol.total_phase_days

    def test_phase_objectives_meaningful(self, catalog):
        for protocol in catalog:
            for phase in protocol.protocol:
                assert phase.duration > 0
                assert len(phase.objective) > 10

    def test_effectiveness_is_percentage(self, catalog):
        for protocol in catalog:
            e = protocol.effectiveness
            for value in (e.protozoa, e.helminths, e.flukes):
                assert 0 <= value <= 100, protocol.id


# ============================================================
# TEST: SAFETY RULES
# ============================================================

class TestSafetyRules:
    """Contraindication rules for aggressive protocols."""

    def test_intensive_protocols_list_pregnancy(self, catalog):
        intensive = [p for p in catalog if p.intensity == Intensity.INTENSIVE]
        assert intensive
        for protocol in intensive:
            assert "pregnancy" in protocol.contraindications, protocol.id

    def test_tansy_is_short_and_restricted(self, catalog):
        tansy = catalog.get_by_id("tansy-protocol")
        assert tansy.duration.maximum <= 7
        assert "pregnancy" in tansy.contraindications
        assert "children" in tansy.contraindications

    def test_modern_protocols_are_evidence_backed(self, catalog):
        for protocol in catalog:
            if protocol.category.value == "modern":
                assert protocol.evidence.value in ("clinical_studies", "who_approved"), protocol.id

    def test_ayurvedic_protocols_are_not_intensive(self, catalog):
        for protocol in catalog:
            if protocol.category.value == "ayurvedic":
                assert protocol.intensity.value in ("gentle", "moderate"), protocol.id

    def test_bundled_catalog_has_no_issues(self, catalog):
        assert validate_catalog(catalog.protocols) == []


# ============================================================
# TEST: CONSTRUCTION FAILURES
# ============================================================

class TestConstructionFailures:
    """A corrupt definition raises CatalogIntegrityError and builds nothing."""

    def reason_codes(self, exc_info):
        return [issue.reason_code for issue in exc_info.value.issues]

    def test_minimal_definition_is_valid(self):
        catalog = ProtocolCatalog.from_definitions([make_definition()])
        assert len(catalog) == 1

    def test_duplicate_id_rejected(self):
        defs = [make_definition(), make_definition()]
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions(defs)
        assert self.reason_codes(exc_info) == [ReasonCode.DUPLICATE_ID]
        assert exc_info.value.issues[0].index == 1

    def test_intensive_without_pregnancy_rejected(self):
        defs = [make_definition(intensity="intensive", contraindications=["liver_disease"])]
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions(defs)
        assert self.reason_codes(exc_info) == [
            ReasonCode.INTENSIVE_WITHOUT_PREGNANCY_CONTRAINDICATION
        ]

    def test_intensive_pregnancy_check_ignores_case(self):
        defs = [make_definition(intensity="intensive", contraindications=["Pregnancy"])]
        assert len(ProtocolCatalog.from_definitions(defs)) == 1

    def test_phase_numbers_out_of_order_rejected(self):
        phases = [
            {"phase": 2, "name": "Second", "duration": 7, "objective": "Second phase objective"},
            {"phase": 1, "name": "First", "duration": 7, "objective": "First phase objective"},
        ]
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions([make_definition(protocol=phases)])
        assert self.reason_codes(exc_info) == [ReasonCode.INVALID_RECORD]
        assert "phase numbers" in exc_info.value.issues[0].detail

    def test_phase_sum_outside_range_rejected(self):
        phases = [{"phase": 1, "name": "Too Long", "duration": 40, "objective": "Runs past the maximum"}]
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions([make_definition(protocol=phases)])
        assert "sum to 40 days" in exc_info.value.issues[0].detail

    def test_dosage_without_unit_rejected(self):
        defs = [make_definition(primary_herbs=[make_herb(dosage="a handful")])]
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions(defs)
        assert set(self.reason_codes(exc_info)) == {ReasonCode.INVALID_RECORD}
        assert any("dosage" in issue.detail for issue in exc_info.value.issues)

    def test_unordered_duration_rejected(self):
        defs = [make_definition(duration={"minimum": 20, "recommended": 14, "maximum": 21})]
        with pytest.raises(CatalogIntegrityError):
            ProtocolCatalog.from_definitions(defs)

    def test_duration_over_a_year_rejected(self):
        phases = [{"phase": 1, "name": "Long", "duration": 14, "objective": "Phase objective text"}]
        defs = [make_definition(
            duration={"minimum": 7, "recommended": 14, "maximum": 400},
            protocol=phases,
        )]
        with pytest.raises(CatalogIntegrityError):
            ProtocolCatalog.from_definitions(defs)

    def test_effectiveness_above_hundred_rejected(self):
        defs = [make_definition(effectiveness={"protozoa": 120, "helminths": 50, "flukes": 50})]
        with pytest.raises(CatalogIntegrityError):
            ProtocolCatalog.from_definitions(defs)

    def test_non_slug_id_rejected(self):
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions([make_definition(id="Bad_ID")])
        assert exc_info.value.issues[0].protocol_id == "Bad_ID"

    def test_unknown_intensity_rejected(self):
        with pytest.raises(CatalogIntegrityError):
            ProtocolCatalog.from_definitions([make_definition(intensity="extreme")])

    def test_empty_required_list_rejected(self):
        with pytest.raises(CatalogIntegrityError):
            ProtocolCatalog.from_definitions([make_definition(ailment_targets=[])])

    def test_empty_catalog_rejected(self):
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions([])
        assert self.reason_codes(exc_info) == [ReasonCode.EMPTY_CATALOG]

    def test_all_bad_records_reported(self):
        defs = [
            make_definition(id="first-bad", primary_herbs=[make_herb(dosage="some")]),
            make_definition(id="second-ok"),
            make_definition(id="third-bad", effectiveness={"protozoa": -1, "helminths": 0, "flukes": 0}),
        ]
        with pytest.raises(CatalogIntegrityError) as exc_info:
            ProtocolCatalog.from_definitions(defs)
        indices = sorted({issue.index for issue in exc_info.value.issues})
        assert indices == [0, 2]
        assert "first-bad" in str(exc_info.value)
