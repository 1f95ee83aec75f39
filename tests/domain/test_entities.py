# tests/domain/test_entities.py

"""
Unit tests for Section and TeamConfig construction-time validation.
"""

import pytest
from src.domain.entities import Section, TeamConfig
from src.domain.exceptions import ConfigValidationError, DataValidationError


RAW = {'ERA': 5.68, 'K': 411}
RANKS = {'ERA': 7, 'K': 8}


class TestSectionConstruction:
    """Test Section.from_mappings enforces matching key sets."""
    
    def test_valid_section_keeps_declared_order(self):
        section = Section.from_mappings("Pitching", RAW, RANKS, {'ERA': False, 'K': True})
        assert section.metric_keys == ['ERA', 'K']
        assert len(section) == 2
    
    def test_missing_rank_key_is_named(self):
        with pytest.raises(ConfigValidationError, match=r"ranks is missing key\(s\): K"):
            Section.from_mappings("Pitching", RAW, {'ERA': 7})
    
    def test_extra_rank_key_is_named(self):
        with pytest.raises(ConfigValidationError, match=r"ranks has extra key\(s\): WHIP"):
            Section.from_mappings("Pitching", RAW, {'ERA': 7, 'K': 8, 'WHIP': 6})
    
    def test_orientation_keys_must_match(self):
        with pytest.raises(ConfigValidationError, match=r"better is missing key\(s\): K"):
            Section.from_mappings("Pitching", RAW, RANKS, {'ERA': False})
    
    def test_error_carries_section_name(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            Section.from_mappings("Pitching", RAW, {'ERA': 7})
        assert exc_info.value.section == "Pitching"
        assert isinstance(exc_info.value, DataValidationError)
    
    def test_empty_section_rejected(self):
        with pytest.raises(ConfigValidationError, match="at least one metric"):
            Section.from_mappings("Empty", {}, {})
    
    def test_non_integer_rank_rejected(self):
        with pytest.raises(ConfigValidationError, match="Rank for metric 'ERA' must be an integer"):
            Section.from_mappings("Pitching", RAW, {'ERA': 'seventh', 'K': 8})
    
    def test_non_numeric_raw_rejected(self):
        with pytest.raises(ConfigValidationError, match="Raw value for metric 'K' must be numeric"):
            Section.from_mappings("Pitching", {'ERA': 5.68, 'K': 'lots'}, RANKS)
    
    def test_non_boolean_orientation_rejected(self):
        with pytest.raises(ConfigValidationError, match="Orientation for metric 'ERA' must be a boolean"):
            Section.from_mappings("Pitching", RAW, RANKS, {'ERA': 'no', 'K': True})
    
    def test_registry_orientation_used_when_not_declared(self):
        section = Section.from_mappings("Pitching", RAW, RANKS)
        orientation = {obs.key: obs.higher_is_better for obs in section.observations}
        assert orientation == {'ERA': False, 'K': True}
    
    def test_declared_orientation_overrides_registry(self):
        section = Section.from_mappings("Pitching", RAW, RANKS, {'ERA': True, 'K': True})
        assert section.observations[0].higher_is_better is True


class TestTeamConfig:
    """Test TeamConfig invariants and lookups."""
    
    @pytest.fixture
    def pitching(self):
        return Section.from_mappings("Pitching", RAW, RANKS)
    
    def test_total_below_two_rejected(self, pitching):
        with pytest.raises(ConfigValidationError, match="total_competitors must be at least 2"):
            TeamConfig("UCSD", 1, (pitching,))
    
    def test_no_sections_rejected(self):
        with pytest.raises(ConfigValidationError, match="at least one section"):
            TeamConfig("UCSD", 11, ())
    
    def test_duplicate_sections_rejected(self, pitching):
        with pytest.raises(ConfigValidationError, match="Duplicate section name"):
            TeamConfig("UCSD", 11, (pitching, pitching))
    
    def test_sections_differing_only_by_case_rejected(self, pitching):
        lower = Section.from_mappings("pitching", RAW, RANKS)
        with pytest.raises(ConfigValidationError, match="ignoring case: Pitching/pitching"):
            TeamConfig("UCSD", 11, (pitching, lower))
    
    def test_declared_names_differing_only_by_case_rejected(self, pitching):
        with pytest.raises(ConfigValidationError, match="Duplicate section name"):
            TeamConfig("UCSD", 11, (pitching,),
                       rejected_sections=(("PITCHING", "bad keys"),),
                       declared_order=("Pitching", "PITCHING"))
    
    def test_get_section(self, pitching):
        config = TeamConfig("UCSD", 11, (pitching,))
        assert config.get_section("Pitching") is pitching
    
    def test_unknown_section(self, pitching):
        config = TeamConfig("UCSD", 11, (pitching,))
        with pytest.raises(ConfigValidationError, match="Unknown section: Hitting"):
            config.get_section("Hitting")
    
    def test_tab_names_include_rejected_sections_in_order(self, pitching):
        config = TeamConfig("UCSD", 11, (pitching,),
                            rejected_sections=(("Offense", "bad keys"),),
                            declared_order=("Offense", "Pitching"))
        assert config.tab_names == ["Offense", "Pitching"]
        assert config.rejection_reason("Offense") == "bad keys"
        assert config.rejection_reason("Pitching") is None
    
    def test_is_immutable(self, pitching):
        config = TeamConfig("UCSD", 11, (pitching,))
        with pytest.raises(AttributeError):
            config.total_competitors = 12
