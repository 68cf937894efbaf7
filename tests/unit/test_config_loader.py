"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading and merging
    ✅ Error Handling: Invalid values, missing files
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from roster_manager.config.loader import ConfigLoader, deep_merge, load_config
from roster_manager.config.models import RosterConfig
from roster_manager.domain.entities import SortKey, SortOrder


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: RosterConfig object with file values and defaults
        """
        # Act
        config = load_config(sample_config_path)

        # Assert
        assert isinstance(config, RosterConfig)
        assert config.query.default_sort_key is SortKey.INCOME
        assert config.query.default_sort_order is SortOrder.DESC
        assert config.query.all_positions_label == "All Positions"
        assert config.export.filename == "roster.csv"
        assert config.cache.enabled is True
        assert config.cache.max_entries == 4

    def test_applies_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "partial.yaml").write_text("version: '1.0'\n")

        config = ConfigLoader(base_path=tmp_path).load("partial.yaml")

        assert config.query.default_sort_key is SortKey.NAME
        assert config.export.filename == "employees.csv"
        assert config.cache.enabled is False

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        assert config == RosterConfig()

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Unknown sort key and zero cache size
        EXPECTED: ValidationError raised
        """
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "query:\n  default_sort_key: avatar_url\ncache:\n  max_entries: 0\n"
        )

        with pytest.raises(ValidationError):
            ConfigLoader(base_path=tmp_path).load("config.yaml")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path).load("nope.yaml")

    def test_profile_merges_over_base(self, tmp_path: Path) -> None:
        """
        SCENARIO: Base config plus a profile overriding part of one section
        EXPECTED: Deep merge, untouched keys keep base values
        """
        (tmp_path / "base.yaml").write_text(
            "export:\n  filename: base.csv\n  output_dir: out\n"
        )
        profiles = tmp_path / "config" / "profiles"
        profiles.mkdir(parents=True)
        (profiles / "team.yaml").write_text("export:\n  filename: team.csv\n")

        config = ConfigLoader(base_path=tmp_path).load("base.yaml", profile="team")

        assert config.export.filename == "team.csv"
        assert config.export.output_dir == "out"

    def test_missing_profile(self, tmp_path: Path) -> None:
        (tmp_path / "base.yaml").write_text("version: '1.0'\n")

        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path).load("base.yaml", profile="ghost")

    def test_repository_default_config_loads(self) -> None:
        root = Path(__file__).resolve().parents[2]

        config = load_config("config/default.yaml", base_path=root)

        assert config == RosterConfig()

    def test_repository_profile_enables_cache(self) -> None:
        root = Path(__file__).resolve().parents[2]

        config = load_config(profile="large_roster", base_path=root)

        assert config.cache.enabled is True
        assert config.cache.max_entries == 128
        assert config.query == RosterConfig().query

    def test_available_profiles(self, tmp_path: Path) -> None:
        profiles = tmp_path / "config" / "profiles"
        profiles.mkdir(parents=True)
        (profiles / "b.yaml").write_text("{}\n")
        (profiles / "a.yaml").write_text("{}\n")

        assert ConfigLoader(base_path=tmp_path).available_profiles() == ["a", "b"]

    def test_rejects_non_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "list.yaml").write_text("- name\n- email\n")

        with pytest.raises(ValueError):
            ConfigLoader(base_path=tmp_path).load("list.yaml")


class TestDeepMerge:
    """Test cases for deep_merge."""

    def test_nested_keys_merge(self) -> None:
        base = {"query": {"default_sort_key": "name", "default_sort_order": "asc"}}
        overlay = {"query": {"default_sort_order": "desc"}, "version": "2"}

        merged = deep_merge(base, overlay)

        assert merged == {
            "query": {"default_sort_key": "name", "default_sort_order": "desc"},
            "version": "2",
        }
        assert base["query"]["default_sort_order"] == "asc"
