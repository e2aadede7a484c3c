"""
Unit tests for the vecsearch configuration loader.
"""

import logging

import pytest

from vecsearch.config.config_loader import SearchConfig
from vecsearch.core.exceptions import VecSearchConfigError


ENV_VARS = [
    "VECSEARCH_DIMENSION",
    "VECSEARCH_TOP_N",
    "VECSEARCH_SEED",
    "VECSEARCH_LOG_LEVEL",
    "VECSEARCH_LOG_STRUCTURED",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove VECSEARCH_* variables so host settings do not leak in."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self):
        """Test built-in defaults."""
        config = SearchConfig()

        assert config.get_store_config().dimension == 768
        assert config.get_store_config().tie_break_by_identifier is True
        assert config.get_top_n() == 3
        assert config.get("demo.phrase") == "Ceci est un exemple de phrase"
        assert config.get_log_level() == logging.INFO

    def test_load_yaml(self, tmp_path):
        """Test that YAML values override defaults and keep the rest."""
        path = tmp_path / "vecsearch.yaml"
        path.write_text(
            "store:\n"
            "  dimension: 4\n"
            "query:\n"
            "  top_n: 10\n",
            encoding="utf-8",
        )

        config = SearchConfig(path)

        assert config.get_store_config().dimension == 4
        assert config.get_top_n() == 10
        assert config.get("store.tie_break_by_identifier") is True

    def test_empty_yaml(self, tmp_path):
        """Test that an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert SearchConfig(path).get_top_n() == 3

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises a config error."""
        with pytest.raises(VecSearchConfigError, match="not found"):
            SearchConfig(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML raises a config error."""
        path = tmp_path / "bad.yaml"
        path.write_text("store: [unclosed\n", encoding="utf-8")

        with pytest.raises(VecSearchConfigError, match="Invalid YAML"):
            SearchConfig(path)

    def test_non_mapping_root(self, tmp_path):
        """Test that a list at the root is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(VecSearchConfigError, match="mapping"):
            SearchConfig(path)

    @pytest.mark.parametrize("body", [
        "store: 5\n",
        "query: [1, 2]\n",
        "demo: hello\n",
        "logging: true\n",
    ])
    def test_scalar_section_rejected(self, tmp_path, body):
        """Test that a section that is not a mapping raises a config error."""
        path = tmp_path / "scalar.yaml"
        path.write_text(body, encoding="utf-8")

        with pytest.raises(VecSearchConfigError, match="must be a mapping"):
            SearchConfig(path)

    def test_scalar_section_with_env_override(self, tmp_path, monkeypatch):
        """Test that a bad section is reported even when an override targets it."""
        path = tmp_path / "scalar.yaml"
        path.write_text("store: 5\n", encoding="utf-8")
        monkeypatch.setenv("VECSEARCH_DIMENSION", "8")

        with pytest.raises(VecSearchConfigError, match="'store'"):
            SearchConfig(path)

    def test_empty_section_uses_defaults(self, tmp_path):
        """Test that a section with no body keeps the defaults."""
        path = tmp_path / "empty_section.yaml"
        path.write_text("store:\nquery:\n  top_n: 2\n", encoding="utf-8")

        config = SearchConfig(path)

        assert config.get_store_config().dimension == 768
        assert config.get_top_n() == 2

    def test_non_string_phrase(self, tmp_path):
        """Test that a non-string demo phrase is rejected."""
        path = tmp_path / "phrase.yaml"
        path.write_text("demo:\n  phrase: 12\n", encoding="utf-8")

        with pytest.raises(VecSearchConfigError, match="demo.phrase"):
            SearchConfig(path)

    def test_non_integer_seed(self, tmp_path):
        """Test that a non-integer seed is rejected."""
        path = tmp_path / "seed.yaml"
        path.write_text("demo:\n  seed: abc\n", encoding="utf-8")

        with pytest.raises(VecSearchConfigError, match="demo.seed"):
            SearchConfig(path)

    def test_non_numeric_dimension(self, tmp_path):
        """Test that a dimension that is not a number is rejected."""
        path = tmp_path / "dimension.yaml"
        path.write_text("store:\n  dimension: [4]\n", encoding="utf-8")

        with pytest.raises(VecSearchConfigError, match="store configuration"):
            SearchConfig(path)

    def test_env_overrides(self, monkeypatch):
        """Test VECSEARCH_* environment overrides."""
        monkeypatch.setenv("VECSEARCH_DIMENSION", "16")
        monkeypatch.setenv("VECSEARCH_TOP_N", "5")
        monkeypatch.setenv("VECSEARCH_SEED", "42")
        monkeypatch.setenv("VECSEARCH_LOG_LEVEL", "debug")
        monkeypatch.setenv("VECSEARCH_LOG_STRUCTURED", "true")

        config = SearchConfig()

        assert config.get_store_config().dimension == 16
        assert config.get_top_n() == 5
        assert config.get("demo.seed") == 42
        assert config.get_log_level() == logging.DEBUG
        assert config.get("logging.structured") is True

    def test_env_override_beats_yaml(self, tmp_path, monkeypatch):
        """Test that the environment wins over the file."""
        path = tmp_path / "vecsearch.yaml"
        path.write_text("query:\n  top_n: 10\n", encoding="utf-8")
        monkeypatch.setenv("VECSEARCH_TOP_N", "1")

        assert SearchConfig(path).get_top_n() == 1

    def test_invalid_env_value(self, monkeypatch):
        """Test that a non-integer override raises a config error."""
        monkeypatch.setenv("VECSEARCH_DIMENSION", "lots")

        with pytest.raises(VecSearchConfigError, match="VECSEARCH_DIMENSION"):
            SearchConfig()

    def test_invalid_dimension(self, monkeypatch):
        """Test that a non-positive dimension is rejected."""
        monkeypatch.setenv("VECSEARCH_DIMENSION", "0")

        with pytest.raises(VecSearchConfigError, match="store configuration"):
            SearchConfig()

    def test_invalid_top_n(self, monkeypatch):
        """Test that a negative top_n is rejected."""
        monkeypatch.setenv("VECSEARCH_TOP_N", "-2")

        with pytest.raises(VecSearchConfigError, match="top_n"):
            SearchConfig()

    def test_unknown_log_level(self, monkeypatch):
        """Test that an unknown level name is rejected."""
        monkeypatch.setenv("VECSEARCH_LOG_LEVEL", "loud")

        with pytest.raises(VecSearchConfigError, match="logging.level"):
            SearchConfig()

    def test_get_dotted_default(self):
        """Test get() with missing keys."""
        config = SearchConfig()

        assert config.get("store.nothing", "fallback") == "fallback"
        assert config.get("query.top_n.deeper", "x") == "x"
