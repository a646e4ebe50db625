"""Tests for tfdocs.config."""

from pathlib import Path

import pytest

from tfdocs.config import DocsConfig
from tfdocs.exceptions import ConfigError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "docs.yaml"
    path.write_text(text)
    return path


# =============================================================================
# Test defaults and validation
# =============================================================================


@pytest.mark.unit
class TestDocsConfig:
    def test_defaults(self):
        config = DocsConfig()

        assert config.root_dir == "."
        assert config.base_dir == "docs"
        assert config.format_dir == "formats"
        assert config.root_basename == "FORMATS_GUIDE"
        assert config.example_path == "./examples/"
        assert config.flag_overrides == {"pretty": "--no-color"}
        assert config.on_collision == "error"

    def test_flag_overrides_not_shared(self):
        a, b = DocsConfig(), DocsConfig()
        a.flag_overrides["json"] = "--x"

        assert "json" not in b.flag_overrides

    def test_invalid_collision_policy(self):
        with pytest.raises(ConfigError, match="invalid on_collision 'skip'"):
            DocsConfig(on_collision="skip")

    def test_flag_overrides_must_be_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            DocsConfig(flag_overrides=["--no-color"])

    @pytest.mark.parametrize(
        "prefix,root,expected",
        [
            ("", "tfdocs", "tfdocs-"),
            ("", "terraform docs", "terraform-docs-"),
            ("tf-", "tfdocs", "tf-"),
        ],
    )
    def test_prefix_for(self, prefix, root, expected):
        assert DocsConfig(root_prefix=prefix).prefix_for(root) == expected

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown docs config key 'out_dir'"):
            DocsConfig.from_dict({"out_dir": "x"})


# =============================================================================
# Test YAML loading
# =============================================================================


@pytest.mark.unit
class TestFromYaml:
    def test_docs_section(self, tmp_path):
        path = _write(
            tmp_path,
            "docs:\n"
            "  root_dir: out\n"
            "  on_collision: overwrite\n"
            "  flag_overrides:\n"
            "    pretty: --no-color\n"
            "    json: --escape\n",
        )

        config = DocsConfig.from_yaml(path, enable_env_overrides=False)

        assert config.root_dir == "out"
        assert config.on_collision == "overwrite"
        assert config.flag_overrides == {"pretty": "--no-color", "json": "--escape"}
        assert config.base_dir == "docs"

    def test_missing_section_gives_defaults(self, tmp_path):
        path = _write(tmp_path, "logging:\n  level: info\n")

        assert DocsConfig.from_yaml(path, enable_env_overrides=False) == DocsConfig()

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, "")

        assert DocsConfig.from_yaml(path, enable_env_overrides=False) == DocsConfig()

    def test_unknown_key(self, tmp_path):
        path = _write(tmp_path, "docs:\n  output: x\n")

        with pytest.raises(ConfigError, match="unknown docs config key"):
            DocsConfig.from_yaml(path, enable_env_overrides=False)

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path, "docs: [unclosed\n")

        with pytest.raises(ConfigError, match="invalid YAML"):
            DocsConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = _write(tmp_path, "- a\n- b\n")

        with pytest.raises(ConfigError, match="must hold a mapping"):
            DocsConfig.from_yaml(path)

    def test_section_not_a_mapping(self, tmp_path):
        path = _write(tmp_path, "docs: yes\n")

        with pytest.raises(ConfigError, match="'docs' section"):
            DocsConfig.from_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read") as exc_info:
            DocsConfig.from_yaml(tmp_path / "nope.yaml")

        assert exc_info.value.context["path"].endswith("nope.yaml")


# =============================================================================
# Test environment overrides
# =============================================================================


@pytest.mark.unit
class TestEnvOverrides:
    def test_env_wins_over_file(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "docs:\n  root_dir: from-file\n")
        monkeypatch.setenv("TFDOCS_DOCS_ROOT_DIR", "from-env")

        assert DocsConfig.from_yaml(path).root_dir == "from-env"

    def test_env_ignored_when_disabled(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "docs:\n  root_dir: from-file\n")
        monkeypatch.setenv("TFDOCS_DOCS_ROOT_DIR", "from-env")

        config = DocsConfig.from_yaml(path, enable_env_overrides=False)

        assert config.root_dir == "from-file"

    def test_flag_overrides_pairs(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(
            "TFDOCS_DOCS_FLAG_OVERRIDES", "pretty=--no-color, json = --escape,"
        )

        config = DocsConfig.load()

        assert config.flag_overrides == {"pretty": "--no-color", "json": "--escape"}

    def test_malformed_flag_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TFDOCS_DOCS_FLAG_OVERRIDES", "pretty")

        with pytest.raises(ConfigError, match="name=flag"):
            DocsConfig.load()

    def test_unknown_env_key(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TFDOCS_DOCS_COLOUR", "no")

        with pytest.raises(ConfigError, match="'colour'"):
            DocsConfig.load()


@pytest.mark.unit
class TestLoad:
    def test_default_file_used_when_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "etc").mkdir()
        (tmp_path / "etc" / "docs.yaml").write_text("docs:\n  base_dir: site\n")

        assert DocsConfig.load().base_dir == "site"

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert DocsConfig.load() == DocsConfig()

    def test_explicit_path(self, tmp_path):
        path = _write(tmp_path, "docs:\n  format_dir: pages\n")

        assert DocsConfig.load(path).format_dir == "pages"
