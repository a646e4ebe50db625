"""Tests for tfdocs.docs.generator."""

import pytest

import tfdocs.docs.generator as generator
from tests.helpers.builders import FakeLoader, FakeRegistry, TreeBuilder
from tfdocs.config import DocsConfig
from tfdocs.docs import create_walker, generate


@pytest.fixture
def tree():
    return (
        TreeBuilder()
        .leaf("json")
        .group("tfvars", lambda b: b.leaf("hcl"))
        .build()
    )


@pytest.mark.unit
class TestCreateWalker:
    def test_layout_from_config(self, tree, lg):
        config = DocsConfig(base_dir="site", format_dir="ref")

        walker = create_walker(config, tree, lg)

        assert walker.layout.base_dir == "site"
        assert walker.layout.format_dir == "ref"
        assert walker.layout.root_prefix == "tfdocs-"
        assert walker.on_collision == "error"

    def test_example_loaded_below_root_dir(self, tree, lg, tmp_path):
        config = DocsConfig(root_dir=str(tmp_path), example_path="examples")

        walker = create_walker(config, tree, lg, FakeLoader(), FakeRegistry())

        embedder = walker.renderer.embedder
        assert embedder.module_dir == tmp_path / "examples"
        assert embedder.example_path == "examples"


@pytest.mark.unit
class TestGenerate:
    def test_writes_tree(self, tree, lg, log_stream, tmp_path, fixed_clock):
        config = DocsConfig(root_dir=str(tmp_path))

        written = generate(
            config,
            lg,
            tree,
            loader=FakeLoader(),
            registry=FakeRegistry(),
            clock=fixed_clock,
        )

        assert [p.relative_to(tmp_path).as_posix() for p in written] == [
            "docs/formats/json.md",
            "docs/formats/tfvars-hcl.md",
            "docs/formats/tfvars.md",
            "docs/FORMATS_GUIDE.md",
        ]
        assert "generated docs" in log_stream.getvalue()

    def test_root_basename(self, tree, lg, tmp_path, fixed_clock):
        config = DocsConfig(root_dir=str(tmp_path), root_basename="README")

        written = generate(
            config, lg, tree, FakeLoader(), FakeRegistry(), clock=fixed_clock
        )

        assert written[-1] == tmp_path / "docs" / "README.md"


@pytest.mark.unit
class TestMain:
    def test_success(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            generator, "generate", lambda config, lg: calls.append(config) or []
        )

        assert generator.main() == 0
        assert calls == [DocsConfig()]

    def test_config_error_exits_1(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "etc").mkdir()
        (tmp_path / "etc" / "docs.yaml").write_text("docs:\n  on_collision: skip\n")

        with pytest.raises(SystemExit) as exc_info:
            generator.main()

        assert exc_info.value.code == 1

    def test_render_error_exits_1(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TFDOCS_DOCS_EXAMPLE_PATH", "missing/")

        with pytest.raises(SystemExit) as exc_info:
            generator.main()

        assert exc_info.value.code == 1
        assert not (tmp_path / "docs" / "FORMATS_GUIDE.md").exists()
