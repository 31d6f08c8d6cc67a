from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_nhut9dev_app.config import BUNDLED_TEMPLATES_ROOT, GeneratorConfig
from create_nhut9dev_app.scaffold import ProjectGenerator

CONFIG = GeneratorConfig.default()


@pytest.mark.parametrize("key", CONFIG.template_keys())
def test_every_listed_template_is_bundled(key: str):
    template_dir = BUNDLED_TEMPLATES_ROOT / key
    assert template_dir.is_dir()
    assert (template_dir / "package.json").is_file()
    assert (template_dir / "gitignore").is_file()


@pytest.mark.parametrize("key", CONFIG.template_keys())
def test_generated_projects_have_no_placeholders_left(key: str, tmp_path: Path):
    result = ProjectGenerator(CONFIG).generate("demo", key, tmp_path)

    for path in result.substituted:
        assert CONFIG.placeholder not in path.read_text(encoding="utf-8")


def test_api_gateway_scenario(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)

    ProjectGenerator(CONFIG).generate("demo", "api-gateway")

    project = tmp_path / "demo"
    package = (project / "package.json").read_text(encoding="utf-8")
    assert '"name": "demo"' in package
    assert json.loads(package)["name"] == "demo"
    assert (project / ".gitignore").is_file()
    assert not (project / "gitignore").exists()
    assert "APP_NAME=demo" in (project / ".env.example").read_text(encoding="utf-8")


def test_turbo_template_substitutes_mobile_manifest(tmp_path: Path):
    ProjectGenerator(CONFIG).generate("demo", "turbo-nextjs-expo", tmp_path)

    manifest = json.loads((tmp_path / "demo" / "apps" / "mobile" / "app.json").read_text(encoding="utf-8"))
    assert manifest["expo"]["name"] == "demo"
    assert manifest["expo"]["slug"] == "demo"


def test_template_without_optional_files_still_generates(tmp_path: Path):
    result = ProjectGenerator(CONFIG).generate("demo", "nextjs", tmp_path)

    assert {path.name for path in result.substituted} == {"package.json", "README.md"}
    assert not (tmp_path / "demo" / "apps").exists()
