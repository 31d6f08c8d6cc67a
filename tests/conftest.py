from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from create_nhut9dev_app.config import GeneratorConfig, TemplateChoice  # noqa: E402

TEMPLATE_KEY = "starter"

TEMPLATE_FILES = {
    "package.json": '{\n  "name": "{{projectName}}",\n  "version": "0.1.0"\n}\n',
    "README.md": "# {{projectName}}\n\nRun {{projectName}} locally.\n",
    "gitignore": "node_modules\n.next\n",
    "src/index.ts": "export const name = 'starter';\n",
    "src/nested/keep.ts": "export {};\n",
    "src/nested/dist/bundle.js": "built\n",
    "src/.DS_Store": "",
    "node_modules/left-pad/index.js": "module.exports = {};\n",
    ".next/cache/data": "cache\n",
    "test-results/report.xml": "<testsuite/>\n",
    "docs/out/page.html": "<html></html>\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    write_tree(root / TEMPLATE_KEY, TEMPLATE_FILES)
    return root


@pytest.fixture()
def config(templates_root: Path) -> GeneratorConfig:
    return GeneratorConfig(
        templates_root=templates_root,
        templates=(
            TemplateChoice(key=TEMPLATE_KEY, label="Starter"),
            TemplateChoice(key="missing", label="Not shipped"),
        ),
    )


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path
