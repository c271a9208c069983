"""doublef の層（core → export → interactive）の逆流 import を検出するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

_SRC = Path(__file__).resolve().parents[2] / "src"


def _package_of(path: Path) -> str:
    """ファイルが属するパッケージ名（相対 import の基準）を返す。"""
    parts = list(path.relative_to(_SRC).with_suffix("").parts)
    # `__init__.py` はそれ自身がパッケージ、通常モジュールは親がパッケージ。
    return ".".join(parts[:-1])


def _absolute_targets(package: str, node: ast.ImportFrom) -> set[str]:
    level = int(node.level or 0)
    if level == 0:
        base = str(node.module or "")
    else:
        parts = package.split(".")
        if level - 1 >= len(parts):
            raise ValueError(f"相対 import が src の外を指している: package={package!r}, level={level}")
        base = ".".join(parts[: len(parts) - (level - 1)])
        if node.module:
            base = f"{base}.{node.module}"
    if not base:
        return set()
    return {base} | {f"{base}.{a.name}" for a in node.names if a.name != "*"}


def imported_modules(path: Path) -> set[str]:
    package = _package_of(path)
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            modules.update(_absolute_targets(package, node))
    return modules


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("core", ("doublef.export", "doublef.interactive", "doublef.api", "pyglet", "moderngl")),
        ("export", ("doublef.interactive", "doublef.api", "pyglet", "moderngl")),
        ("interactive", ("doublef.api",)),
    ],
)
def test_layer_does_not_import_upward(layer: str, forbidden: tuple[str, ...]) -> None:
    violations: list[str] = []
    for path in sorted((_SRC / "doublef" / layer).rglob("*.py")):
        bad = sorted(m for m in imported_modules(path) if m.startswith(forbidden))
        if bad:
            violations.append(f"{path.relative_to(_SRC)}: {', '.join(bad)}")

    assert not violations, "依存境界違反の import を検出:\n" + "\n".join(violations)


def _import_from(source: str) -> ast.ImportFrom:
    node = ast.parse(source).body[0]
    assert isinstance(node, ast.ImportFrom)
    return node


def test_relative_imports_resolve_against_package() -> None:
    got = _absolute_targets("doublef.core", _import_from("from ..export import svg\n"))
    assert got == {"doublef.export", "doublef.export.svg"}

    got = _absolute_targets("doublef.api", _import_from("from .runner import run\n"))
    assert got == {"doublef.api.runner", "doublef.api.runner.run"}

    got = _absolute_targets("doublef.core", _import_from("from .. import interactive\n"))
    assert "doublef.interactive" in got


def test_relative_import_escaping_src_is_rejected() -> None:
    with pytest.raises(ValueError):
        _absolute_targets("doublef", _import_from("from ...x import y\n"))
