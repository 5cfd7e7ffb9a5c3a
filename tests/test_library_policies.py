from __future__ import annotations

import ast
from collections.abc import Iterator
from pathlib import Path

FORBIDDEN_CALLS = {
    "print": "print()",
    "pprint": "pprint()",
    "pprint.pprint": "pprint()",
    "logging.basicConfig": "logging.basicConfig",
    "basicConfig": "logging.basicConfig",
}


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _call_name(node: ast.Call) -> str | None:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        return f"{func.value.id}.{func.attr}"
    return None


def _library_calls() -> Iterator[tuple[str, int, str]]:
    repo_root = _repo_root()
    for path in sorted((repo_root / "src" / "gaco").rglob("*.py")):
        rel_path = path.relative_to(repo_root).as_posix()
        try:
            tree = ast.parse(path.read_text(encoding="utf-8-sig"))
        except SyntaxError as exc:  # pragma: no cover - should not happen
            raise AssertionError(f"Failed to parse {rel_path}: {exc}") from exc
        for node in ast.walk(tree):
            if isinstance(node, ast.Call):
                name = _call_name(node)
                if name is not None:
                    yield rel_path, getattr(node, "lineno", 0), name


def _violations(kind: str) -> list[str]:
    return sorted(f"{path}:{line}: {name}" for path, line, name in _library_calls() if FORBIDDEN_CALLS.get(name) == kind)


def test_no_prints_in_library() -> None:
    violations = _violations("print()") + _violations("pprint()")
    assert not violations, "print() is forbidden in library modules; use the module logger:\n" + "\n".join(violations)


def test_logging_is_never_configured_implicitly() -> None:
    violations = _violations("logging.basicConfig")
    assert not violations, "logging.basicConfig is forbidden in library modules:\n" + "\n".join(violations)
