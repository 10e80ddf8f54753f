"""Tests to verify the hexagonal layering of the votingflow package.

- domain/ imports nothing from other votingflow layers
- application/ imports domain/, plus observability as a cross-cutting concern
- api/ reaches infrastructure only for observability and monitoring
"""

import ast
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).parent.parent.parent / "votingflow"


def _imported_modules(py_file: Path) -> list[str]:
    """Return every absolute module name imported by ``py_file``."""
    tree = ast.parse(py_file.read_text())
    modules: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.append(node.module)
        elif isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
    return modules


def _violations(layer: str, allowed_prefixes: tuple[str, ...]) -> list[str]:
    found = []
    for py_file in (PACKAGE_ROOT / layer).rglob("*.py"):
        for module in _imported_modules(py_file):
            if not module.startswith("votingflow."):
                continue
            if module.startswith(allowed_prefixes):
                continue
            found.append(f"{py_file.relative_to(PACKAGE_ROOT)}: {module}")
    return found


@pytest.mark.parametrize(
    "layer", ["domain", "application", "infrastructure", "config", "bootstrap", "api"]
)
def test_layer_is_a_package(layer: str) -> None:
    assert (PACKAGE_ROOT / layer / "__init__.py").is_file(), f"Missing {layer}"


def test_domain_has_no_outer_layer_imports() -> None:
    assert _violations("domain", ("votingflow.domain",)) == []


def test_application_imports_domain_and_observability_only() -> None:
    allowed = (
        "votingflow.domain",
        "votingflow.application",
        "votingflow.infrastructure.observability",
    )
    assert _violations("application", allowed) == []


def test_api_uses_infrastructure_only_for_cross_cutting_concerns() -> None:
    allowed = (
        "votingflow.api",
        "votingflow.application",
        "votingflow.domain",
        "votingflow.bootstrap",
        "votingflow.infrastructure.monitoring",
        "votingflow.infrastructure.observability",
    )
    assert _violations("api", allowed) == []


def test_ballot_error_exported_from_domain() -> None:
    from votingflow.domain import BallotError

    assert issubclass(BallotError, Exception)
    assert str(BallotError("rejected")) == "rejected"
