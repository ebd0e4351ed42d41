from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def rules_path(project_root: Path) -> Path:
    """Path to the real rules.yaml at the project root."""
    return project_root / "rules.yaml"


@pytest.fixture
def write_rules(tmp_path: Path):
    """
    Writes YAML text to a temporary rules file and returns its path.
    """

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
