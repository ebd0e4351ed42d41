import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

# Default rules file name (relative to project root)
DEFAULT_RULES_PATH = "rules.yaml"


class RulesValidationError(ValueError):
    """Raised when the rules file is not valid YAML or fails schema validation."""


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Pick the rules file to load.

    An explicit path wins, then the RULES_PATH environment variable,
    then rules.yaml at the project root.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get("RULES_PATH")
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises RulesValidationError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    content = path.read_text()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RulesValidationError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        raise RulesValidationError(f"Rules file is empty: {path}")

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise RulesValidationError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules %s from %s", rules.project.rules_version, path)
    return rules
