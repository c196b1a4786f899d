import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import AccessRules

logger = logging.getLogger(__name__)


def load_rules(path: Path) -> AccessRules:
    """
    Load and validate the access rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = AccessRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Loaded access rules from %s", path)
    return rules
