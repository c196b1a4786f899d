import logging
import os
from collections.abc import Mapping
from pathlib import Path

from src.rules.loader import load_rules
from src.rules.models import DEFAULT_RULES, AccessRules

logger = logging.getLogger(__name__)

RULES_ENV_VAR = "CAMPUSLINK_RULES_PATH"
RULES_FILENAME = "rules.yaml"


def resolve_rules(base_dir: Path, env: Mapping[str, str] | None = None) -> AccessRules:
    """
    Load the access rules used at startup.

    1. CAMPUSLINK_RULES_PATH, if set, must point at a valid rules file.
    2. Otherwise base_dir/rules.yaml is used when present.
    3. Otherwise the built-in defaults apply.
    """
    env = os.environ if env is None else env

    explicit = env.get(RULES_ENV_VAR)
    if explicit:
        # An explicit path that is missing is a deployment error, not a fallback
        return load_rules(Path(explicit))

    path = base_dir / RULES_FILENAME
    if path.exists():
        return load_rules(path)

    logger.info("No %s in %s, using built-in access rules", RULES_FILENAME, base_dir)
    return DEFAULT_RULES
