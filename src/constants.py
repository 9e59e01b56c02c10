"""Constants used in the project."""

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_INPUT = 2
    NO_MATCH = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Package names under this scope belong to the opam ecosystem.
    OPAM_SCOPE = "@opam"
    DEFAULT_ECOSYSTEM = "npm"
    SUPPORTED_ECOSYSTEMS = ["npm", "opam"]

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PACKAGEINFO_LOG_LEVEL"
    ENV_CONFIG = "PACKAGEINFO_CONFIG"
    DEFAULT_CONFIG_FILE = "packageinfo.yml"
    CONFIG_SECTION = "packageinfo"


def _load_yaml_config(path=None) -> dict:
    """Load overrides from a YAML config file and apply them onto Constants.

    The file is taken from ``path``, the PACKAGEINFO_CONFIG environment variable,
    or ./packageinfo.yml, in that order. A missing or unreadable file leaves the
    defaults untouched.

    Returns:
        The applied section as a dict (empty when nothing was loaded).
    """
    config_path = path or os.environ.get(Constants.ENV_CONFIG) or Constants.DEFAULT_CONFIG_FILE
    if not os.path.isfile(config_path):
        if path:
            logger.warning("Config file not found: %s", config_path)
        return {}

    import yaml  # pylint: disable=import-outside-toplevel

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", config_path, e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get(Constants.CONFIG_SECTION, data)
    if not isinstance(section, dict):
        return {}

    applied = {}
    scope = section.get("opam_scope")
    if isinstance(scope, str) and scope.startswith("@"):
        Constants.OPAM_SCOPE = scope
        applied["opam_scope"] = scope
    ecosystem = section.get("default_ecosystem")
    if isinstance(ecosystem, str):
        if ecosystem.lower() in Constants.SUPPORTED_ECOSYSTEMS:
            Constants.DEFAULT_ECOSYSTEM = ecosystem.lower()
            applied["default_ecosystem"] = ecosystem.lower()
        else:
            logger.warning("Ignoring unsupported default_ecosystem: %s", ecosystem)
    return applied
