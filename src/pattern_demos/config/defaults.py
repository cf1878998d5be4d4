# src/pattern_demos/config/defaults.py
from typing import Any, Dict

from pattern_demos._package import ENV_PREFIX

LOG_LEVEL_ENV_VAR = f"{ENV_PREFIX}_LOG_LEVEL"
LOG_DESTINATION_ENV_VAR = f"{ENV_PREFIX}_LOG_DESTINATION"
LOG_FILE_ENV_VAR = f"{ENV_PREFIX}_LOG_FILE"
NO_WAIT_ENV_VAR = f"{ENV_PREFIX}_NO_WAIT"
CONFIG_FILE_ENV_VAR = f"{ENV_PREFIX}_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": f"${{{LOG_LEVEL_ENV_VAR}:WARNING}}",
        "destination": f"${{{LOG_DESTINATION_ENV_VAR}:console}}",
        "file_path": f"${{{LOG_FILE_ENV_VAR}:logs/pattern_demos.log}}",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Demo run configuration
    "demo": {
        "wait_for_input": True,
        "prompt": "",
    },
}

# Environment variables that force a value regardless of the config file.
# Maps variable name to the config path it overrides.
ENV_OVERRIDES = {
    LOG_LEVEL_ENV_VAR: ("logging", "level"),
    LOG_DESTINATION_ENV_VAR: ("logging", "destination"),
    LOG_FILE_ENV_VAR: ("logging", "file_path"),
    NO_WAIT_ENV_VAR: ("demo", "wait_for_input"),
}

TRUTHY = ("1", "true", "yes", "on")
