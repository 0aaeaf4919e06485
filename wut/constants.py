"""
Constants for the wut command assistant.
"""
from pathlib import Path
import os

# Application information
APP_NAME = "wut"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Shell-command assistant that spots typos, risky commands and known error fixes"

# Paths
CONFIG_DIR = Path(os.environ.get("WUT_CONFIG_DIR", os.path.expanduser("~/.config/wut")))
CONFIG_FILE = CONFIG_DIR / "config.toml"
LOG_DIR = CONFIG_DIR / "logs"

# Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "10 days"

# Edit-distance thresholds keyed by maximum token length
MAX_DISTANCE_BY_LENGTH = (
    (3, 1),   # very short tokens: one edit only
    (6, 2),
)
MAX_DISTANCE_LONG = 3
MIN_CONFIDENCE = 0.3

# Fixed confidences for the heuristic stages
KNOWN_TYPO_CONFIDENCE = 0.9
MISSING_PREFIX_CONFIDENCE = 0.78
SHORT_FLAG_CONFIDENCE = 0.8
COMPOSE_CONFIDENCE = 0.8
RECURSIVE_DELETE_HINT_CONFIDENCE = 0.7
DANGEROUS_CONFIDENCE = 1.0
DANGEROUS_HEURISTIC_CONFIDENCE = 0.95
RULE_CONFIDENCE = 1.0

# History fallback
HISTORY_MAX_DISTANCE = 5
HISTORY_BASE_CONFIDENCE = 0.7
HISTORY_CONFIDENCE_STEP = 0.1

# Output-driven diagnosis
RULE_TIMEOUT = 2.0  # seconds
MAX_DIAGNOSIS_WORKERS = 4
