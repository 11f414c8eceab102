# src/confpatterns/config/defaults.py
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:INFO}",
        "destination": "${LOG_DESTINATION:console}",
        "file_path": "${LOG_FILE:logs/confpatterns.log}",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Settings store configuration
    "settings": {
        "default_file": "${CONFPATTERNS_SETTINGS_FILE:settings.txt}",
        "encoding": "utf-8",
        "atomic_write": False,
    },
}
