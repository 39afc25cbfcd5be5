from .paths import ENV_FILE, LOG_DIR, PROJECT_ROOT, STORAGE_DIR
from .logger import configure_logging, get_logger
from .settings import Settings, load_settings

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "ENV_FILE",
    "configure_logging",
    "get_logger",
    "Settings",
    "load_settings",
]
