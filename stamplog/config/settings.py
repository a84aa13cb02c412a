from pathlib import Path
from dotenv import find_dotenv, load_dotenv
import os
import pytz

def env_file() -> str:
    # Nearest .env from the working directory up, else the one under STAMPLOG_HOME
    found = find_dotenv(usecwd=True)
    if found:
        return found
    return str(Path(os.getenv("STAMPLOG_HOME", str(Path.home() / ".stamplog"))) / ".env")

load_dotenv(env_file())

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

class Settings:
    # For debugging interval formatting
    TRACING_ENABLED = env_bool("TRACING_ENABLED", False)

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Directories
    BASE_DIR = Path(os.getenv("STAMPLOG_HOME", str(Path.home() / ".stamplog")))
    STORAGE_DIR = BASE_DIR / "storage"

    # Records
    DATA_FILE = STORAGE_DIR / "timestamps.json"
    MAX_RECORDS = int(os.getenv("MAX_RECORDS", 100))

    # Preferences
    PREFS_FILE = STORAGE_DIR / "preferences.json"
    SHOW_MILLISECONDS = env_bool("SHOW_MILLISECONDS", True)

    # Export
    EXPORT_DIR = BASE_DIR / "exports"
    EXPORT_FILE = EXPORT_DIR / "timestamps.csv"
    EXPORT_MILLISECONDS = env_bool("EXPORT_MILLISECONDS", True)

    # Logs
    LOGS_DIR = BASE_DIR / "logs"
    LOG_FILE = LOGS_DIR / "stamplog.log"

    # Locale and timezone (None means the host's local zone)
    LOCALE = os.getenv("STAMPLOG_LOCALE", "en_US")
    LOCAL_TZ = pytz.timezone(os.getenv('LOCAL_TZ')) if os.getenv('LOCAL_TZ') else None
