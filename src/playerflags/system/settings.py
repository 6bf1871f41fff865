from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from playerflags.core.logging import logger, LEVELS
from playerflags.flags.handle import DEFAULT_PREFIX

SETTINGS_FILENAME = ".playerflags_settings.json"
ENV_PREFIX = "PLAYERFLAGS_PREFIX"
ENV_LOG_LEVEL = "PLAYERFLAGS_LOG_LEVEL"

@dataclass
class SettingsData:
    prefix: str = DEFAULT_PREFIX   # attribute namespace for flags
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR

    def normalize(self):
        if not isinstance(self.prefix, str) or not self.prefix:
            self.prefix = DEFAULT_PREFIX
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LEVELS:
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = Path(path) if path else cls._resolve_path()
        data = SettingsData()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields, ignore unknown ones
                names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in names})
                logger.debug("SettingsLoaded", path=str(path))
            except (ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
                data = SettingsData()
        if os.environ.get(ENV_PREFIX):
            data.prefix = os.environ[ENV_PREFIX]
        if os.environ.get(ENV_LOG_LEVEL):
            data.log_level = os.environ[ENV_LOG_LEVEL]
        data.normalize()
        return cls(data, path)

    def apply(self):
        logger.set_level(self.data.log_level)  # type: ignore[arg-type]

    def save(self):
        self.path.write_text(json.dumps(asdict(self.data), indent=2))
        logger.debug("SettingsSaved", path=str(self.path))
