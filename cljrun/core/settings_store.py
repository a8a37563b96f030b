from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from cljrun.core.errors import ConfigurationError
from cljrun.core.settings_model import RunSettings, UserDefaults

PROJECT_SETTINGS_FILENAME = "cljrun.json"
USER_SETTINGS_FILENAME = "settings.json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class SettingsStore:
    """Load run settings from a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def base_dir(self) -> Path:
        return self._path.parent

    def load(self) -> RunSettings:
        """Read project settings; a missing file yields empty settings."""
        return self._load_model(RunSettings)

    def load_user_defaults(self) -> UserDefaults:
        return self._load_model(UserDefaults)

    def _load_model(self, model: type[ModelT]) -> ModelT:
        if not self._path.exists():
            return model()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(
                code="invalid_settings",
                message=f"Unable to read {self._path}",
                detail=str(exc),
            ) from exc
        if not isinstance(raw, dict):
            raise ConfigurationError(
                code="invalid_settings",
                message=f"Unable to read {self._path}",
                detail="expected a JSON object",
            )
        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            raise ConfigurationError(
                code="invalid_settings",
                message=f"Invalid settings in {self._path}",
                detail="; ".join(
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in exc.errors()
                ),
            ) from exc

    def resolve_path(self, value: str) -> Path:
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return self.base_dir / path
