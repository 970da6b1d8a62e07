import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

ENV_PREFIX = "WORDSEARCH_"

_TRUE_STRINGS = ("1", "true", "yes")
_FALSE_STRINGS = ("0", "false", "no")


@dataclass
class Settings:
    DICTIONARY_PATH: Optional[Path] = None  # None: built-in word list

    MIN_WORD_LENGTH: int = 1
    MAX_RESULTS: int = 0  # 0: no cap
    UNIQUE_WORDS: bool = False
    MAX_BOARD_CELLS: int = 400

    NOTIFY: bool = False
    NTFY_TOPIC: str = "wordsearch"
    NTFY_URL: str = "https://ntfy.sh"

    DEBUG: bool = False

    def __post_init__(self):
        # Override from environment
        for fld in fields(self):
            env_val = os.environ.get(ENV_PREFIX + fld.name)
            if env_val is None:
                continue
            if fld.name == "DICTIONARY_PATH":
                setattr(self, fld.name, Path(env_val) if env_val else None)
            else:
                setattr(self, fld.name, _coerce(type(getattr(self, fld.name)), env_val))


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "UNIQUE_WORDS": bool,
    "NOTIFY": bool,
    "NTFY_TOPIC": str,
    "DEBUG": bool,
}


def _coerce(kind: type, value):
    if kind is bool:
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if kind is int:
        if isinstance(value, bool):
            raise ValueError(f"not an integer: {value!r}")
        return int(value)
    return kind(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable field updates. Returns per-field errors; valid fields are applied regardless."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        kind = EDITABLE_FIELDS.get(name)
        if kind is None:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(kind, value)
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
            continue
        if kind is int and coerced < 0:
            errors[name] = "must be zero or greater"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
