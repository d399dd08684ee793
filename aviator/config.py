"""Configuration for the predictor."""

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Optional, Dict, List
import json
import os

from aviator.constants import ALLOWED_HISTORY_LENGTHS, DEFAULT_HISTORY_LENGTH, MIN_CLASSIFIABLE_LENGTH
from aviator.exceptions import ConfigurationError


_DEFAULT_ANALYSIS_DELAY = 0.0
_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_OUTPUT_DIR = "reports"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _coerce_float(value: Optional[str], default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _coerce_int(value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_int_list(value: Optional[str], default: List[int]) -> List[int]:
    if value is None or value == "":
        return list(default)
    items = value if isinstance(value, list) else str(value).split(",")
    result: List[int] = []
    for item in items:
        text = str(item).strip()
        if not text:
            continue
        try:
            result.append(int(text))
        except ValueError:
            return list(default)
    return result or list(default)


def _parse_env_file(path: Path) -> Dict[str, str]:
    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = _strip_quotes(value.strip())
    return data


def _load_config_data(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        if path.suffix.lower() != ".json":
            return _parse_env_file(path)
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError("config_path", f"cannot parse {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError("config_path", f"{path} must hold a JSON object")
    return {str(k): str(v) if not isinstance(v, list) else ",".join(str(i) for i in v)
            for k, v in payload.items()}


@dataclass
class Config:
    history_length: int = DEFAULT_HISTORY_LENGTH
    allowed_history_lengths: List[int] = field(default_factory=lambda: list(ALLOWED_HISTORY_LENGTHS))
    analysis_delay: float = _DEFAULT_ANALYSIS_DELAY
    log_level: str = _DEFAULT_LOG_LEVEL
    output_dir: str = _DEFAULT_OUTPUT_DIR

    def __post_init__(self) -> None:
        self.allowed_history_lengths = sorted(set(self.allowed_history_lengths))
        too_short = [n for n in self.allowed_history_lengths if n < MIN_CLASSIFIABLE_LENGTH]
        if too_short:
            raise ConfigurationError(
                "allowed_history_lengths",
                f"lengths {too_short} are below the minimum of {MIN_CLASSIFIABLE_LENGTH}",
            )
        if self.history_length not in self.allowed_history_lengths:
            raise ConfigurationError(
                "history_length",
                f"{self.history_length} is not one of {self.allowed_history_lengths}",
            )
        if self.analysis_delay < 0:
            raise ConfigurationError("analysis_delay", "must be >= 0 seconds")
        self.log_level = (self.log_level or _DEFAULT_LOG_LEVEL).upper()

    def is_allowed_length(self, length: int) -> bool:
        return length in self.allowed_history_lengths

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            history_length=_coerce_int(
                os.environ.get("AVIATOR_HISTORY_LENGTH"),
                DEFAULT_HISTORY_LENGTH,
            ),
            allowed_history_lengths=_coerce_int_list(
                os.environ.get("AVIATOR_ALLOWED_LENGTHS"),
                list(ALLOWED_HISTORY_LENGTHS),
            ),
            analysis_delay=_coerce_float(
                os.environ.get("AVIATOR_ANALYSIS_DELAY"),
                _DEFAULT_ANALYSIS_DELAY,
            ),
            log_level=os.environ.get("AVIATOR_LOG_LEVEL", _DEFAULT_LOG_LEVEL),
            output_dir=os.environ.get("AVIATOR_OUTPUT_DIR", _DEFAULT_OUTPUT_DIR),
        )

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        env_config = cls.from_env()
        if not config_path:
            return env_config

        file_data = _load_config_data(Path(config_path))
        return cls(
            history_length=_coerce_int(
                file_data.get("AVIATOR_HISTORY_LENGTH"),
                env_config.history_length,
            ),
            allowed_history_lengths=_coerce_int_list(
                file_data.get("AVIATOR_ALLOWED_LENGTHS"),
                env_config.allowed_history_lengths,
            ),
            analysis_delay=_coerce_float(
                file_data.get("AVIATOR_ANALYSIS_DELAY"),
                env_config.analysis_delay,
            ),
            log_level=file_data.get("AVIATOR_LOG_LEVEL", env_config.log_level),
            output_dir=file_data.get("AVIATOR_OUTPUT_DIR", env_config.output_dir),
        )

    def to_dict(self) -> Dict[str, str]:
        return {k: str(v) for k, v in asdict(self).items()}
