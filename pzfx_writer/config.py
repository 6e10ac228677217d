from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, PrismSchema


@dataclass(frozen=True, slots=True)
class WriterConfig:
    created_by_program: str = PrismSchema.CREATED_BY_PROGRAM
    created_by_version: str = PrismSchema.CREATED_BY_VERSION
    login: str = ""
    subcolumn_suffix: str = Defaults.SUBCOLUMN_SUFFIX
    table_name_prefix: str = Defaults.TABLE_NAME_PREFIX
    info_name_prefix: str = Defaults.INFO_NAME_PREFIX

    def __post_init__(self) -> None:
        if not self.created_by_program.strip():
            raise ValueError("created_by_program must not be empty")
        if not self.table_name_prefix.strip():
            raise ValueError("table_name_prefix must not be empty")
        if not self.info_name_prefix.strip():
            raise ValueError("info_name_prefix must not be empty")

    @classmethod
    def from_env(cls) -> WriterConfig:
        return cls(
            created_by_program=os.getenv(
                "PZFX_CREATED_BY_PROGRAM", PrismSchema.CREATED_BY_PROGRAM
            ),
            created_by_version=os.getenv(
                "PZFX_CREATED_BY_VERSION", PrismSchema.CREATED_BY_VERSION
            ),
            login=os.getenv("PZFX_LOGIN", ""),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
        if config_file is None:
            config_file = Path("pzfx_writer.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        document = _get_table(data, "document")
        defaults = _get_table(data, "defaults")
        created_by_program = base_config.created_by_program
        if (value := document.get("created_by_program")) is not None:
            created_by_program = _coerce_str(value, key="document.created_by_program")
        created_by_version = base_config.created_by_version
        if (value := document.get("created_by_version")) is not None:
            created_by_version = _coerce_str(value, key="document.created_by_version")
        login = base_config.login
        if (value := document.get("login")) is not None:
            login = _coerce_str(value, key="document.login")
        subcolumn_suffix = base_config.subcolumn_suffix
        if (value := defaults.get("subcolumn_suffix")) is not None:
            subcolumn_suffix = _coerce_str(value, key="defaults.subcolumn_suffix")
        table_name_prefix = base_config.table_name_prefix
        if value := defaults.get("table_name_prefix"):
            table_name_prefix = _coerce_str(value, key="defaults.table_name_prefix")
        info_name_prefix = base_config.info_name_prefix
        if value := defaults.get("info_name_prefix"):
            info_name_prefix = _coerce_str(value, key="defaults.info_name_prefix")
        return WriterConfig(
            created_by_program=created_by_program,
            created_by_version=created_by_version,
            login=login,
            subcolumn_suffix=subcolumn_suffix,
            table_name_prefix=table_name_prefix,
            info_name_prefix=info_name_prefix,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_str(value: object, *, key: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")
