"""Load uniqname configuration.

Sources, first wins: keyword overrides, ``UNIQNAME__SECTION__KEY`` environment
variables, the explicit YAML file (or ``./uniqname.yaml``), the global
``~/.config/uniqname/config.yaml``, then model defaults.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from uniqname.config.models import LoggingConfig, NamingConfig, UniqnameConfig
from uniqname.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/uniqname/config.yaml").expanduser()
LOCAL_CONFIG_NAME = "uniqname.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Lowest-priority settings source backed by the merged YAML files."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Bind a settings class to one merged YAML mapping, so loads never share state."""

    class UniqnameSettings(BaseSettings):
        """Root config. Env vars: UNIQNAME__LOGGING__LEVEL, UNIQNAME__NAMING__CHECK_RESERVED, etc."""

        model_config = SettingsConfigDict(
            env_prefix="UNIQNAME__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        naming: NamingConfig = NamingConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return UniqnameSettings


def load_config(path: Path | None = None, **kwargs: Any) -> UniqnameConfig:
    """Load config: defaults < global yaml < local yaml < env vars < kwargs.

    Args:
        path: Explicit YAML config file. Must exist when given.
              Defaults to ./uniqname.yaml when present.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On a missing explicit file, invalid YAML syntax, or
            validation errors.
    """
    if path is not None:
        if not path.exists():
            raise ConfigError.file_not_found(str(path))
        local_config = _load_yaml(path)
    else:
        local_config = _load_yaml(Path.cwd() / LOCAL_CONFIG_NAME)

    yaml_config = _deep_merge(_load_yaml(GLOBAL_CONFIG_PATH), local_config)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return UniqnameConfig.model_validate(settings.model_dump())
