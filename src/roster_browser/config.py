from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from roster_browser.domain.dataset import RESOURCE_PATHS, Dataset
from roster_browser.domain.errors import ConfigError
from roster_browser.domain.result import Err, Ok, Result

_DEFAULTS: dict[str, object] = {
    "data": {
        "base_url": "",
        "root": "./public",
        "paths": {dataset.name.lower(): path for dataset, path in RESOURCE_PATHS.items()},
    },
    "http": {
        "timeout": 30.0,
        "connect_timeout": 10.0,
        "attempts": 1,
    },
}


@dataclass(frozen=True)
class DataSettings:
    base_url: str
    root: str
    paths: dict[Dataset, str]
    timeout: float
    connect_timeout: float
    attempts: int

    @property
    def remote(self) -> bool:
        return bool(self.base_url)


def create_config(
    yaml_path: str = "rosterdb.yaml",
    env_prefix: str = "ROSTERDB",
    defaults: dict[str, object] | None = None,
    *,
    base_url: str | None = None,
    data_dir: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        base_url: Override the static host the CSV resources are fetched from.
        data_dir: Override the local directory used when no host is set.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]

    overrides = _build_overrides(base_url, data_dir)
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _build_overrides(base_url: str | None, data_dir: str | None) -> dict[str, object]:
    data: dict[str, object] = {}
    if base_url is not None:
        data["base_url"] = base_url
    if data_dir is not None:
        data["root"] = data_dir
    return {"data": data} if data else {}


def load_data_settings(cfg: ConfigurationSet | None = None) -> Result[DataSettings, ConfigError]:
    if cfg is None:
        cfg = create_config()

    raw_paths = {str(k): str(v) for k, v in cfg.get_dict("data.paths").items()}
    known = {dataset.name.lower(): dataset for dataset in Dataset}
    unrecognized = tuple(sorted(k for k in raw_paths if k not in known))
    if unrecognized:
        return Err(
            ConfigError(
                message=f"Unknown dataset(s) under data.paths: {', '.join(unrecognized)}",
                unrecognized_keys=unrecognized,
            )
        )
    paths = {dataset: RESOURCE_PATHS[dataset] for dataset in Dataset}
    for key, path in raw_paths.items():
        paths[known[key]] = path

    try:
        attempts = int(str(cfg["http.attempts"]))
        timeout = float(str(cfg["http.timeout"]))
        connect_timeout = float(str(cfg["http.connect_timeout"]))
    except ValueError as exc:
        return Err(ConfigError(message=f"Invalid http setting: {exc}"))
    if attempts < 1:
        return Err(ConfigError(message=f"http.attempts must be at least 1, got {attempts}"))

    return Ok(
        DataSettings(
            base_url=str(cfg.get("data.base_url", "") or ""),
            root=str(cfg["data.root"]),
            paths=paths,
            timeout=timeout,
            connect_timeout=connect_timeout,
            attempts=attempts,
        )
    )
