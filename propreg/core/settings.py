"""
Runtime settings.

Resolution order (later wins):
  1) Defaults (bundled sample data under propreg/data)
  2) Optional YAML/JSON config file named by PROPREG_CONFIG_FILE
  3) Environment variables

Config file format:
    data_dir: /srv/mdn
    properties_file: css/properties.json
    syntaxes_file: css/syntaxes.json
    svg_file: svg.yaml
    compat_file: /srv/bcd/data.json
    log_level: DEBUG

Relative file names are resolved against `data_dir`.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from propreg.core.data import DataSourceError, read_document

_log = logging.getLogger("propreg.settings")

# propreg/core/settings.py -> parents[1] = propreg/
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"

_ENV_VARS = {
    "data_dir": "PROPREG_DATA_DIR",
    "properties_file": "PROPREG_PROPERTIES_FILE",
    "syntaxes_file": "PROPREG_SYNTAXES_FILE",
    "svg_file": "PROPREG_SVG_FILE",
    "compat_file": "PROPREG_COMPAT_FILE",
    "log_level": "PROPREG_LOG_LEVEL",
    "host": "PROPREG_HOST",
    "port": "PROPREG_PORT",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = PACKAGE_DATA_DIR
    properties_file: str = "properties.json"
    syntaxes_file: str = "syntaxes.json"
    svg_file: str = "svg.yaml"
    compat_file: str = "compat.json"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8010

    @property
    def properties_path(self) -> Path:
        return self._resolve(self.properties_file)

    @property
    def syntaxes_path(self) -> Path:
        return self._resolve(self.syntaxes_file)

    @property
    def svg_path(self) -> Path:
        return self._resolve(self.svg_file)

    @property
    def compat_path(self) -> Path:
        return self._resolve(self.compat_file)

    def _resolve(self, filename: str) -> Path:
        p = Path(filename)
        return p if p.is_absolute() else Path(self.data_dir) / p

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        values: Dict[str, Any] = load_config_file(env.get("PROPREG_CONFIG_FILE"))
        for field_name, env_name in _ENV_VARS.items():
            raw = (env.get(env_name) or "").strip()
            if raw:
                values[field_name] = raw

        return cls.from_mapping(values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Settings":
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                _log.warning("Ignoring unknown setting %r", key)
                continue
            kwargs[key] = value

        if "data_dir" in kwargs:
            kwargs["data_dir"] = Path(kwargs["data_dir"])
        if "port" in kwargs:
            kwargs["port"] = int(kwargs["port"])
        if "log_level" in kwargs:
            kwargs["log_level"] = str(kwargs["log_level"]).upper()
        return cls(**kwargs)


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Read the optional config file. A missing file is logged and ignored."""
    if not path or not str(path).strip():
        return {}

    resolved = Path(str(path).strip())
    if not resolved.exists():
        _log.warning("Config file %s does not exist; using defaults", resolved)
        return {}

    try:
        data = read_document(resolved)
    except DataSourceError as exc:
        _log.warning("Ignoring unreadable config file %s: %s", resolved, exc)
        return {}

    _log.info("Loaded %d settings from %s", len(data), resolved)
    return dict(data)
