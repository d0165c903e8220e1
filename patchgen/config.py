"""
Configuration loading

Settings come from three layers, later ones winning:
    1. patchgen/defaults.py
    2. an optional user config file (--config), a plain Python module
    3. explicit command line flags
"""

import importlib.util
from dataclasses import dataclass, fields, replace
from pathlib import Path

from patchgen import defaults
from patchgen.errors import ConfigError
from patchgen.scanner import SampleFilter
from patchgen.writer import OutputMode


@dataclass(frozen=True)
class Settings:
    template: str
    key_start: int
    sample_filter: SampleFilter
    output_mode: OutputMode
    header_bytes: int
    frame_width: int
    patch_filename: str
    preset_suffix: str
    max_preset_attempts: int
    threads: int
    atomic_write: bool
    dry_run: bool = False


def load_config(config_path):
    """Load configuration from a Python file"""
    config_file = Path(config_path)
    if not config_file.is_file():
        raise ConfigError(f"Config file not found: {config_file}")

    spec = importlib.util.spec_from_file_location("patchgen_config", config_file)
    config = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(config)
    except Exception as e:
        raise ConfigError(f"Unable to load config file {config_file}! ({e})") from e
    return config


def _coerce(name, value, kind):
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {name}: {value!r} ({e})") from e


def resolve_settings(config=None, **overrides) -> Settings:
    """Build Settings from the defaults, an optional config module and CLI overrides.

    Overrides that are None are ignored so unset flags fall through to the
    config file.
    """
    def setting(name):
        if config is not None and hasattr(config, name):
            return getattr(config, name)
        return getattr(defaults, name)

    settings = Settings(
        template=str(setting("TEMPLATE")),
        key_start=_coerce("KEY_START", setting("KEY_START"), int),
        sample_filter=_coerce("SAMPLE_FILTER", setting("SAMPLE_FILTER"), SampleFilter),
        output_mode=_coerce("OUTPUT_MODE", setting("OUTPUT_MODE"), OutputMode),
        header_bytes=_coerce("HEADER_BYTES", setting("HEADER_BYTES"), int),
        frame_width=_coerce("FRAME_WIDTH", setting("FRAME_WIDTH"), int),
        patch_filename=str(setting("PATCH_FILENAME")),
        preset_suffix=str(setting("PRESET_SUFFIX")),
        max_preset_attempts=_coerce("MAX_PRESET_ATTEMPTS", setting("MAX_PRESET_ATTEMPTS"), int),
        threads=max(1, _coerce("THREADS", setting("THREADS"), int)),
        atomic_write=bool(setting("ATOMIC_WRITE")),
    )

    known = {f.name for f in fields(Settings)}
    changes = {k: v for k, v in overrides.items() if v is not None and k in known}
    if "sample_filter" in changes:
        changes["sample_filter"] = SampleFilter(changes["sample_filter"])
    if "output_mode" in changes:
        changes["output_mode"] = OutputMode(changes["output_mode"])
    if "threads" in changes:
        changes["threads"] = max(1, changes["threads"])
    settings = replace(settings, **changes)
    if settings.frame_width == 0:
        raise ConfigError("FRAME_WIDTH must not be 0")
    if settings.max_preset_attempts < 1:
        raise ConfigError("MAX_PRESET_ATTEMPTS must be at least 1")
    return settings
