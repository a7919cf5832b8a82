"""Configuration loading from an optional YAML file, env vars, and CLI args.

Precedence (highest first): CLI flags, environment variables, YAML file, defaults.
"""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("json", "text")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    output_format: str = "json"
    strict: bool = False
    log_level: str = "INFO"
    include_raw: bool = False

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}"
            )


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or file missing."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ValueError(f"Config file {path} is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None, cli_args=None) -> Config:
    """Build Config from YAML data, env vars, and (optionally) parsed CLI args."""
    yaml_data = yaml_data or {}

    output_format = os.environ.get(
        "IPTABLES_OUTPUT_FORMAT", yaml_data.get("output_format", Config.output_format)
    )
    strict = os.environ.get("IPTABLES_STRICT", yaml_data.get("strict", Config.strict))
    log_level = os.environ.get(
        "IPTABLES_LOG_LEVEL", yaml_data.get("log_level", Config.log_level)
    )
    include_raw = os.environ.get(
        "IPTABLES_INCLUDE_RAW", yaml_data.get("include_raw", Config.include_raw)
    )

    if cli_args is not None:
        if getattr(cli_args, "output", None):
            output_format = cli_args.output
        if getattr(cli_args, "strict", False):
            strict = True
        if getattr(cli_args, "log_level", None):
            log_level = cli_args.log_level
        if getattr(cli_args, "include_raw", False):
            include_raw = True

    return Config(
        output_format=str(output_format).lower(),
        strict=_parse_bool(strict),
        log_level=str(log_level).upper(),
        include_raw=_parse_bool(include_raw),
    )
