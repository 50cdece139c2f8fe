"""
nativekit host configuration
Capability switches, environment loading and logging setup
"""

import logging
import os
import sys
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "NATIVEKIT_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

@dataclass
class HostConfig:
    """What the host supports and how the library should behave"""
    native_accessors: bool = True
    native_prototypes: bool = True
    weak_identities: bool = False
    log_level: str = "WARNING"

def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {ENV_PREFIX + name}: {raw!r}")

def load_config(environ: Optional[Mapping[str, str]] = None) -> HostConfig:
    """Build a HostConfig from NATIVEKIT_* environment variables"""
    if environ is None:
        environ = os.environ
    defaults = HostConfig()
    return HostConfig(
        native_accessors=_env_flag(environ, "NATIVE_ACCESSORS", defaults.native_accessors),
        native_prototypes=_env_flag(environ, "NATIVE_PROTOTYPES", defaults.native_prototypes),
        weak_identities=_env_flag(environ, "WEAK_IDENTITIES", defaults.weak_identities),
        log_level=environ.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
    )

_config: Optional[HostConfig] = None

def get_config() -> HostConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config

def set_config(config: HostConfig) -> HostConfig:
    global _config
    _config = config
    return config

def enable_native_accessors(allow: bool = True):
    get_config().native_accessors = bool(allow)

def enable_native_prototypes(allow: bool = True):
    get_config().native_prototypes = bool(allow)

def enable_weak_identities(allow: bool = True):
    """Only affects registries created afterwards"""
    get_config().weak_identities = bool(allow)

def capability_summary() -> Dict[str, Any]:
    summary = asdict(get_config())
    summary["python"] = sys.version.split()[0]
    return summary

def setup_logging(level: str = "INFO", format_type: str = "structured") -> logging.Logger:
    """Setup logging for the nativekit loggers"""
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }
    log_level = level_map.get(level.upper(), logging.INFO)

    if format_type == "structured":
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        formatter = logging.Formatter(
            '%(levelname)s - %(message)s'
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logger = logging.getLogger('nativekit')
    logger.setLevel(log_level)

    return logger
