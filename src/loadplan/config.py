"""Loading of plan input: power limit, tariff rates and devices.

The input file is YAML. JSON is a subset of YAML, so JSON input files in this
layout load unchanged:

    {"maxPower": 2100,
     "rates": [{"from": 7, "to": 10, "value": 6.46}, ...],
     "devices": [{"id": "...", "name": "...", "power": 950, "duration": 3, "mode": "night"}, ...]}
"""

import math
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigError
from .models import HOURS_PER_DAY, MODES, Device, PlanConfig, Rate

# Load environment variables from .env file
load_dotenv()

CONFIG_ENV_VAR = "LOADPLAN_CONFIG"


def get_config_path(path: Path | None = None) -> Path:
    """Find the plan input file."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidates = [
        Path.cwd() / "config" / "plan.yaml",
        Path.home() / ".config" / "loadplan" / "plan.yaml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    raise FileNotFoundError(
        f"Could not find config/plan.yaml (pass --config or set {CONFIG_ENV_VAR})"
    )


def _pick(data: dict, *keys: str, required: bool = True, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    if required:
        raise ConfigError(f"Missing '{keys[0]}' in {data!r}")
    return default


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{field}' must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"'{field}' must be a finite number, got {value!r}")
    return float(value)


def _hour(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{field}' must be an integer hour, got {value!r}")
    if not 0 <= value < HOURS_PER_DAY:
        raise ConfigError(f"'{field}' must be between 0 and {HOURS_PER_DAY - 1}, got {value}")
    return value


def parse_rate(data: dict) -> Rate:
    """Parse a rate entry ({from, to, value})."""
    if not isinstance(data, dict):
        raise ConfigError(f"Rate must be a mapping, got {data!r}")
    return Rate(
        from_hour=_hour(_pick(data, "from", "from_hour"), "from"),
        to_hour=_hour(_pick(data, "to", "to_hour"), "to"),
        price=_number(_pick(data, "value", "price"), "value"),
    )


def parse_device(data: dict) -> Device:
    """Parse a device entry ({id, name, power, duration, mode})."""
    if not isinstance(data, dict):
        raise ConfigError(f"Device must be a mapping, got {data!r}")

    device_id = _pick(data, "id")
    if device_id is None or str(device_id) == "":
        raise ConfigError("Device 'id' must not be empty")

    duration = _pick(data, "duration")
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise ConfigError(f"'duration' must be an integer number of hours, got {duration!r}")

    mode = _pick(data, "mode", required=False)
    if mode is not None and mode not in MODES:
        raise ConfigError(f"'mode' must be one of {', '.join(MODES)}, got {mode!r}")

    name = _pick(data, "name", required=False)
    return Device(
        id=str(device_id),
        power=_number(_pick(data, "power"), "power"),
        duration=duration,
        mode=mode,
        name=str(name) if name is not None else None,
    )


def parse_plan_config(data: dict) -> PlanConfig:
    """Build a PlanConfig from already-decoded input data."""
    if not isinstance(data, dict):
        raise ConfigError("Plan input must be a mapping")

    rates = _pick(data, "rates")
    devices = _pick(data, "devices")
    if not isinstance(rates, list) or not isinstance(devices, list):
        raise ConfigError("'rates' and 'devices' must be lists")

    config = PlanConfig(
        max_power=_number(_pick(data, "maxPower", "max_power"), "maxPower"),
        rates=[parse_rate(r) for r in rates],
        devices=[parse_device(d) for d in devices],
    )

    seen = set()
    for device in config.devices:
        if device.id in seen:
            raise ConfigError(f"Duplicate device id {device.id!r}")
        seen.add(device.id)

    return config


def load_plan_config(config_path: Path | None = None) -> PlanConfig:
    """Load and parse the plan input file."""
    path = get_config_path(config_path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    return parse_plan_config(data)
