from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml


@dataclass(frozen=True)
class DeviceMap:
    """
    Axis/button index overrides for one device, keyed by logical name.
    Empty dicts mean "use the device defaults".
    """
    axes: Dict[str, int] = field(default_factory=dict)
    buttons: Dict[str, int] = field(default_factory=dict)


def _load_index_map(section: object, what: str, path: Path) -> Dict[str, int]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise RuntimeError(f"{path}: '{what}' must be a mapping of name -> index")

    out: Dict[str, int] = {}
    for name, idx in section.items():
        # joystick buttons are keyed by their printed number, e.g. `2: 1`
        if isinstance(name, bool) or not isinstance(name, (str, int)) or not str(name).strip():
            raise RuntimeError(f"Invalid {what} name in {path}: {name!r}")
        if isinstance(idx, bool):
            raise RuntimeError(f"{what} '{name}' index must be int in {path}, got {idx!r}")
        try:
            out[str(name).strip().lower()] = int(idx)
        except (TypeError, ValueError) as e:
            raise RuntimeError(f"{what} '{name}' index must be int in {path}, got {idx!r}") from e
    return out


def load_device_maps(path: Path) -> Dict[str, DeviceMap]:
    """
    Load per-device overrides from YAML.

    Layout:
      joystick:            # both flight sticks
        axes: {x: 0, y: 1, twist: 2}
      gamepad:
        axes: {right_x: 3, right_y: 4}
        buttons: {rb: 5}
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise RuntimeError(f"{path} must contain a top-level mapping")

    maps: Dict[str, DeviceMap] = {}
    for device in ("joystick", "gamepad"):
        section = data.get(device) or {}
        if not isinstance(section, dict):
            raise RuntimeError(f"{path}: '{device}' must be a mapping")
        maps[device] = DeviceMap(
            axes=_load_index_map(section.get("axes"), "axes", path),
            buttons=_load_index_map(section.get("buttons"), "buttons", path),
        )
    return maps


def device_map(maps: Optional[Dict[str, DeviceMap]], device: str) -> DeviceMap:
    if not maps:
        return DeviceMap()
    return maps.get(device, DeviceMap())
