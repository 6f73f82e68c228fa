"""Configuration dataclasses and YAML loader for the mine driller."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import yaml


@dataclass
class MineConfig:
    map_path: Path
    size: Optional[int] = None  # inferred from the map when None


@dataclass
class DrillerConfig:
    mine: MineConfig

    # Export flags (can be overridden by CLI)
    text_enabled: bool = True
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    placeholder: str = ""
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _parse_mine(mine_raw: Dict[str, Any], base_dir: Path) -> MineConfig:
    """Parse the mine section; map paths are relative to the config file."""
    map_path = Path(mine_raw['map'])
    if not map_path.is_absolute():
        map_path = base_dir / map_path

    size = mine_raw.get('size')
    if size is not None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"Invalid mine size: {size!r}")
    return MineConfig(map_path=map_path, size=size)


def load_config(config_path: Path) -> DrillerConfig:
    """Load and validate YAML configuration file."""
    config_path = Path(config_path)
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if 'mine' not in raw:
        raise ValueError("Configuration is missing the 'mine' section")
    mine = _parse_mine(raw['mine'], config_path.parent)

    # Parse export config (optional)
    export_raw = raw.get('export', {}) or {}

    return DrillerConfig(
        mine=mine,
        text_enabled=export_raw.get('text', True),
        csv_enabled=export_raw.get('csv', True),
        snapshot_enabled=export_raw.get('snapshot', True),
        gif_enabled=export_raw.get('gif', False),
        placeholder=str(export_raw.get('placeholder', "")),
    )
