"""Map building configurations: resource tiles and player-built structures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from slgkit.facility import NeedRes


def _read_json(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must be a JSON object")
    return data


@dataclass
class MapBuildCfg:
    """A map tile type at one level."""

    type: int = 0
    name: str = ""
    level: int = 0
    grain: int = 0
    wood: int = 0
    iron: int = 0
    stone: int = 0
    durable: int = 0
    defender: int = 0


@dataclass
class MapBuildConf:
    """All map tile configurations, grouped by type."""

    title: str = ""
    cfg: list[MapBuildCfg] = field(default_factory=list)
    _by_type: dict[int, list[MapBuildCfg]] = field(default_factory=dict, repr=False)

    def load(self, json_dir: str | Path) -> None:
        """Load ``map_build.json`` from *json_dir*."""
        self.load_dict(_read_json(Path(json_dir) / "map_build.json"))

    def load_dict(self, data: dict[str, Any]) -> None:
        """Load the configuration from decoded JSON."""
        self.title = data.get("title", "")
        self.cfg = [
            MapBuildCfg(
                type=c.get("type", 0),
                name=c.get("name", ""),
                level=c.get("level", 0),
                grain=c.get("grain", 0),
                wood=c.get("wood", 0),
                iron=c.get("iron", 0),
                stone=c.get("stone", 0),
                durable=c.get("durable", 0),
                defender=c.get("defender", 0),
            )
            for c in data.get("cfg") or []
        ]
        self._by_type = {}
        for c in self.cfg:
            self._by_type.setdefault(c.type, []).append(c)

    def build_config(self, cfg_type: int, level: int) -> MapBuildCfg | None:
        """Return the first configuration of *cfg_type* at *level*, or None."""
        return next((c for c in self._by_type.get(cfg_type, ()) if c.level == level), None)


@dataclass
class BuildLevel:
    """One level of a player-built structure."""

    level: int = 0
    time: int = 0
    durable: int = 0
    defender: int = 0
    need: NeedRes = field(default_factory=NeedRes)
    army_cnt: int = 0


@dataclass
class CustomBuildConf:
    """A player-built structure type and its levels."""

    type: int = 0
    name: str = ""
    levels: list[BuildLevel] = field(default_factory=list)


@dataclass
class BCLevelCfg:
    """A player-built structure type at a single level."""

    type: int = 0
    name: str = ""
    level: int = 0
    time: int = 0
    durable: int = 0
    defender: int = 0
    need: NeedRes = field(default_factory=NeedRes)
    army_cnt: int = 0


@dataclass
class MapBuildCustomConf:
    """All player-built structure configurations, keyed by type."""

    title: str = ""
    cfg: list[CustomBuildConf] = field(default_factory=list)
    _by_type: dict[int, CustomBuildConf] = field(default_factory=dict, repr=False)

    def load(self, json_dir: str | Path) -> None:
        """Load ``map_build_custom.json`` from *json_dir*."""
        self.load_dict(_read_json(Path(json_dir) / "map_build_custom.json"))

    def load_dict(self, data: dict[str, Any]) -> None:
        """Load the configuration from decoded JSON."""
        self.title = data.get("title", "")
        self.cfg = [
            CustomBuildConf(
                type=c.get("type", 0),
                name=c.get("name", ""),
                levels=[
                    BuildLevel(
                        level=lv.get("level", 0),
                        time=lv.get("time", 0),
                        durable=lv.get("durable", 0),
                        defender=lv.get("defender", 0),
                        need=NeedRes.from_dict(lv.get("need")),
                        army_cnt=(lv.get("result") or {}).get("army_cnt", 0),
                    )
                    for lv in c.get("levels") or []
                ],
            )
            for c in data.get("cfg") or []
        ]
        self._by_type = {c.type: c for c in self.cfg}

    def build_config(self, cfg_type: int, level: int) -> BCLevelCfg | None:
        """Return the configuration of *cfg_type* at *level*, or None."""
        conf = self._by_type.get(cfg_type)
        if conf is None or level <= 0 or len(conf.levels) < level:
            return None
        lv = conf.levels[level - 1]
        return BCLevelCfg(
            type=cfg_type,
            name=conf.name,
            level=level,
            time=lv.time,
            durable=lv.durable,
            defender=lv.defender,
            need=lv.need,
            army_cnt=lv.army_cnt,
        )

    def get_hold_army_cnt(self, cfg_type: int, level: int) -> int:
        """Number of armies the structure can hold, 0 when unknown."""
        cfg = self.build_config(cfg_type, level)
        return cfg.army_cnt if cfg else 0