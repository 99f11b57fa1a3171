"""City facility configuration: upgrade levels, costs and additions."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_SKIPPED_FILES = frozenset({"facility.json", "facility_addition.json"})


class Addition(enum.IntEnum):
    """Kinds of bonus a facility level grants."""

    DURABLE = 1
    COST = 2
    ARMY_TEAMS = 3
    SPEED = 4
    DEFENSE = 5
    STRATEGY = 6
    FORCE = 7
    CONSCRIPT_TIME = 8
    RESERVE_LIMIT = 9
    UNKNOWN = 10
    HAN_ADDITION = 11
    QUN_ADDITION = 12
    WEI_ADDITION = 13
    SHU_ADDITION = 14
    WU_ADDITION = 15
    DEAL_TAX_RATE = 16
    WOOD = 17
    IRON = 18
    GRAIN = 19
    STONE = 20
    TAX = 21
    EXTEND_TIMES = 22
    WAREHOUSE_LIMIT = 23
    SOLDIER_LIMIT = 24
    VANGUARD_LIMIT = 25


class FacilityKind(enum.IntEnum):
    """Facility types referred to by name elsewhere in the game."""

    MAIN = 0
    JIAO_CHANG = 13
    TONG_SHUAI_TING = 14
    JI_SHI = 15
    MBS = 16


@dataclass
class NeedRes:
    """Resources needed for an upgrade."""

    decree: int = 0
    grain: int = 0
    wood: int = 0
    iron: int = 0
    stone: int = 0
    gold: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> NeedRes:
        data = data or {}
        return cls(
            decree=data.get("decree", 0),
            grain=data.get("grain", 0),
            wood=data.get("wood", 0),
            iron=data.get("iron", 0),
            stone=data.get("stone", 0),
            gold=data.get("gold", 0),
        )


@dataclass
class Condition:
    """Another facility and the level it must reach first."""

    type: int = 0
    level: int = 0


@dataclass
class FacilityLevel:
    """One upgrade level of a facility."""

    level: int = 0
    values: list[int] = field(default_factory=list)
    need: NeedRes = field(default_factory=NeedRes)
    time: int = 0


@dataclass
class Facility:
    """Configuration of a single facility type."""

    title: str = ""
    des: str = ""
    name: str = ""
    type: int = 0
    additions: list[int] = field(default_factory=list)
    conditions: list[Condition] = field(default_factory=list)
    levels: list[FacilityLevel] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Facility:
        return cls(
            title=data.get("title", ""),
            des=data.get("des", ""),
            name=data.get("name", ""),
            type=data.get("type", 0),
            additions=list(data.get("additions") or []),
            conditions=[
                Condition(type=c.get("type", 0), level=c.get("level", 0))
                for c in data.get("conditions") or []
            ],
            levels=[
                FacilityLevel(
                    level=lv.get("level", 0),
                    values=list(lv.get("values") or []),
                    need=NeedRes.from_dict(lv.get("need")),
                    time=lv.get("time", 0),
                )
                for lv in data.get("levels") or []
            ],
        )


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def load_facility(path: str | Path) -> Facility:
    """Read one facility description from a JSON file."""
    data = _read_json(Path(path))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: facility description must be a JSON object")
    return Facility.from_dict(data)


def _lookup(data: dict[str, Any], key: str, default: Any) -> Any:
    for name, value in data.items():
        if name.lower() == key:
            return value
    return default


@dataclass
class FacilityConf:
    """All facility configurations, keyed by facility type."""

    title: str = ""
    entries: list[tuple[str, int]] = field(default_factory=list)
    facilities: dict[int, Facility] = field(default_factory=dict)

    def load(self, json_dir: str | Path) -> None:
        """Load ``facility/facility.json`` and every facility file beside it."""
        fdir = Path(json_dir) / "facility"
        data = _read_json(fdir / "facility.json")
        if not isinstance(data, dict):
            raise ValueError("facility.json must be a JSON object")
        self.title = data.get("title", "")
        self.entries = [
            (_lookup(item, "name", ""), _lookup(item, "type", 0))
            for item in data.get("list") or []
        ]
        self.facilities = {}
        for path in sorted(fdir.iterdir()):
            if path.is_dir() or path.name in _SKIPPED_FILES:
                continue
            facility = load_facility(path)
            self.facilities[facility.type] = facility

    def _level(self, f_type: int, level: int) -> FacilityLevel | None:
        if level <= 0:
            return None
        facility = self.facilities.get(f_type)
        if facility is None or len(facility.levels) < level:
            return None
        return facility.levels[level - 1]

    def max_level(self, f_type: int) -> int:
        """Highest level of a facility type, 0 when unknown."""
        facility = self.facilities.get(f_type)
        return len(facility.levels) if facility else 0

    def need(self, f_type: int, level: int) -> NeedRes | None:
        """Resources needed to reach *level*, or None when there is no such level."""
        lv = self._level(f_type, level)
        return lv.need if lv else None

    def cost_time(self, f_type: int, level: int) -> int:
        """Upgrade time in seconds, two seconds shorter than the client shows."""
        lv = self._level(f_type, level)
        return lv.time - 2 if lv else 0

    def get_values(self, f_type: int, level: int) -> list[int]:
        """Addition values granted at *level*."""
        lv = self._level(f_type, level)
        return list(lv.values) if lv else []

    def get_additions(self, f_type: int) -> list[int]:
        """Addition kinds the facility type grants."""
        facility = self.facilities.get(f_type)
        return list(facility.additions) if facility else []