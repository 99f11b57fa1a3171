"""Basic game rules: conscription, generals, roles, cities, unions and buildings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, TypeVar

ARMY_G_CNT = 3
"""Number of generals in one army."""

_T = TypeVar("_T")


def _section(cls: type[_T], data: Any) -> _T:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{cls.__name__}: section must be a JSON object")
    kwargs = {}
    for f in fields(cls):
        key = f.metadata.get("json", f.name)
        if key in data:
            kwargs[f.name] = data[key]
    return cls(**kwargs)


@dataclass
class ConscriptConf:
    """Cost of conscripting one soldier."""

    des: str = ""
    cost_wood: int = 0
    cost_iron: int = 0
    cost_stone: int = 0
    cost_grain: int = 0
    cost_gold: int = 0
    cost_time: int = 0


@dataclass
class GeneralRules:
    """Rules that apply to all generals."""

    des: str = ""
    physical_power_limit: int = 0
    cost_physical_power: int = 0
    recovery_physical_power: int = 0
    reclamation_time: int = 0
    reclamation_cost: int = 0
    draw_general_cost: int = 0
    pr_point: int = 0
    limit: int = 0


@dataclass
class RoleConf:
    """Starting resources, yields and limits of a new role."""

    des: str = ""
    wood: int = 0
    iron: int = 0
    stone: int = 0
    grain: int = 0
    gold: int = 0
    decree: int = 0
    wood_yield: int = 0
    iron_yield: int = 0
    stone_yield: int = 0
    grain_yield: int = 0
    gold_yield: int = 0
    depot_capacity: int = 0
    build_limit: int = 0
    recovery_time: int = 0
    decree_limit: int = 0
    collect_times_limit: int = 0
    collect_interval: int = 0
    pos_tag_limit: int = 0


@dataclass
class CityConf:
    """City durability and recovery settings."""

    des: str = ""
    cost: int = 0
    durable: int = 0
    recovery_time: int = 0
    transform_rate: int = 0


@dataclass
class UnionConf:
    """Alliance settings."""

    des: str = ""
    member_limit: int = 0


@dataclass
class BuildConf:
    """Settings for buildings on the map."""

    des: str = ""
    war_free: int = 0
    give_up_time: int = field(default=0, metadata={"json": "giveUp_time"})
    fortress_limit: int = 0


@dataclass
class BasicConf:
    """The whole basic configuration."""

    conscript: ConscriptConf = field(default_factory=ConscriptConf)
    general: GeneralRules = field(default_factory=GeneralRules)
    role: RoleConf = field(default_factory=RoleConf)
    city: CityConf = field(default_factory=CityConf)
    union: UnionConf = field(default_factory=UnionConf)
    build: BuildConf = field(default_factory=BuildConf)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BasicConf:
        if not isinstance(data, dict):
            raise ValueError("basic configuration must be a JSON object")
        return cls(
            conscript=_section(ConscriptConf, data.get("conscript")),
            general=_section(GeneralRules, data.get("general")),
            role=_section(RoleConf, data.get("role")),
            city=_section(CityConf, data.get("city")),
            union=_section(UnionConf, data.get("union")),
            build=_section(BuildConf, data.get("build")),
        )


def load_basic(json_dir: str | Path) -> BasicConf:
    """Read ``basic.json`` from *json_dir*."""
    with open(Path(json_dir) / "basic.json", encoding="utf-8") as fh:
        return BasicConf.from_dict(json.load(fh))