"""General (hero) configurations: stats, arms and level progression."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _read_json(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must be a JSON object")
    return data


@dataclass
class GeneralCfg:
    """Base stats and growth of one general."""

    name: str = ""
    cfg_id: int = 0
    force: int = 0
    strategy: int = 0
    defense: int = 0
    speed: int = 0
    destroy: int = 0
    force_grow: int = 0
    strategy_grow: int = 0
    defense_grow: int = 0
    speed_grow: int = 0
    destroy_grow: int = 0
    cost: int = 0
    probability: int = 0
    star: int = 0
    arms: list[int] = field(default_factory=list)
    camp: int = 0


_GENERAL_KEYS = {
    "name": "name", "cfg_id": "cfgId", "force": "force", "strategy": "strategy",
    "defense": "defense", "speed": "speed", "destroy": "destroy",
    "force_grow": "force_grow", "strategy_grow": "strategy_grow",
    "defense_grow": "defense_grow", "speed_grow": "speed_grow",
    "destroy_grow": "destroy_grow", "cost": "cost", "probability": "probability",
    "star": "star", "camp": "camp",
}


def _general_from_dict(data: dict[str, Any]) -> GeneralCfg:
    kwargs = {attr: data[key] for attr, key in _GENERAL_KEYS.items() if key in data}
    return GeneralCfg(arms=list(data.get("arms") or []), **kwargs)


@dataclass
class GeneralConf:
    """All generals, with their draw probabilities."""

    title: str = ""
    generals: list[GeneralCfg] = field(default_factory=list)
    by_id: dict[int, GeneralCfg] = field(default_factory=dict)
    total_probability: int = 0

    def load(self, json_dir: str | Path) -> None:
        """Load ``general/general.json`` from *json_dir*."""
        self.load_dict(_read_json(Path(json_dir) / "general" / "general.json"))

    def load_dict(self, data: dict[str, Any]) -> None:
        """Load the configuration from decoded JSON."""
        self.title = data.get("title", "")
        self.generals = [_general_from_dict(g) for g in data.get("list") or []]
        self.by_id = {g.cfg_id: g for g in self.generals}
        self.total_probability = sum(g.probability for g in self.generals)

    def cost(self, cfg_id: int) -> int:
        """Deployment cost of a general, 0 when unknown."""
        g = self.by_id.get(cfg_id)
        return g.cost if g else 0

    def draw(self) -> int:
        """Pick a general id at random, weighted by probability."""
        if self.total_probability <= 0:
            raise ValueError("no general can be drawn")
        rate = random.randrange(self.total_probability)
        cur = 0
        for g in self.generals:
            if cur <= rate < cur + g.probability:
                return g.cfg_id
            cur += g.probability
        return 0


@dataclass
class ArmCfg:
    """One arm (troop type) and its matchups."""

    id: int = 0
    name: str = ""
    condition_level: int = 0
    condition_star_level: int = 0
    change_cost_gold: int = 0
    harm_ratio: list[int] = field(default_factory=list)


@dataclass
class ArmsConf:
    """All arms, keyed by id."""

    title: str = ""
    arms: list[ArmCfg] = field(default_factory=list)
    by_id: dict[int, ArmCfg] = field(default_factory=dict)

    def load(self, json_dir: str | Path) -> None:
        """Load ``general/general_arms.json`` from *json_dir*."""
        self.load_dict(_read_json(Path(json_dir) / "general" / "general_arms.json"))

    def load_dict(self, data: dict[str, Any]) -> None:
        """Load the configuration from decoded JSON."""
        self.title = data.get("title", "")
        self.arms = []
        for a in data.get("arms") or []:
            condition = a.get("condition") or {}
            change_cost = a.get("change_cost") or {}
            self.arms.append(
                ArmCfg(
                    id=a.get("id", 0),
                    name=a.get("name", ""),
                    condition_level=condition.get("level", 0),
                    condition_star_level=condition.get("star_lv", 0),
                    change_cost_gold=change_cost.get("gold", 0),
                    harm_ratio=list(a.get("harm_ratio") or []),
                )
            )
        self.by_id = {a.id: a for a in self.arms}

    def get_arm(self, arm_id: int) -> ArmCfg | None:
        """Return the arm with *arm_id*, or None."""
        return self.by_id.get(arm_id)

    def get_harm_ratio(self, att_id: int, def_id: int) -> float:
        """Damage multiplier of the attacking arm against the defending one."""
        att = self.by_id.get(att_id)
        if att is None or def_id not in self.by_id:
            return 1.0
        return att.harm_ratio[def_id - 1] / 100.0


@dataclass
class GeneralLevel:
    """Experience needed and soldiers led at one general level."""

    level: int = 0
    exp: int = 0
    soldiers: int = 0


@dataclass
class GeneralBasic:
    """Level progression of generals."""

    title: str = ""
    levels: list[GeneralLevel] = field(default_factory=list)

    def load(self, json_dir: str | Path) -> None:
        """Load ``general/general_basic.json`` from *json_dir*."""
        self.load_dict(_read_json(Path(json_dir) / "general" / "general_basic.json"))

    def load_dict(self, data: dict[str, Any]) -> None:
        """Load the configuration from decoded JSON."""
        self.title = data.get("title", "")
        self.levels = [
            GeneralLevel(
                level=lv.get("level", 0),
                exp=lv.get("exp", 0),
                soldiers=lv.get("soldiers", 0),
            )
            for lv in data.get("levels") or []
        ]

    def get_level(self, level: int) -> GeneralLevel:
        """Return the given level; raise ValueError when it does not exist."""
        if level <= 0 or level > len(self.levels):
            raise ValueError("level error")
        return self.levels[level - 1]

    def exp_to_level(self, exp: int) -> tuple[int, int]:
        """Return the level reached with *exp* and the experience capped at the top level."""
        if not self.levels:
            raise ValueError("no levels configured")
        limit_exp = self.levels[-1].exp
        level = 0
        for lv in self.levels:
            if exp >= lv.exp and lv.level > level:
                level = lv.level
        return level, min(exp, limit_exp)