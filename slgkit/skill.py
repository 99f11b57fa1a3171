"""Skill configurations and the skill outline."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class TriggerType(enum.IntEnum):
    POSITIVE = 1
    PASSIVE = 2
    ADD_ATTACK = 3
    COMMAND = 4


class TargetType(enum.IntEnum):
    MY_SELF = 1
    OUR_SINGLE = 2
    OUR_MOST_TWO = 3
    OUR_MOST_THREE = 4
    OUR_ALL = 5
    ENEMY_SINGLE = 6
    ENEMY_MOST_TWO = 7
    ENEMY_MOST_THREE = 8
    ENEMY_ALL = 9


class EffectType(enum.IntEnum):
    HURT_RATE = 1
    FORCE = 2
    DEFENSE = 3
    STRATEGY = 4
    SPEED = 5
    DESTROY = 6


@dataclass
class SkillLevel:
    """Trigger probability and effects at one skill level."""

    probability: int = 0
    effect_value: list[int] = field(default_factory=list)
    effect_round: list[int] = field(default_factory=list)


@dataclass
class SkillConf:
    """Configuration of one skill."""

    cfg_id: int = 0
    name: str = ""
    trigger: int = 0
    target: int = 0
    des: str = ""
    limit: int = 0
    duration: int = 0
    arms: list[int] = field(default_factory=list)
    include_effect: list[int] = field(default_factory=list)
    levels: list[SkillLevel] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SkillConf:
        if not isinstance(data, dict):
            raise ValueError("skill configuration must be a JSON object")
        return cls(
            cfg_id=data.get("cfgId", 0),
            name=data.get("name", ""),
            trigger=data.get("trigger", 0),
            target=data.get("target", 0),
            des=data.get("des", ""),
            limit=data.get("limit", 0),
            duration=data.get("duration", 0),
            arms=list(data.get("arms") or []),
            include_effect=list(data.get("include_effect") or []),
            levels=[
                SkillLevel(
                    probability=lv.get("probability", 0),
                    effect_value=list(lv.get("effect_value") or []),
                    effect_round=list(lv.get("effect_round") or []),
                )
                for lv in data.get("levels") or []
            ],
        )

    def is_hit_before(self) -> bool:
        """True for skills that fire before the attack (active or command)."""
        return self.trigger in (TriggerType.POSITIVE, TriggerType.COMMAND)

    def is_hit_after(self) -> bool:
        """True for skills that fire after the attack (passive or pursuit)."""
        return self.trigger in (TriggerType.PASSIVE, TriggerType.ADD_ATTACK)


@dataclass
class Outline:
    """Descriptions of trigger, effect and target types."""

    trigger_des: str = ""
    triggers: dict[int, str] = field(default_factory=dict)
    effect_des: str = ""
    effects: dict[int, tuple[str, bool]] = field(default_factory=dict)
    target_des: str = ""
    targets: dict[int, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Outline:
        trigger = data.get("trigger_type") or {}
        effect = data.get("effect_type") or {}
        target = data.get("target_type") or {}
        return cls(
            trigger_des=trigger.get("des", ""),
            triggers={t.get("type", 0): t.get("des", "") for t in trigger.get("list") or []},
            effect_des=effect.get("des", ""),
            effects={
                e.get("type", 0): (e.get("des", ""), bool(e.get("isRate", False)))
                for e in effect.get("list") or []
            },
            target_des=target.get("des", ""),
            targets={t.get("type", 0): t.get("des", "") for t in target.get("list") or []},
        )


@dataclass
class SkillRegistry:
    """All skill configurations found under the ``skill`` directory."""

    skills: list[SkillConf] = field(default_factory=list)
    outline: Outline = field(default_factory=Outline)
    _by_id: dict[int, SkillConf] = field(default_factory=dict, repr=False)

    def load(self, json_dir: str | Path) -> None:
        """Load the outline and every skill file in the subdirectories of ``skill``."""
        self.skills = []
        self._by_id = {}
        skill_dir = Path(json_dir) / "skill"
        with open(skill_dir / "skill_outline.json", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError("skill_outline.json must be a JSON object")
        self.outline = Outline.from_dict(data)

        for sub in sorted(skill_dir.iterdir()):
            if sub.is_dir():
                self._read_skills(sub)

    def _read_skills(self, directory: Path) -> None:
        for path in sorted(directory.iterdir()):
            if path.is_dir():
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except OSError:
                continue
            try:
                conf = SkillConf.from_dict(json.loads(text))
            except (ValueError, TypeError, AttributeError) as exc:
                logger.warning("cannot read skill file %s: %s", path, exc)
                continue
            self.skills.append(conf)
            self._by_id[conf.cfg_id] = conf

    def get_cfg(self, cfg_id: int) -> SkillConf | None:
        """Return the skill with *cfg_id*, or None."""
        return self._by_id.get(cfg_id)