"""Neutral (NPC) army configurations by tile level."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class ArmyCfg:
    """Generals of an NPC army and their levels."""

    lvs: list[int] = field(default_factory=list)
    cfg_ids: list[int] = field(default_factory=list)


@dataclass
class NpcArmy:
    """NPC armies guarding tiles of one level."""

    des: str = ""
    soldiers: int = 0
    army: list[ArmyCfg] = field(default_factory=list)


@dataclass
class NpcConf:
    """NPC armies for every tile level."""

    des: str = ""
    armys: list[NpcArmy] = field(default_factory=list)

    def load(self, json_dir: str | Path) -> None:
        """Load ``npc/npc_army.json`` from *json_dir*."""
        with open(Path(json_dir) / "npc" / "npc_army.json", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError("npc_army.json must be a JSON object")
        self.load_dict(data)

    def load_dict(self, data: dict[str, Any]) -> None:
        """Load the configuration from decoded JSON."""
        self.des = data.get("des", "")
        self.armys = [
            NpcArmy(
                des=a.get("des", ""),
                soldiers=a.get("soldiers", 0),
                army=[
                    ArmyCfg(lvs=list(c.get("lvs") or []), cfg_ids=list(c.get("cfgIds") or []))
                    for c in a.get("army") or []
                ],
            )
            for a in data.get("armys") or []
        ]

    def _level(self, level: int) -> NpcArmy | None:
        if level <= 0 or level > len(self.armys):
            return None
        return self.armys[level - 1]

    def npc_soldier(self, level: int) -> int:
        """Soldiers per general at *level*, 0 when there is no such level."""
        armies = self._level(level)
        return armies.soldiers if armies else 0

    def random_one(self, level: int) -> ArmyCfg | None:
        """Pick one army of *level* at random, or None when there is no such level."""
        armies = self._level(level)
        if armies is None:
            return None
        return random.choice(armies.army)