import json
import logging

import pytest

from slgkit.skill import Outline, SkillConf, SkillLevel, SkillRegistry, TriggerType

OUTLINE = {
    "trigger_type": {"des": "triggers", "list": [{"type": 1, "des": "active"}]},
    "effect_type": {"des": "effects", "list": [{"type": 1, "des": "hurt", "isRate": True}]},
    "target_type": {"des": "targets", "list": [{"type": 1, "des": "self"}]},
}

FIRE = {
    "cfgId": 100,
    "name": "fire",
    "trigger": 1,
    "target": 6,
    "des": "burns",
    "limit": 3,
    "duration": 0,
    "arms": [1, 2],
    "include_effect": [1],
    "levels": [{"probability": 50, "effect_value": [10], "effect_round": [1]}],
}

SHIELD = {"cfgId": 200, "name": "shield", "trigger": 2, "target": 1}


@pytest.fixture
def json_dir(tmp_path):
    skill_dir = tmp_path / "skill"
    (skill_dir / "active").mkdir(parents=True)
    (skill_dir / "passive" / "inner").mkdir(parents=True)
    (skill_dir / "skill_outline.json").write_text(json.dumps(OUTLINE))
    (skill_dir / "active" / "100.json").write_text(json.dumps(FIRE))
    (skill_dir / "active" / "bad.json").write_text("{not json")
    (skill_dir / "passive" / "200.json").write_text(json.dumps(SHIELD))
    (skill_dir / "passive" / "inner" / "300.json").write_text(json.dumps({"cfgId": 300}))
    return tmp_path


def test_load_reads_skills_from_subdirectories(json_dir):
    registry = SkillRegistry()
    registry.load(json_dir)
    assert sorted(s.cfg_id for s in registry.skills) == [100, 200]
    assert registry.get_cfg(300) is None


def test_get_cfg(json_dir):
    registry = SkillRegistry()
    registry.load(json_dir)
    fire = registry.get_cfg(100)
    assert fire.name == "fire"
    assert fire.arms == [1, 2]
    assert fire.levels == [SkillLevel(probability=50, effect_value=[10], effect_round=[1])]
    assert registry.get_cfg(999) is None


def test_bad_file_is_logged_and_skipped(json_dir, caplog):
    registry = SkillRegistry()
    with caplog.at_level(logging.WARNING):
        registry.load(json_dir)
    assert "bad.json" in caplog.text
    assert len(registry.skills) == 2


def test_outline_loaded(json_dir):
    registry = SkillRegistry()
    registry.load(json_dir)
    assert registry.outline.trigger_des == "triggers"
    assert registry.outline.triggers == {1: "active"}
    assert registry.outline.effects == {1: ("hurt", True)}
    assert registry.outline.targets == {1: "self"}


def test_outline_from_empty_dict():
    outline = Outline.from_dict({})
    assert outline.triggers == {}
    assert outline.effect_des == ""


def test_missing_outline_raises(tmp_path):
    (tmp_path / "skill").mkdir()
    with pytest.raises(FileNotFoundError):
        SkillRegistry().load(tmp_path)


@pytest.mark.parametrize(
    "trigger, before, after",
    [
        (TriggerType.POSITIVE, True, False),
        (TriggerType.PASSIVE, False, True),
        (TriggerType.ADD_ATTACK, False, True),
        (TriggerType.COMMAND, True, False),
        (0, False, False),
    ],
)
def test_hit_timing(trigger, before, after):
    conf = SkillConf.from_dict({"cfgId": 1, "trigger": int(trigger)})
    assert conf.is_hit_before() is before
    assert conf.is_hit_after() is after


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        SkillConf.from_dict([1, 2])