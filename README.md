# slgkit

Building blocks for a strategy game server: loaders for the static game
configuration stored as JSON files, encrypted session tokens, and a few
small helpers for hashing, compression and message encoding.

## Install

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

### `slgkit.crypto`

- `aes_cbc_encrypt(src, key, iv, padding)` encrypts bytes with AES-CBC and
  returns the ciphertext as lowercase hex bytes.
- `aes_cbc_decrypt(src, key, iv, padding)` takes that hex (bytes or str),
  decrypts it and strips the padding.
- `Padding` selects `PKCS5`, `PKCS7` or `ZEROS` padding. With `ZEROS`,
  trailing zero bytes are stripped on decryption.
- The key must be 16, 24 or 32 bytes and the IV 16 bytes; otherwise
  `ValueError` is raised.
- `md5(text)` returns the hex MD5 digest of a string;
  `password(pwd, pwd_code)` is `md5(pwd + pwd_code)`.
- `gzip_bytes(data)` compresses at level 9; `gunzip_bytes(data)`
  decompresses and raises `ValueError` on empty or invalid input.

### `slgkit.mathutil`

`min_int`, `max_int` and `abs_int`.

### `slgkit.codec`

- `marshal(value)` encodes a value as compact UTF-8 JSON with sorted keys.
  `<`, `>`, `&`, U+2028 and U+2029 are written as `\u` escapes, and NaN or
  infinity is refused.
- `unmarshal(data)` decodes JSON and raises `ValueError` on malformed input,
  including `NaN` and `Infinity`.
- `rand_seq(n)` returns `n` random characters from `0-9a-zA-Z`.

### `slgkit.session`

A `Session` holds a user `id` and the time `mtime` it was issued.
`Session.encode()` (also `str(session)`) produces a token: the text
`id|YYYY-MM-DD HH:MM:SS`, AES-CBC encrypted with a fixed built-in key and
zero padding, hex-encoded and then base64-encoded. `parse_session(token)`
reads it back and returns a `Session` whose `mtime` is in UTC; bad tokens
raise `SessionError`, a subclass of `ValueError`. `Session.is_valid()` is
true while less than 30 days have passed since `mtime`.

Because the key is fixed, tokens are obscured, not secret.

### Configuration loaders

Every loader takes the directory that holds the JSON data. Missing files
raise `OSError`, and files that are not JSON objects raise `ValueError`.

- `slgkit.basic`: `load_basic(json_dir)` reads `basic.json` into a
  `BasicConf` with the sections `conscript`, `general`, `role`, `city`,
  `union` and `build`. `BasicConf.from_dict(data)` does the same from
  already decoded JSON. `ARMY_G_CNT` is the number of generals in an army
  (3).
- `slgkit.facility`: `FacilityConf.load(json_dir)` reads
  `facility/facility.json` and every other file in `facility/` except
  `facility_addition.json`, keyed by facility type. It offers:
  - `max_level(f_type)`
  - `need(f_type, level)`, which returns a `NeedRes` or `None`
  - `cost_time(f_type, level)`, which is two seconds shorter than the
    configured time
  - `get_values(f_type, level)`
  - `get_additions(f_type)`

  `load_facility(path)` reads a single facility file. `Addition` and
  `FacilityKind` name the addition and facility type numbers.
- `slgkit.map_build`:
  - `MapBuildConf` loads `map_build.json`. `build_config(cfg_type, level)`
    returns a `MapBuildCfg` or `None`.
  - `MapBuildCustomConf` loads `map_build_custom.json`.
    `build_config(cfg_type, level)` returns a `BCLevelCfg` or `None`, and
    `get_hold_army_cnt(cfg_type, level)` gives the number of armies a
    structure holds.

  Both also accept decoded JSON through `load_dict(data)`.
- `slgkit.general`:
  - `GeneralConf` loads `general/general.json`. `cost(cfg_id)` gives a
    general's cost, and `draw()` picks a general id at random, weighted by
    probability. `draw()` raises `ValueError` if no general has a
    probability.
  - `ArmsConf` loads `general/general_arms.json`. `get_arm(arm_id)` returns
    an `ArmCfg` or `None`. `get_harm_ratio(att_id, def_id)` returns the
    damage multiplier, or 1.0 when either arm is unknown.
  - `GeneralBasic` loads `general/general_basic.json`. `get_level(level)`
    returns a `GeneralLevel` or raises `ValueError`.
    `exp_to_level(exp)` returns the reached level and the experience capped
    at the top level.
- `slgkit.npc`: `NpcConf` loads `npc/npc_army.json`. `npc_soldier(level)`
  gives the soldier count, and `random_one(level)` picks an `ArmyCfg` at
  random, or returns `None` for an unknown level.
- `slgkit.skill`: `SkillRegistry.load(json_dir)` reads
  `skill/skill_outline.json` into an `Outline`. It then reads every file in
  the subdirectories of `skill/` as a `SkillConf`; unreadable skill files
  are logged and skipped. `get_cfg(cfg_id)` returns a `SkillConf` or
  `None`. `SkillConf.is_hit_before()` and `is_hit_after()` classify skills
  by `TriggerType`. `TargetType` and `EffectType` name the other skill
  enumerations.

## Example

```python
from datetime import datetime, timezone

from slgkit.facility import FacilityConf
from slgkit.session import Session, parse_session

token = Session(id=42, mtime=datetime.now(timezone.utc)).encode()
session = parse_session(token)
assert session.id == 42 and session.is_valid()

facilities = FacilityConf()
facilities.load("data/conf")
print(facilities.max_level(0))
print(facilities.need(0, 1))
```

## What this package does not do

It is a library only:

- It has no command to run.
- It has no game server, network protocol or connection handling.
- It has no database or storage of player state.
- It does not read a settings file to find the data directory; pass the
  directory to each loader yourself.