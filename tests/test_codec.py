import pytest

from slgkit.codec import LETTERS, marshal, rand_seq, unmarshal


def test_marshal_is_compact_with_sorted_keys():
    assert marshal({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'


def test_marshal_escapes_html_characters():
    assert marshal("<&>") == b'"\\u003c\\u0026\\u003e"'


@pytest.mark.parametrize(
    "value",
    [{"name": "城", "level": 3, "ok": True, "none": None}, [1, 2.5, "x<y"], "plain", 0],
)
def test_round_trip(value):
    assert unmarshal(marshal(value)) == value


def test_unmarshal_accepts_str():
    assert unmarshal('{"id": 7}') == {"id": 7}


@pytest.mark.parametrize("bad", [b"{bad", b"NaN", b"[1] 2"])
def test_unmarshal_rejects_invalid(bad):
    with pytest.raises(ValueError):
        unmarshal(bad)


def test_marshal_rejects_nan():
    with pytest.raises(ValueError):
        marshal(float("nan"))


def test_rand_seq_length_and_alphabet():
    seq = rand_seq(50)
    assert len(seq) == 50
    assert set(seq) <= set(LETTERS)


def test_rand_seq_empty_and_negative():
    assert rand_seq(0) == ""
    with pytest.raises(ValueError):
        rand_seq(-1)