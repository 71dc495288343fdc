import pytest

from conftest import make_set
from exceptions.exceptions import CountMismatchError, EmptySetError
from subtitle_muxing.domain.services import PairingService


def test_pairs_sorted_sets_by_position():
    primary = make_set("mkv", ["ep03.mkv", "ep01.mkv", "ep02.mkv"])
    secondary = make_set("srt", ["ep02.srt", "ep03.srt", "ep01.srt"])

    pairs = PairingService().validate(primary, secondary)

    assert [(p.primary.name, p.secondary.name) for p in pairs] == [
        ("ep01.mkv", "ep01.srt"),
        ("ep02.mkv", "ep02.srt"),
        ("ep03.mkv", "ep03.srt"),
    ]


def test_pairing_is_positional_not_by_stem():
    primary = make_set("mkv", ["a.mkv", "b.mkv"])
    secondary = make_set("srt", ["x.srt", "y.srt"])

    pairs = PairingService().validate(primary, secondary)

    assert [(p.primary.name, p.secondary.name) for p in pairs] == [
        ("a.mkv", "x.srt"),
        ("b.mkv", "y.srt"),
    ]


def test_sort_is_bytewise():
    primary = make_set("mkv", ["a.mkv", "B.mkv", "_.mkv"])
    secondary = make_set("srt", ["1.srt", "2.srt", "3.srt"])

    pairs = PairingService().validate(primary, secondary)

    assert [p.primary.name for p in pairs] == ["B.mkv", "_.mkv", "a.mkv"]


def test_count_mismatch_raises():
    primary = make_set("mkv", ["a.mkv", "b.mkv"])
    secondary = make_set("srt", ["a.srt"])

    with pytest.raises(CountMismatchError) as excinfo:
        PairingService().validate(primary, secondary)
    assert excinfo.value.code == "COUNT_MISMATCH"


@pytest.mark.parametrize("primary_names,secondary_names", [
    ([], ["a.srt"]),
    (["a.mkv"], []),
    ([], []),
])
def test_empty_set_raises(primary_names, secondary_names):
    with pytest.raises(EmptySetError):
        PairingService().validate(make_set("mkv", primary_names), make_set("srt", secondary_names))


def test_scan_order_is_preserved_until_sorted():
    file_set = make_set("mkv", ["b.mkv", "a.mkv"])
    assert [e.name for e in file_set.entries] == ["b.mkv", "a.mkv"]
    assert [e.name for e in file_set.sorted()] == ["a.mkv", "b.mkv"]
