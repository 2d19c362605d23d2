import pytest

from evmkit.specification import (
    BerlinSpec,
    FrontierSpec,
    LatestSpec,
    SpecId,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Frontier", SpecId.FRONTIER),
        ("Homestead", SpecId.HOMESTEAD),
        ("Spurious", SpecId.SPURIOUS_DRAGON),
        ("MuirGlacier", SpecId.MUIR_GLACIER),
        ("Berlin", SpecId.BERLIN),
        ("MergeEOF", SpecId.MERGE_EOF),
    ],
)
def test_from_name(name, expected):
    assert SpecId.from_name(name) is expected


def test_unknown_name_is_latest():
    assert SpecId.from_name("Nonexistent") is SpecId.LATEST


def test_numbers_fixed():
    assert SpecId.from_name("Berlin") == 11
    assert SpecId.from_name("Nonexistent") == 17


def test_try_from_u8():
    assert SpecId.try_from_u8(11) is SpecId.BERLIN
    assert SpecId.try_from_u8(18) is None


def test_enabled_ordering():
    assert SpecId.LONDON.enabled(SpecId.BERLIN)
    assert SpecId.BERLIN.enabled(SpecId.BERLIN)
    assert not SpecId.BYZANTIUM.enabled(SpecId.ISTANBUL)


def test_spec_classes():
    assert BerlinSpec().enabled(SpecId.ISTANBUL)
    assert not BerlinSpec().enabled(SpecId.LONDON)
    assert not FrontierSpec().enabled(SpecId.HOMESTEAD)
    assert LatestSpec().enabled(SpecId.MERGE_EOF)