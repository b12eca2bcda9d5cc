import pytest

from ctrlz.ids import Id

SHA = "3b18e512dba79e4c8300dd08aeb37f8e728b8dad"
OTHER = "ffffffffffffffffffffffffffffffffffffffff"


def test_str_is_full_hex():
    assert str(Id(SHA)) == SHA


def test_short_is_seven_characters_prefix():
    short = Id(SHA).short()
    assert len(short) == 7
    assert SHA.startswith(short)


def test_upper_case_is_normalised():
    assert Id(SHA.upper()) == Id(SHA)
    assert Id(SHA.upper()).hex == SHA


def test_surrounding_whitespace_is_stripped():
    assert Id(SHA + "\n") == Id(SHA)


def test_hashable_and_equal_ids_collapse():
    assert len({Id(SHA), Id(SHA.upper()), Id(OTHER)}) == 2


def test_ordering_follows_hex():
    assert sorted([Id(OTHER), Id(SHA)]) == [Id(SHA), Id(OTHER)]


def test_sha256_length_is_accepted():
    value = "a" * 64
    assert Id(value).hex == value


@pytest.mark.parametrize("value", ["", "abc", SHA[:-1], "g" * 40, SHA + "0"])
def test_invalid_identifiers_are_rejected(value):
    with pytest.raises(ValueError):
        Id(value)


def test_ids_are_immutable():
    ident = Id(SHA)
    with pytest.raises(AttributeError):
        ident.hex = OTHER
    assert ident.hex == SHA
    assert str(ident) == SHA