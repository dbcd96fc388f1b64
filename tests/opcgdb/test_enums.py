"""Tests for opcgdb.classes.enums"""

import pytest

from opcgdb.classes.enums import Attribute, CardKind, Color, Rarity, Subtype
from opcgdb.consts.subtypes import SUBTYPE_TABLE
from opcgdb.errors import (
    UnknownAttributeError,
    UnknownCardKindError,
    UnknownColorError,
    UnknownRarityError,
    UnknownSubtypeError,
    UnknownTokenError,
)

ENUMERATIONS = [Rarity, CardKind, Color, Attribute, Subtype]


@pytest.mark.parametrize("enumeration", ENUMERATIONS, ids=lambda e: e.__name__)
def test_format_is_left_inverse_of_parse(enumeration) -> None:
    for member in enumeration:
        assert enumeration.parse(member.format()) is member


@pytest.mark.parametrize(
    "enumeration, token, error",
    [
        pytest.param(Rarity, "UR", UnknownRarityError, id="rarity"),
        pytest.param(CardKind, "DON", UnknownCardKindError, id="card kind"),
        pytest.param(Color, "red", UnknownColorError, id="color is case sensitive"),
        pytest.param(Attribute, "-", UnknownAttributeError, id="attribute"),
        pytest.param(Subtype, "Straw Hat", UnknownSubtypeError, id="subtype"),
    ],
)
def test_unknown_token(enumeration, token: str, error: type) -> None:
    with pytest.raises(error) as excinfo:
        enumeration.parse(token)
    assert isinstance(excinfo.value, UnknownTokenError)
    assert excinfo.value.token == token
    assert token in str(excinfo.value)


def test_rarity_codes() -> None:
    assert Rarity.parse("SEC") is Rarity.SECRET_RARE
    assert Rarity.parse("SP CARD") is Rarity.SPECIAL_CARD
    assert str(Rarity.TREASURE_RARE) == "TR"


def test_card_kind_attributes() -> None:
    assert CardKind.LEADER.has_attributes
    assert CardKind.CHARACTER.has_attributes
    assert not CardKind.STAGE.has_attributes
    assert not CardKind.EVENT.has_attributes


def test_subtype_canonical_names() -> None:
    assert Subtype.parse("Straw Hat Crew") is Subtype.STRAW_HAT_CREW
    assert Subtype.STRAW_HAT_CREW.format() == "Straw Hat Crew"
    assert Subtype.parse("FILM") is Subtype.FILM


@pytest.mark.parametrize(
    "alias, canonical",
    [
        pytest.param("音楽", "Music", id="japanese music"),
        pytest.param("Smile", "SMILE", id="smile casing"),
    ],
)
def test_subtype_alias(alias: str, canonical: str) -> None:
    subtype = Subtype.parse(alias)
    assert subtype is Subtype.parse(canonical)
    assert subtype.format() == canonical


def test_subtype_table_has_one_member_per_row() -> None:
    assert len(Subtype) == len(SUBTYPE_TABLE)
    assert len({canonical for _, canonical, _ in SUBTYPE_TABLE}) == len(SUBTYPE_TABLE)


def test_card_kind_counter() -> None:
    assert CardKind.CHARACTER.has_counter
    assert not CardKind.LEADER.has_counter
    assert not CardKind.STAGE.has_counter
    assert not CardKind.EVENT.has_counter
