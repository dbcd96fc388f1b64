"""
Closed card enumerations and their text codecs
"""
import enum
from typing import Dict, Mapping, Type, TypeVar

from ..consts.subtypes import SUBTYPE_TABLE
from ..errors import (
    UnknownAttributeError,
    UnknownCardKindError,
    UnknownColorError,
    UnknownRarityError,
    UnknownSubtypeError,
    UnknownTokenError,
)

CodecEnumT = TypeVar("CodecEnumT", bound="CodecEnum")

_LOOKUP_TABLES: Dict[type, Dict[str, "CodecEnum"]] = {}


class CodecEnum(enum.Enum):
    """
    Enumeration whose value is its canonical text form
    """

    @classmethod
    def _unknown(cls, text: str) -> UnknownTokenError:
        return UnknownTokenError(text)

    @classmethod
    def _aliases(cls) -> Mapping[str, str]:
        """
        Alternate spellings, alias text => canonical text
        """
        return {}

    @classmethod
    def _lookup_table(cls: Type[CodecEnumT]) -> Dict[str, CodecEnumT]:
        table = _LOOKUP_TABLES.get(cls)
        if table is None:
            table = {member.value: member for member in cls}
            for alias, canonical in cls._aliases().items():
                table[alias] = table[canonical]
            _LOOKUP_TABLES[cls] = table
        return table  # type: ignore

    @classmethod
    def parse(cls: Type[CodecEnumT], text: str) -> CodecEnumT:
        """
        Convert text into its enumeration member
        :param text: Exact text as printed on the card list
        :return: Matching member
        :raises UnknownTokenError: Text matched nothing
        """
        member = cls._lookup_table().get(text)
        if member is None:
            raise cls._unknown(text)
        return member

    def format(self) -> str:
        """
        Canonical text form of this member
        """
        return str(self.value)

    def __str__(self) -> str:
        return self.format()


class Rarity(CodecEnum):
    """Card rarity, valued by its short code"""

    LEADER = "L"
    COMMON = "C"
    UNCOMMON = "UC"
    RARE = "R"
    SUPER_RARE = "SR"
    SECRET_RARE = "SEC"
    SPECIAL_CARD = "SP CARD"
    TREASURE_RARE = "TR"
    PROMO = "P"

    @classmethod
    def _unknown(cls, text: str) -> UnknownTokenError:
        return UnknownRarityError(text)


class CardKind(CodecEnum):
    """Card category"""

    LEADER = "LEADER"
    CHARACTER = "CHARACTER"
    STAGE = "STAGE"
    EVENT = "EVENT"

    @classmethod
    def _unknown(cls, text: str) -> UnknownTokenError:
        return UnknownCardKindError(text)

    @property
    def has_attributes(self) -> bool:
        """Only Leaders and Characters print attributes"""
        return self in (CardKind.LEADER, CardKind.CHARACTER)

    @property
    def has_counter(self) -> bool:
        """Only Characters print a counter"""
        return self is CardKind.CHARACTER


class Color(CodecEnum):
    """Card color"""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    PURPLE = "Purple"
    BLACK = "Black"
    YELLOW = "Yellow"

    @classmethod
    def _unknown(cls, text: str) -> UnknownTokenError:
        return UnknownColorError(text)


class Attribute(CodecEnum):
    """Battle attribute of Leaders and Characters"""

    RANGED = "Ranged"
    SLASH = "Slash"
    SPECIAL = "Special"
    STRIKE = "Strike"
    WISDOM = "Wisdom"

    @classmethod
    def _unknown(cls, text: str) -> UnknownTokenError:
        return UnknownAttributeError(text)


class _SubtypeCodec(CodecEnum):
    @classmethod
    def _unknown(cls, text: str) -> UnknownTokenError:
        return UnknownSubtypeError(text)

    @classmethod
    def _aliases(cls) -> Mapping[str, str]:
        return SUBTYPE_ALIASES


SUBTYPE_ALIASES: Dict[str, str] = {
    alias: canonical for _, canonical, alias in SUBTYPE_TABLE if alias
}

# Built from the data table so every row gets the same codec
Subtype = _SubtypeCodec(  # type: ignore
    "Subtype",
    [(name, canonical) for name, canonical, _ in SUBTYPE_TABLE],
    module=__name__,
)
