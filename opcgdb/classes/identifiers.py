"""
Release and card identifiers

A release is printed as a two letter prefix plus a two digit number
(ST07, OP12, EB01, PB01), or as a bare "P" for promotional cards.
A card identifier joins a release and a card number with a dash
(EB01-002).
"""
import dataclasses
import enum
import functools
from typing import Any, Optional, Tuple

from ..errors import (
    InvalidCardNumberError,
    InvalidReleasePrefixError,
    InvalidSubIdError,
    MalformedCardIdentifierError,
)


class ReleaseKind(enum.Enum):
    """
    Release variant, valued by its printed prefix.
    Declaration order is sort order.
    """

    STARTER = "ST"
    BOOSTER = "OP"
    EXTRA = "EB"
    PREMIUM_BOOSTER = "PB"
    PROMO = "P"

    @property
    def rank(self) -> int:
        """
        Position of this kind in the release ordering
        """
        return _RELEASE_KIND_RANKS[self]


_RELEASE_KIND_RANKS = {kind: rank for rank, kind in enumerate(ReleaseKind)}
_PREFIXES = {kind.value: kind for kind in ReleaseKind if kind is not ReleaseKind.PROMO}


def _is_unsigned(text: str) -> bool:
    return text.isascii() and text.isdigit()


@functools.total_ordering
@dataclasses.dataclass(frozen=True)
class ReleaseId:
    """
    One card release. Promo carries no number, every other kind does.
    """

    kind: ReleaseKind
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is ReleaseKind.PROMO:
            if self.number is not None:
                raise ValueError("Promo releases do not carry a number")
        elif self.number is None or not 0 <= self.number <= 99:
            raise ValueError(
                f"{self.kind.name} releases need a number in 0..99, got {self.number}"
            )

    @classmethod
    def starter(cls, number: int) -> "ReleaseId":
        """Starter deck release (STxx)"""
        return cls(ReleaseKind.STARTER, number)

    @classmethod
    def booster(cls, number: int) -> "ReleaseId":
        """Booster pack release (OPxx)"""
        return cls(ReleaseKind.BOOSTER, number)

    @classmethod
    def extra(cls, number: int) -> "ReleaseId":
        """Extra booster release (EBxx)"""
        return cls(ReleaseKind.EXTRA, number)

    @classmethod
    def premium_booster(cls, number: int) -> "ReleaseId":
        """Premium booster release (PBxx)"""
        return cls(ReleaseKind.PREMIUM_BOOSTER, number)

    @classmethod
    def promo(cls) -> "ReleaseId":
        """Promotional release (P)"""
        return cls(ReleaseKind.PROMO)

    @classmethod
    def parse(cls, text: str) -> "ReleaseId":
        """
        Parse a printed release identifier
        :param text: Release text, like "OP05" or "P"
        :return: Parsed release
        :raises InvalidSubIdError: Last two characters are not digits
        :raises InvalidReleasePrefixError: First two characters are not a known prefix
        """
        if text == ReleaseKind.PROMO.value:
            return cls.promo()

        sub_id = text[-2:]
        if len(sub_id) != 2 or not _is_unsigned(sub_id):
            raise InvalidSubIdError(text)

        prefix = text[:2]
        kind = _PREFIXES.get(prefix)
        if kind is None:
            raise InvalidReleasePrefixError(prefix)

        return cls(kind, int(sub_id))

    def format(self) -> str:
        """
        Printed form of this release
        """
        if self.kind is ReleaseKind.PROMO:
            return self.kind.value
        return f"{self.kind.value}{self.number:02}"

    def sort_key(self) -> Tuple[int, int]:
        """
        Key ordering releases by kind, then number
        """
        return self.kind.rank, self.number or 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ReleaseId):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.format()


@functools.total_ordering
@dataclasses.dataclass(frozen=True)
class CardIdentifier:
    """
    Primary key of a card: its release plus its number in that release
    """

    release: ReleaseId
    number: int

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError(f"Card numbers cannot be negative, got {self.number}")

    @classmethod
    def parse(cls, text: str) -> "CardIdentifier":
        """
        Parse a printed card identifier
        :param text: Identifier text, like "EB01-002"
        :return: Parsed identifier
        :raises MalformedCardIdentifierError: No dash separator
        :raises IdentifierParseError: Release or card number did not parse
        """
        release_text, separator, number_text = text.partition("-")
        if not separator:
            raise MalformedCardIdentifierError(text)

        release = ReleaseId.parse(release_text)
        if not _is_unsigned(number_text):
            raise InvalidCardNumberError(number_text)

        return cls(release, int(number_text))

    def format(self) -> str:
        """
        Printed form of this identifier
        """
        return f"{self.release.format()}-{self.number:03}"

    def sort_key(self) -> Tuple[int, int, int]:
        """
        Key ordering identifiers by release kind, release number, card number
        """
        return self.release.sort_key() + (self.number,)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CardIdentifier):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.format()
