"""
OPCGDB Singular Card Record
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from ..errors import CardKindMismatchError
from .enums import Attribute, CardKind, Color, Rarity, Subtype
from .identifiers import CardIdentifier, ReleaseId


class CardRecord(BaseModel):
    """
    One card as published on a card list page.

    Records are frozen once built; corrections go through
    opcgdb.classes.card_metadata.apply_metadata, which returns a new record.
    Field aliases are the keys of the card_db.jsonl output.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    identifier: CardIdentifier = Field(alias="id")
    rarity: Rarity
    kind: CardKind = Field(alias="ty")
    name: str
    image_url: str
    image_name: str = Field(min_length=1)
    cost_life: int = Field(ge=0)
    power: Optional[int] = Field(default=None, ge=0)
    counter: Optional[int] = Field(default=None, ge=0)
    colors: Tuple[Color, ...] = Field(alias="color", min_length=1, max_length=2)
    effect: Optional[str] = Field(default=None, min_length=1)
    trigger: Optional[str] = Field(default=None, min_length=1)
    subtypes: Tuple[Subtype, ...] = Field(alias="subtype", min_length=1)  # type: ignore
    attributes: Tuple[Attribute, ...] = Field(alias="attribute", max_length=2)

    # Release of the page the card was listed on; not part of the output
    release: Optional[ReleaseId] = Field(default=None, exclude=True)

    @field_validator("identifier", mode="before")
    @classmethod
    def _parse_identifier(cls, value: Any) -> Any:
        if isinstance(value, str):
            return CardIdentifier.parse(value)
        return value

    @field_validator("rarity", mode="before")
    @classmethod
    def _parse_rarity(cls, value: Any) -> Any:
        return Rarity.parse(value) if isinstance(value, str) else value

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> Any:
        return CardKind.parse(value) if isinstance(value, str) else value

    @field_validator("colors", mode="before")
    @classmethod
    def _parse_colors(cls, value: Any) -> Any:
        return _parse_each(Color, value)

    @field_validator("subtypes", mode="before")
    @classmethod
    def _parse_subtypes(cls, value: Any) -> Any:
        return _parse_each(Subtype, value)

    @field_validator("attributes", mode="before")
    @classmethod
    def _parse_attributes(cls, value: Any) -> Any:
        return _parse_each(Attribute, value)

    @model_validator(mode="after")
    def _check_kind_stats(self) -> "CardRecord":
        if self.attributes and not self.kind.has_attributes:
            raise CardKindMismatchError(self.kind.format(), "an attribute")
        if self.counter is not None and not self.kind.has_counter:
            raise CardKindMismatchError(self.kind.format(), "a counter")
        return self

    @field_serializer("identifier")
    def _format_identifier(self, identifier: CardIdentifier) -> str:
        return identifier.format()

    @field_serializer("rarity", "kind")
    def _format_token(self, token: Any) -> str:
        return str(token.format())

    @field_serializer("colors", "subtypes", "attributes")
    def _format_tokens(self, tokens: Tuple[Any, ...]) -> list:
        return [token.format() for token in tokens]

    def to_json(self) -> Dict[str, Any]:
        """
        Support json.dump()
        :return: JSON serialized object, keyed by output field names
        """
        return self.model_dump(by_alias=True, mode="json")

    def to_json_line(self) -> str:
        """
        Compact single line JSON form used in card_db.jsonl
        """
        return self.model_dump_json(by_alias=True)

    def __lt__(self, other: Any) -> bool:
        """
        Sort records by their identifier
        """
        if not isinstance(other, CardRecord):
            return NotImplemented
        return bool(self.identifier < other.identifier)


def _parse_each(codec: Any, value: Any) -> Any:
    if isinstance(value, str):
        raise ValueError(f"Expected a list of {codec.__name__} values, got '{value}'")
    if isinstance(value, (list, tuple)):
        return tuple(codec.parse(item) if isinstance(item, str) else item for item in value)
    return value
