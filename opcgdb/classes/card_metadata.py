"""
Manual corrections to card records

CardMetadata is the editable subset of a record, in plain text form,
as exchanged with the correction form. Applying it never mutates the
record it targets; a new, fully validated record is returned and can
be written back out with the same codec.
"""
from typing import List, Optional, Sequence

from pydantic import BaseModel

from .card_record import CardRecord
from .identifiers import CardIdentifier


class CardMetadata(BaseModel):
    """
    Editable fields of one card
    """

    id: str
    name: str
    ty: str
    subtypes: List[str]
    colors: List[str]
    attributes: List[str]
    cost_life: int
    power: Optional[int] = None
    counter: Optional[int] = None
    effect: Optional[str] = None
    trigger: Optional[str] = None


def metadata_from_record(record: CardRecord) -> CardMetadata:
    """
    Editable form of a record
    """
    return CardMetadata(
        id=record.identifier.format(),
        name=record.name,
        ty=record.kind.format(),
        subtypes=[subtype.format() for subtype in record.subtypes],
        colors=[color.format() for color in record.colors],
        attributes=[attribute.format() for attribute in record.attributes],
        cost_life=record.cost_life,
        power=record.power,
        counter=record.counter,
        effect=record.effect,
        trigger=record.trigger,
    )


def apply_metadata(record: CardRecord, metadata: CardMetadata) -> CardRecord:
    """
    Apply corrected fields to a record.
    Identifier, name and kind are not editable through metadata.
    :param record: Record being corrected
    :param metadata: Corrected values
    :return: New validated record
    :raises ValueError: Metadata targets another card, or a value does not validate
    """
    if CardIdentifier.parse(metadata.id) != record.identifier:
        raise ValueError(
            f"Metadata for {metadata.id} cannot be applied to {record.identifier}"
        )

    fields = record.to_json()
    fields.update(
        {
            "subtype": metadata.subtypes,
            "color": metadata.colors,
            "attribute": metadata.attributes,
            "cost_life": metadata.cost_life,
            "power": metadata.power,
            "counter": metadata.counter,
            "effect": metadata.effect or None,
            "trigger": metadata.trigger or None,
        }
    )
    return CardRecord.model_validate({**fields, "release": record.release})


def find_record(
    records: Sequence[CardRecord], identifier: CardIdentifier
) -> Optional[int]:
    """
    Position of the record with the given identifier
    :return: Index into records, or None if absent
    """
    return next(
        (
            position
            for position, record in enumerate(records)
            if record.identifier == identifier
        ),
        None,
    )


def adjacent_record(
    records: Sequence[CardRecord], identifier: CardIdentifier, step: int = 1
) -> CardRecord:
    """
    Record step places away from identifier, wrapping around either end
    :param records: Ordered records
    :param identifier: Current record
    :param step: 1 for next, -1 for previous
    :return: Neighbouring record
    :raises KeyError: identifier is not in records
    """
    position = find_record(records, identifier)
    if position is None:
        raise KeyError(identifier.format())
    return records[(position + step) % len(records)]
