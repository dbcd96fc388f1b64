"""
Kind-specific view of a card

CardRecord keeps every stat as an optional field. Editing tools want
the shape of one kind at a time instead, and need to switch a card to
another kind while keeping whatever stats the two kinds share.
"""
import dataclasses
from typing import Optional, Union

from ..errors import CardConversionError
from .card_record import CardRecord
from .enums import Attribute, CardKind, Color


@dataclasses.dataclass(frozen=True)
class LeaderProfile:
    """Leader stats"""

    life: int
    power: int
    attribute: Attribute
    secondary_attribute: Optional[Attribute] = None
    secondary_color: Optional[Color] = None

    kind = CardKind.LEADER


@dataclasses.dataclass(frozen=True)
class CharacterProfile:
    """Character stats"""

    cost: int
    power: int
    attribute: Attribute
    secondary_attribute: Optional[Attribute] = None
    counter: Optional[int] = None
    trigger: Optional[str] = None

    kind = CardKind.CHARACTER


@dataclasses.dataclass(frozen=True)
class StageProfile:
    """Stage stats"""

    cost: int
    trigger: Optional[str] = None

    kind = CardKind.STAGE


@dataclasses.dataclass(frozen=True)
class EventProfile:
    """Event stats"""

    cost: int
    trigger: Optional[str] = None

    kind = CardKind.EVENT


CardProfile = Union[LeaderProfile, CharacterProfile, StageProfile, EventProfile]


def profile_from_record(record: CardRecord) -> CardProfile:
    """
    Build the kind-specific view of a record
    :param record: Record to view
    :return: Profile matching record.kind
    :raises CardConversionError: Leader or Character without an attribute
    """
    if record.kind in (CardKind.LEADER, CardKind.CHARACTER):
        if not record.attributes:
            raise CardConversionError(
                f"{record.identifier} is a {record.kind} without an attribute"
            )
        attribute = record.attributes[0]
        secondary_attribute = record.attributes[1] if len(record.attributes) > 1 else None

        if record.kind is CardKind.LEADER:
            return LeaderProfile(
                life=record.cost_life,
                power=record.power or 0,
                attribute=attribute,
                secondary_attribute=secondary_attribute,
                secondary_color=record.colors[1] if len(record.colors) > 1 else None,
            )
        return CharacterProfile(
            cost=record.cost_life,
            power=record.power or 0,
            attribute=attribute,
            secondary_attribute=secondary_attribute,
            counter=record.counter,
            trigger=record.trigger,
        )

    if record.kind is CardKind.STAGE:
        return StageProfile(cost=record.cost_life, trigger=record.trigger)
    return EventProfile(cost=record.cost_life, trigger=record.trigger)


def convert(profile: CardProfile, kind: CardKind) -> CardProfile:
    """
    Rebuild a profile as another kind, carrying over the stats both share.
    Cost and life map onto each other; counter and secondary color only
    survive a conversion to the same kind.
    :param profile: Profile to convert
    :param kind: Target kind
    :return: New profile (the same one if kind already matches)
    :raises CardConversionError: Target needs an attribute the source lacks
    """
    if profile.kind is kind:
        return profile

    if isinstance(profile, LeaderProfile):
        cost_life = profile.life
    else:
        cost_life = profile.cost

    power = 0
    attribute: Optional[Attribute] = None
    secondary_attribute: Optional[Attribute] = None
    if isinstance(profile, (LeaderProfile, CharacterProfile)):
        power = profile.power
        attribute = profile.attribute
        secondary_attribute = profile.secondary_attribute

    trigger = None if isinstance(profile, LeaderProfile) else profile.trigger

    if kind is CardKind.STAGE:
        return StageProfile(cost=cost_life, trigger=trigger)
    if kind is CardKind.EVENT:
        return EventProfile(cost=cost_life, trigger=trigger)

    if attribute is None:
        raise CardConversionError(
            f"Cannot convert a {profile.kind} to a {kind} without an attribute"
        )
    if kind is CardKind.LEADER:
        return LeaderProfile(
            life=cost_life,
            power=power,
            attribute=attribute,
            secondary_attribute=secondary_attribute,
        )
    return CharacterProfile(
        cost=cost_life,
        power=power,
        attribute=attribute,
        secondary_attribute=secondary_attribute,
        trigger=trigger,
    )


def record_with_profile(record: CardRecord, profile: CardProfile) -> CardRecord:
    """
    New record carrying the kind and stats of a profile
    :param record: Record to start from
    :param profile: Stats to apply
    :return: Updated copy; the original is untouched
    """
    update = {
        "kind": profile.kind,
        "power": None,
        "counter": None,
        "attributes": (),
        "trigger": None,
    }

    if isinstance(profile, LeaderProfile):
        update["cost_life"] = profile.life
        update["colors"] = record.colors[:1] + (
            (profile.secondary_color,) if profile.secondary_color else ()
        )
    else:
        update["cost_life"] = profile.cost
        update["trigger"] = profile.trigger

    if isinstance(profile, (LeaderProfile, CharacterProfile)):
        update["power"] = profile.power
        update["attributes"] = (profile.attribute,) + (
            (profile.secondary_attribute,) if profile.secondary_attribute else ()
        )
    if isinstance(profile, CharacterProfile):
        update["counter"] = profile.counter

    return record.model_copy(update=update)
