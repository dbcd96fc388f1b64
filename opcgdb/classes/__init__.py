"""
OPCGDB card classes
"""
from .card_metadata import (
    CardMetadata,
    adjacent_record,
    apply_metadata,
    find_record,
    metadata_from_record,
)
from .card_profile import (
    CharacterProfile,
    EventProfile,
    LeaderProfile,
    StageProfile,
    convert,
    profile_from_record,
    record_with_profile,
)
from .card_record import CardRecord
from .enums import Attribute, CardKind, Color, Rarity, Subtype
from .identifiers import CardIdentifier, ReleaseId, ReleaseKind
