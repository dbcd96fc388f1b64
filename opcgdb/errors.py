"""
OPCGDB exception types

Every failure in the scrape pipeline is fatal to the phase it occurs in.
The classes here exist so callers can tell the kinds apart and so the
offending input is always attached to the error.
"""
from typing import Optional


class OpcgdbError(Exception):
    """
    Root of all OPCGDB errors
    """


class IdentifierParseError(OpcgdbError, ValueError):
    """
    A release or card identifier did not follow the identifier grammar
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class InvalidReleasePrefixError(IdentifierParseError):
    """
    Release identifier prefix is not one of ST/OP/EB/PB
    """

    def __init__(self, prefix: str) -> None:
        super().__init__(f"Invalid release ID prefix '{prefix}'", prefix)


class InvalidSubIdError(IdentifierParseError):
    """
    Release identifier did not end in a two digit number
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid release sub-id in '{text}'", text)


class MalformedCardIdentifierError(IdentifierParseError):
    """
    Card identifier is missing the '<release>-<card>' separator
    """

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Card IDs should take the form of '<release>-<card>' ({text} is invalid)",
            text,
        )


class InvalidCardNumberError(IdentifierParseError):
    """
    Card number portion of a card identifier is not an unsigned integer
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid card number '{text}'", text)


class UnknownTokenError(OpcgdbError, ValueError):
    """
    A token did not match any entry of a closed enumeration
    """

    enumeration: str = "token"

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid {self.enumeration} '{token}'")
        self.token = token


class UnknownRarityError(UnknownTokenError):
    """Rarity code not recognized"""

    enumeration = "rarity"


class UnknownCardKindError(UnknownTokenError):
    """Card kind not recognized"""

    enumeration = "card kind"


class UnknownColorError(UnknownTokenError):
    """Color not recognized"""

    enumeration = "color"


class UnknownSubtypeError(UnknownTokenError):
    """Subtype not recognized"""

    enumeration = "subtype"


class UnknownAttributeError(UnknownTokenError):
    """Attribute not recognized"""

    enumeration = "attribute"


class DocumentStructureError(OpcgdbError):
    """
    A cached catalog page is missing an element the parser requires
    """

    def __init__(self, message: str, page_id: Optional[int] = None) -> None:
        if page_id is not None:
            message = f"Page {page_id}: {message}"
        super().__init__(message)
        self.page_id = page_id


class RecordStructureError(DocumentStructureError):
    """
    A single card entry is missing a required sub-element
    """

    def __init__(
        self,
        element: str,
        card_reference: str,
        page_id: Optional[int] = None,
    ) -> None:
        super().__init__(f"Card {card_reference} is missing {element}", page_id)
        self.element = element
        self.card_reference = card_reference


class FetchError(OpcgdbError):
    """
    A page or image could not be downloaded
    """

    def __init__(self, key: str, url: str, cause: Exception) -> None:
        super().__init__(f"Unable to fetch {key} from {url}: {cause}")
        self.key = key
        self.url = url
        self.cause = cause


class DuplicateCardIdentifierError(OpcgdbError):
    """
    Two records of one edition share an identifier
    """

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Duplicate card identifier {identifier}")
        self.identifier = identifier


class CardConversionError(OpcgdbError):
    """
    A card profile cannot be converted to the requested kind
    """


class RecordValueError(DocumentStructureError):
    """
    A card entry sub-element is present but holds an unusable value
    """

    def __init__(
        self,
        element: str,
        value: str,
        card_reference: str,
        page_id: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"Card {card_reference} has an invalid {element} '{value}'", page_id
        )
        self.element = element
        self.value = value
        self.card_reference = card_reference


class CardKindMismatchError(OpcgdbError, ValueError):
    """
    A card carries a stat its kind never prints
    """

    def __init__(self, kind: str, field: str) -> None:
        super().__init__(f"A {kind} card cannot have {field}")
        self.kind = kind
        self.field = field
