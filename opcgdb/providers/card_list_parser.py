"""
One Piece card list page parser

The card list is plain HTML with no schema. Every lookup here walks
direct children only and matches on tag name or on the exact class
attribute, so a layout change on the site fails loudly instead of
silently picking up the wrong element.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

import bs4

from .. import constants
from ..classes.card_record import CardRecord
from ..classes.enums import Attribute, CardKind, Color, Rarity, Subtype
from ..classes.identifiers import CardIdentifier, ReleaseId
from ..errors import (
    DocumentStructureError,
    OpcgdbError,
    RecordStructureError,
    RecordValueError,
)

LOGGER = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


def child_elements(tag: bs4.Tag) -> List[bs4.Tag]:
    """
    Direct element children of a tag, skipping text and comments
    """
    return [child for child in tag.children if isinstance(child, bs4.Tag)]


def class_text(tag: bs4.Tag) -> str:
    """
    The class attribute exactly as written, e.g. "contentsWrap isIndex"
    """
    classes = tag.get("class")
    if classes is None:
        return ""
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def child_by_name(tag: bs4.Tag, name: str) -> Optional[bs4.Tag]:
    """
    First direct child with the given tag name
    """
    return next((child for child in child_elements(tag) if child.name == name), None)


def child_by_class(tag: bs4.Tag, classes: str) -> Optional[bs4.Tag]:
    """
    First direct child whose class attribute equals classes
    """
    return next(
        (child for child in child_elements(tag) if class_text(child) == classes), None
    )


def child_by_id(tag: bs4.Tag, element_id: str) -> Optional[bs4.Tag]:
    """
    First direct child whose id attribute equals element_id
    """
    return next(
        (child for child in child_elements(tag) if child.get("id") == element_id),
        None,
    )


def children_by_name(tag: bs4.Tag, name: str) -> List[bs4.Tag]:
    """
    All direct children with the given tag name, in document order
    """
    return [child for child in child_elements(tag) if child.name == name]


def _blocks_by_class(tag: bs4.Tag) -> Dict[str, bs4.Tag]:
    # Later duplicates replace earlier ones
    return {class_text(div): div for div in children_by_name(tag, "div")}


def _first_value(block: bs4.Tag, headers: Iterable[str]) -> Optional[str]:
    """
    First text fragment of a block that does not contain any header word
    """
    headers = tuple(headers)
    for fragment in block.stripped_strings:
        if not any(header in fragment for header in headers):
            return str(fragment)
    return None


def find_card_entries(
    document: bs4.BeautifulSoup, page_id: Optional[int] = None
) -> List[bs4.Tag]:
    """
    Locate every card entry of a card list page, in document order
    :param document: Parsed page
    :param page_id: Page being parsed, for diagnostics
    :return: All <dl class="modalCol"> entries
    :raises DocumentStructureError: Page layout did not match
    """
    root = next(iter(child_elements(document)), None)
    if root is None:
        raise DocumentStructureError("Page has no root element", page_id)

    card_list = child_by_id(root, "cardlist")
    if card_list is None:
        raise DocumentStructureError("Unable to find cardlist", page_id)

    main_col = child_by_class(card_list, "mainCol")
    if main_col is None:
        raise DocumentStructureError("Unable to find mainCol", page_id)

    article = child_by_name(main_col, "article")
    if article is None:
        raise DocumentStructureError("Unable to find article in mainCol", page_id)

    contents_wrap = child_by_class(article, "contentsWrap isIndex")
    if contents_wrap is None:
        raise DocumentStructureError("Unable to find contentsWrap isIndex", page_id)

    result_col = child_by_class(contents_wrap, "resultCol")
    if result_col is None:
        raise DocumentStructureError("Unable to find resultCol", page_id)

    return [
        entry
        for entry in children_by_name(result_col, "dl")
        if class_text(entry) == "modalCol"
    ]


def parse_card_list_page(
    html: Union[str, bytes], release: ReleaseId, page_id: Optional[int] = None
) -> List[CardRecord]:
    """
    Parse all cards from a given card list page
    :param html: Page contents
    :param release: Release this page lists
    :param page_id: Page being parsed, for diagnostics
    :return: One record per card entry, in document order
    """
    document = bs4.BeautifulSoup(html, HTML_PARSER)
    entries = find_card_entries(document, page_id)

    records = []
    for position, entry in enumerate(entries):
        try:
            records.append(parse_card_entry(entry, release, page_id, position))
        except OpcgdbError:
            LOGGER.error(f"Unable to parse entry {position} of page {page_id}")
            raise

    LOGGER.debug(f"Parsed {len(records)} cards from page {page_id} ({release})")
    return records


class _EntryContext:
    """
    What is known about the entry being parsed, for error messages
    """

    def __init__(self, page_id: Optional[int], position: int) -> None:
        self.page_id = page_id
        self.reference = f"at position {position}"

    def require(self, element: Optional[bs4.Tag], description: str) -> bs4.Tag:
        if element is None:
            raise RecordStructureError(description, self.reference, self.page_id)
        return element

    def require_value(self, value: Optional[str], description: str) -> str:
        if value is None:
            raise RecordStructureError(description, self.reference, self.page_id)
        return value

    def unsigned(self, value: str, description: str) -> int:
        if not (value.isascii() and value.isdigit()):
            raise RecordValueError(description, value, self.reference, self.page_id)
        return int(value)

    def optional_unsigned(self, value: str, description: str) -> Optional[int]:
        if value == constants.NOT_APPLICABLE:
            return None
        return self.unsigned(value, description)


def _parse_header(
    entry: bs4.Tag, context: _EntryContext
) -> Tuple[str, str, str, str]:
    dt = context.require(child_by_name(entry, "dt"), "dt")
    info_col = context.require(child_by_class(dt, "infoCol"), "infoCol")

    spans = children_by_name(info_col, "span")
    labels = [next(span.stripped_strings, None) for span in spans[:3]]
    if len(labels) < 3 or None in labels:
        raise RecordStructureError(
            "identifier, rarity and kind labels", context.reference, context.page_id
        )
    raw_identifier, raw_rarity, raw_kind = (str(label) for label in labels)
    context.reference = raw_identifier

    name_element = context.require(child_by_class(dt, "cardName"), "cardName")
    name = context.require_value(next(name_element.stripped_strings, None), "card name")

    return raw_identifier, raw_rarity, raw_kind, str(name)


def _parse_image(dd: bs4.Tag, context: _EntryContext) -> Tuple[str, str]:
    front_col = context.require(child_by_class(dd, "frontCol"), "frontCol")
    img = context.require(child_by_name(front_col, "img"), "card image")

    data_src = img.get("data-src")
    if not data_src:
        raise RecordStructureError("image data-src", context.reference, context.page_id)

    image_url = str(data_src).partition("?")[0]
    image_name = image_url.rpartition("/")[2]
    if not image_name:
        raise RecordValueError(
            "image data-src", str(data_src), context.reference, context.page_id
        )

    return image_url, image_name


def _parse_effect(block: bs4.Tag) -> Optional[str]:
    fragments = [
        str(fragment)
        for fragment in block.stripped_strings
        if fragment not in ("Effect", constants.NOT_APPLICABLE)
    ]
    return "\n".join(fragments) or None


def _parse_trigger(block: Optional[bs4.Tag]) -> Optional[str]:
    if block is None:
        return None
    for fragment in block.stripped_strings:
        if fragment != "Trigger":
            return None if fragment == constants.NOT_APPLICABLE else str(fragment)
    return None


def parse_card_entry(
    entry: bs4.Tag,
    release: ReleaseId,
    page_id: Optional[int] = None,
    position: int = 0,
) -> CardRecord:
    """
    Parse a single card list entry
    :param entry: <dl class="modalCol"> element
    :param release: Release of the page the entry came from
    :param page_id: Page being parsed, for diagnostics
    :param position: Index of the entry on its page, for diagnostics
    :return: Card record
    :raises RecordStructureError: Required sub-element missing
    :raises RecordValueError: Numeric field did not hold a number
    :raises IdentifierParseError: Identifier did not parse
    :raises UnknownTokenError: Rarity, kind, color, subtype or attribute unknown
    """
    context = _EntryContext(page_id, position)
    raw_identifier, raw_rarity, raw_kind, name = _parse_header(entry, context)

    dd = context.require(child_by_name(entry, "dd"), "dd")
    image_url, image_name = _parse_image(dd, context)

    back_col = context.require(child_by_class(dd, "backCol"), "backCol")
    blocks = _blocks_by_class(back_col)
    stats = _blocks_by_class(context.require(blocks.get("col2"), "col2 block"))

    cost_text = context.require_value(
        _first_value(context.require(stats.get("cost"), "cost block"), ("Cost", "Life")),
        "cost value",
    )
    cost_life = (
        0 if cost_text == constants.NOT_APPLICABLE else context.unsigned(cost_text, "cost")
    )

    attribute_text = context.require_value(
        _first_value(
            context.require(stats.get("attribute"), "attribute block"), ("Attribute",)
        ),
        "attribute value",
    )
    attributes = tuple(
        Attribute.parse(attribute)
        for attribute in attribute_text.split("/")
        if attribute != constants.NOT_APPLICABLE
    )

    power = context.optional_unsigned(
        context.require_value(
            _first_value(context.require(stats.get("power"), "power block"), ("Power",)),
            "power value",
        ),
        "power",
    )
    counter = context.optional_unsigned(
        context.require_value(
            _first_value(
                context.require(stats.get("counter"), "counter block"), ("Counter",)
            ),
            "counter value",
        ),
        "counter",
    )

    color_text = context.require_value(
        _first_value(context.require(blocks.get("color"), "color block"), ("Color",)),
        "color value",
    )
    subtype_text = context.require_value(
        _first_value(context.require(blocks.get("feature"), "type block"), ("Type",)),
        "type value",
    )

    effect = _parse_effect(context.require(blocks.get("text"), "effect block"))
    trigger = _parse_trigger(blocks.get("trigger"))

    kind = CardKind.parse(raw_kind)
    if attributes and not kind.has_attributes:
        raise RecordValueError(
            f"attribute for a {kind}", attribute_text, context.reference, context.page_id
        )
    if counter is not None and not kind.has_counter:
        raise RecordValueError(
            f"counter for a {kind}", str(counter), context.reference, context.page_id
        )

    LOGGER.debug(f"Parsing {raw_identifier}")

    return CardRecord(
        identifier=CardIdentifier.parse(raw_identifier),
        rarity=Rarity.parse(raw_rarity),
        kind=kind,
        name=name,
        image_url=image_url,
        image_name=image_name,
        cost_life=cost_life,
        power=power,
        counter=counter,
        colors=tuple(Color.parse(color) for color in color_text.split("/")),
        effect=effect,
        trigger=trigger,
        subtypes=tuple(Subtype.parse(subtype) for subtype in subtype_text.split("/")),
        attributes=attributes,
        release=release,
    )
