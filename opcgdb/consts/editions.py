"""
Card list editions and the page tables that drive them

The card list site does not say which release a page holds, so every
page id is paired with its release here. Order is the order pages are
parsed in; the final dataset is sorted independently of it.
"""
from typing import Dict, NamedTuple, Tuple

from ..classes.identifiers import ReleaseId


class Edition(NamedTuple):
    """
    One language edition of the card list
    """

    name: str
    host: str
    pages: Tuple[Tuple[int, ReleaseId], ...]


ENGLISH_PAGES: Tuple[Tuple[int, ReleaseId], ...] = (
    (569201, ReleaseId.extra(1)),
    (569107, ReleaseId.booster(7)),
    (569106, ReleaseId.booster(6)),
    (569105, ReleaseId.booster(5)),
    (569104, ReleaseId.booster(4)),
    (569103, ReleaseId.booster(3)),
    (569102, ReleaseId.booster(2)),
    (569101, ReleaseId.booster(1)),
    (569014, ReleaseId.starter(14)),
    (569013, ReleaseId.starter(13)),
    (569012, ReleaseId.starter(12)),
    (569011, ReleaseId.starter(11)),
    (569010, ReleaseId.starter(10)),
    (569009, ReleaseId.starter(9)),
    (569008, ReleaseId.starter(8)),
    (569007, ReleaseId.starter(7)),
    (569006, ReleaseId.starter(6)),
    (569005, ReleaseId.starter(5)),
    (569004, ReleaseId.starter(4)),
    (569003, ReleaseId.starter(3)),
    (569002, ReleaseId.starter(2)),
    (569001, ReleaseId.starter(1)),
)

JAPANESE_PAGES: Tuple[Tuple[int, ReleaseId], ...] = (
    (556701, ReleaseId.promo()),
    (556901, ReleaseId.promo()),
    (556801, ReleaseId.promo()),
    (556301, ReleaseId.premium_booster(1)),
    (556201, ReleaseId.extra(1)),
    (556108, ReleaseId.booster(8)),
    (556107, ReleaseId.booster(7)),
    (556106, ReleaseId.booster(6)),
    (556105, ReleaseId.booster(5)),
    (556104, ReleaseId.booster(4)),
    (556103, ReleaseId.booster(3)),
    (556102, ReleaseId.booster(2)),
    (556101, ReleaseId.booster(1)),
    (556020, ReleaseId.starter(20)),
    (556019, ReleaseId.starter(19)),
    (556018, ReleaseId.starter(18)),
    (556017, ReleaseId.starter(17)),
    (556016, ReleaseId.starter(16)),
    (556015, ReleaseId.starter(15)),
    (556014, ReleaseId.starter(14)),
    (556013, ReleaseId.starter(13)),
    (556012, ReleaseId.starter(12)),
    (556011, ReleaseId.starter(11)),
    (556010, ReleaseId.starter(10)),
    (556009, ReleaseId.starter(9)),
    (556008, ReleaseId.starter(8)),
    (556007, ReleaseId.starter(7)),
    (556006, ReleaseId.starter(6)),
    (556005, ReleaseId.starter(5)),
    (556004, ReleaseId.starter(4)),
    (556003, ReleaseId.starter(3)),
    (556002, ReleaseId.starter(2)),
    (556001, ReleaseId.starter(1)),
)

EDITIONS: Dict[str, Edition] = {
    "en": Edition(name="en", host="en", pages=ENGLISH_PAGES),
    "jp": Edition(name="jp", host="asia-en", pages=JAPANESE_PAGES),
}
