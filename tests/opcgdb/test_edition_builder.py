"""
Tests for opcgdb/edition_builder.py

Editions are built end to end against tmp_path, with the card list
site replaced by the responses library.
"""

import json
import pathlib
from typing import Dict, List, Sequence

import pytest
import responses
from responses import matchers

from opcgdb.classes.identifiers import ReleaseId
from opcgdb.consts.editions import EDITIONS, Edition
from opcgdb.edition_builder import (
    EditionPaths,
    build_edition,
    build_editions,
    build_image_tasks,
    build_page_tasks,
    sort_card_records,
)
from opcgdb.errors import DuplicateCardIdentifierError, FetchError
from opcgdb.providers.card_list_provider import CardListProvider

ENGLISH = Edition(
    "en",
    "en",
    ((569102, ReleaseId.booster(2)), (569101, ReleaseId.booster(1))),
)
JAPANESE = Edition("jp", "asia-en", ((556101, ReleaseId.booster(1)),))

IMAGE_NAMES = ["OP02-001.png", "OP01-002.png", "OP01-001.png", "OP01-001_p1.png"]


@pytest.fixture
def english_pages(card_entry_html, card_list_page_html) -> Dict[int, str]:
    """Card list pages of the two-page test edition, keyed by page id"""
    return {
        569102: card_list_page_html(
            [card_entry_html(identifier="OP02-001", name="Edward.Newgate")]
        ),
        569101: card_list_page_html(
            [
                card_entry_html(identifier="OP01-002", name="Trafalgar Law"),
                card_entry_html(identifier="OP01-001"),
                card_entry_html(
                    identifier="OP01-001",
                    rarity="SP CARD",
                    image_src="../images/cardlist/card/OP01-001_p1.png?240628",
                ),
            ]
        ),
    }


def _add_site(
    rsps: responses.RequestsMock,
    host: str,
    pages: Dict[int, str],
    image_names: List[str],
    failing_pages: Sequence[int] = (),
) -> None:
    for page_id, html in pages.items():
        rsps.add(
            responses.GET,
            f"https://{host}.onepiece-cardgame.com/cardlist/",
            body="Service Unavailable" if page_id in failing_pages else html,
            status=503 if page_id in failing_pages else 200,
            match=[matchers.query_param_matcher({"series": str(page_id)})],
        )
    for image_name in image_names:
        rsps.add(
            responses.GET,
            f"https://{host}.onepiece-cardgame.com/images/cardlist/card/{image_name}",
            body=f"PNG {image_name}".encode(),
            content_type="image/png",
        )


# ============================================================================
# Building blocks
# ============================================================================


def test_edition_paths(tmp_path: pathlib.Path) -> None:
    paths = EditionPaths(tmp_path.joinpath("en"))
    paths.create()

    assert paths.html.is_dir()
    assert paths.images.is_dir()
    assert paths.page_path(569101) == tmp_path.joinpath("en", "html", "569101.html")
    assert paths.image_path("OP01-001.png") == tmp_path.joinpath(
        "en", "images", "OP01-001.png"
    )
    assert paths.card_db == tmp_path.joinpath("en", "card_db.jsonl")


def test_page_tasks_skip_cached_pages(tmp_path: pathlib.Path) -> None:
    paths = EditionPaths(tmp_path)
    paths.create()
    paths.page_path(569102).write_text("cached", encoding="utf-8")

    tasks = build_page_tasks(ENGLISH, paths, CardListProvider("en"))

    assert [task.key for task in tasks] == ["569101"]
    assert tasks[0].url == "https://en.onepiece-cardgame.com/cardlist/?series=569101"
    assert tasks[0].cache_path == paths.page_path(569101)


def test_image_tasks_are_unique(tmp_path: pathlib.Path, make_card_record) -> None:
    paths = EditionPaths(tmp_path)
    paths.create()
    paths.image_path("OP01-003.png").write_bytes(b"cached")
    records = [
        make_card_record(id="OP01-001"),
        make_card_record(id="OP01-002", image_name="OP01-001.png"),
        make_card_record(id="OP01-003"),
        make_card_record(id="OP01-004"),
    ]

    tasks = build_image_tasks(records, paths, CardListProvider("en"))

    assert [task.key for task in tasks] == ["OP01-001.png", "OP01-004.png"]
    assert tasks[1].url == (
        "https://en.onepiece-cardgame.com/images/cardlist/card/OP01-004.png"
    )


def test_sort_card_records(make_card_record) -> None:
    records = (
        make_card_record(id=identifier)
        for identifier in ("P-002", "OP01-010", "EB01-001", "OP01-002", "ST02-001")
    )
    assert [record.identifier.format() for record in sort_card_records(records)] == [
        "ST02-001",
        "OP01-002",
        "OP01-010",
        "EB01-001",
        "P-002",
    ]


def test_sort_rejects_duplicates(make_card_record) -> None:
    records = [
        make_card_record(id="OP01-001"),
        make_card_record(id="OP01-002"),
        make_card_record(id="OP01-001", image_name="OP01-001_p1.png"),
    ]
    with pytest.raises(DuplicateCardIdentifierError) as excinfo:
        sort_card_records(records)
    assert excinfo.value.identifier == "OP01-001"


def test_edition_tables() -> None:
    assert set(EDITIONS) == {"en", "jp"}
    assert EDITIONS["jp"].host == "asia-en"
    for edition in EDITIONS.values():
        page_ids = [page_id for page_id, _ in edition.pages]
        assert len(page_ids) == len(set(page_ids))


# ============================================================================
# Whole editions
# ============================================================================


@pytest.fixture
def english_site(english_pages):
    """Card list site for the two-page test edition"""
    unique_pages = dict(english_pages)
    unique_pages[569101] = unique_pages[569101].replace(
        '<span>OP01-001</span> | <span>SP CARD</span>',
        '<span>OP01-003</span> | <span>SP CARD</span>',
    )
    return unique_pages


def test_build_edition(tmp_path: pathlib.Path, english_site) -> None:
    with responses.RequestsMock() as rsps:
        _add_site(rsps, "en", english_site, IMAGE_NAMES)
        records = build_edition(ENGLISH, tmp_path, page_workers=2, image_workers=3)

    paths = EditionPaths(tmp_path.joinpath("en"))
    assert [record.identifier.format() for record in records] == [
        "OP01-001",
        "OP01-002",
        "OP01-003",
        "OP02-001",
    ]
    assert records[0].release == ReleaseId.booster(1)
    assert records[3].release == ReleaseId.booster(2)

    lines = paths.card_db.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["id"] for line in lines] == [
        "OP01-001",
        "OP01-002",
        "OP01-003",
        "OP02-001",
    ]
    assert json.loads(lines[2])["image_name"] == "OP01-001_p1.png"

    assert paths.page_path(569101).read_text(encoding="utf-8") == english_site[569101]
    for image_name in IMAGE_NAMES:
        assert paths.image_path(image_name).read_bytes() == f"PNG {image_name}".encode()


def test_rebuild_with_warm_cache(tmp_path: pathlib.Path, english_site) -> None:
    with responses.RequestsMock() as rsps:
        _add_site(rsps, "en", english_site, IMAGE_NAMES)
        build_edition(ENGLISH, tmp_path, page_workers=2, image_workers=2)
    card_db = EditionPaths(tmp_path.joinpath("en")).card_db
    first_output = card_db.read_bytes()

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _add_site(rsps, "en", english_site, IMAGE_NAMES)
        build_edition(ENGLISH, tmp_path, page_workers=2, image_workers=2)
        assert len(rsps.calls) == 0

    assert card_db.read_bytes() == first_output


def test_rebuild_after_failure(tmp_path: pathlib.Path, english_site) -> None:
    paths = EditionPaths(tmp_path.joinpath("en"))

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _add_site(rsps, "en", english_site, IMAGE_NAMES, failing_pages=[569101])
        with pytest.raises(FetchError):
            build_edition(ENGLISH, tmp_path, page_workers=1, image_workers=2)

    assert paths.page_path(569102).is_file()
    assert not paths.page_path(569101).exists()
    assert not paths.card_db.exists()

    with responses.RequestsMock() as rsps:
        _add_site(rsps, "en", {569101: english_site[569101]}, IMAGE_NAMES)
        build_edition(ENGLISH, tmp_path, page_workers=1, image_workers=2)
        fetched = sorted(call.request.url for call in rsps.calls)

    assert "https://en.onepiece-cardgame.com/cardlist/?series=569101" in fetched
    assert len(fetched) == 1 + len(IMAGE_NAMES)
    assert paths.card_db.is_file()


def test_build_fails_on_duplicate_identifiers(tmp_path: pathlib.Path, english_pages) -> None:
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _add_site(rsps, "en", english_pages, IMAGE_NAMES)
        with pytest.raises(DuplicateCardIdentifierError):
            build_edition(ENGLISH, tmp_path, page_workers=2, image_workers=2)

    assert not EditionPaths(tmp_path.joinpath("en")).card_db.exists()


@pytest.mark.parametrize("parallel", [True, False], ids=["parallel", "sequential"])
def test_failing_edition_does_not_stop_others(
    tmp_path: pathlib.Path, english_site, card_entry_html, card_list_page_html, parallel
) -> None:
    japanese_pages = {556101: card_list_page_html([card_entry_html()])}

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _add_site(rsps, "en", english_site, IMAGE_NAMES)
        _add_site(rsps, "asia-en", japanese_pages, [], failing_pages=[556101])
        failed = build_editions(
            [ENGLISH, JAPANESE],
            tmp_path,
            parallel=parallel,
            page_workers=2,
            image_workers=2,
        )

    assert failed == ["jp"]
    assert EditionPaths(tmp_path.joinpath("en")).card_db.is_file()
    assert not EditionPaths(tmp_path.joinpath("jp")).card_db.exists()
    assert EditionPaths(tmp_path.joinpath("jp")).html.is_dir()


def test_failed_page_is_reported_by_page_id(tmp_path: pathlib.Path, english_site) -> None:
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _add_site(rsps, "en", english_site, IMAGE_NAMES, failing_pages=[569101])
        with pytest.raises(FetchError) as excinfo:
            build_edition(ENGLISH, tmp_path, page_workers=1, image_workers=2)

    assert excinfo.value.key == "569101"
    assert excinfo.value.url == "https://en.onepiece-cardgame.com/cardlist/?series=569101"
