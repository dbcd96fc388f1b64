"""
Tests for opcgdb/output_generator.py

Real file I/O against tmp_path, no mocking.
"""

import json
import pathlib

from opcgdb.output_generator import load_card_db, serialize_card_records, write_card_db


def test_serialize_one_record_per_line(make_card_record) -> None:
    records = [make_card_record(id="OP01-001"), make_card_record(id="OP01-002")]
    contents = serialize_card_records(records)

    lines = contents.split("\n")
    assert lines[-1] == ""
    assert [json.loads(line)["id"] for line in lines[:-1]] == ["OP01-001", "OP01-002"]


def test_serialize_nothing() -> None:
    assert serialize_card_records([]) == ""


def test_write_and_load(tmp_path: pathlib.Path, make_card_record) -> None:
    records = [
        make_card_record(id="ST01-001", name="Monkey.D.Luffy"),
        make_card_record(id="OP01-001", trigger="Draw 1 card."),
        make_card_record(id="P-001", subtype=["FILM"]),
    ]
    card_db = tmp_path.joinpath("en", "card_db.jsonl")

    write_card_db(card_db, records)

    assert card_db.is_file()
    assert load_card_db(card_db) == records
    assert not list(card_db.parent.glob(".*.part"))


def test_write_replaces_previous_dataset(tmp_path: pathlib.Path, make_card_record) -> None:
    card_db = tmp_path.joinpath("card_db.jsonl")
    write_card_db(card_db, [make_card_record(id="OP01-001"), make_card_record(id="OP01-002")])
    write_card_db(card_db, [make_card_record(id="OP01-003")])

    assert [record.identifier.format() for record in load_card_db(card_db)] == ["OP01-003"]


def test_write_is_deterministic(tmp_path: pathlib.Path, make_card_record) -> None:
    records = [make_card_record(id="OP01-001", name="ロロノア・ゾロ")]
    first = tmp_path.joinpath("first.jsonl")
    second = tmp_path.joinpath("second.jsonl")

    write_card_db(first, records)
    write_card_db(second, load_card_db(first))

    assert first.read_bytes() == second.read_bytes()
    assert "ロロノア・ゾロ".encode("utf-8") in first.read_bytes()


def test_load_skips_blank_lines(tmp_path: pathlib.Path, make_card_record) -> None:
    card_db = tmp_path.joinpath("card_db.jsonl")
    card_db.write_text(
        make_card_record().to_json_line() + "\n\n", encoding="utf-8"
    )
    assert len(load_card_db(card_db)) == 1
