from ppnfl.ingest import parse_projections
from ppnfl.models import ProjectionRecord


def _projection(pid: str, player_id: str | None, stat_id: str | None, line=None) -> dict:
    relationships = {}
    if player_id is not None:
        relationships["new_player"] = {"data": {"id": player_id, "type": "new_player"}}
    if stat_id is not None:
        relationships["stat_type"] = {"data": {"id": stat_id, "type": "stat_type"}}
    attributes = {} if line is None else {"line_score": line}
    return {"id": pid, "type": "projection", "attributes": attributes, "relationships": relationships}


def _included() -> list[dict]:
    return [
        {"id": "p1", "type": "new_player", "attributes": {"name": "J. Doe"}},
        {"id": "p2", "type": "new_player", "attributes": {"name": "R. Roe"}},
        {"id": "s1", "type": "stat_type", "attributes": {"name": "Passing Yards"}},
        {"id": "s2", "type": "stat_type", "attributes": {"name": "Rush Yards"}},
        {"id": "l1", "type": "league", "attributes": {"name": "NFL"}},
    ]


def test_parse_projections_example_document(sample_payload):
    assert parse_projections(sample_payload) == [
        ProjectionRecord(Player="J. Doe", Stat="Passing Yards", Line=24.5, id="1")
    ]


def test_parse_projections_preserves_data_order():
    payload = {
        "data": [
            _projection("3", "p2", "s2", 61.5),
            _projection("1", "p1", "s1", 240.5),
            _projection("2", "p2", "s1", 12),
        ],
        "included": _included(),
    }

    records = parse_projections(payload)

    assert [record.id for record in records] == ["3", "1", "2"]
    assert records[0].Player == "R. Roe"
    assert records[0].Stat == "Rush Yards"
    assert records[2].Line == 12


def test_parse_projections_skips_unresolved_relationships():
    payload = {
        "data": [
            _projection("1", "p1", "s1", 1.5),
            _projection("2", "missing", "s1", 2.5),
            _projection("3", "p1", None, 3.5),
            _projection("4", None, "s2", 4.5),
            _projection("5", "l1", "s1", 5.5),
            _projection("6", "p2", "s2", 6.5),
        ],
        "included": _included(),
    }

    records = parse_projections(payload)

    assert [record.id for record in records] == ["1", "6"]


def test_parse_projections_missing_line_is_none_not_zero():
    payload = {"data": [_projection("1", "p1", "s1")], "included": _included()}

    records = parse_projections(payload)

    assert records[0].Line is None


def test_parse_projections_skips_players_without_names():
    payload = {
        "data": [_projection("1", "p9", "s1", 10.5)],
        "included": _included() + [{"id": "p9", "type": "new_player", "attributes": {}}],
    }

    assert parse_projections(payload) == []


def test_parse_projections_tolerates_malformed_documents():
    assert parse_projections(None) == []
    assert parse_projections("<html>blocked</html>") == []
    assert parse_projections({"data": "nope", "included": None}) == []
    assert parse_projections({"data": [None, 5, {"relationships": "x"}], "included": [None, "p1"]}) == []


def test_parse_projections_stringifies_numeric_ids():
    payload = {
        "data": [
            {
                "id": 77,
                "attributes": {"line_score": 0.5},
                "relationships": {
                    "new_player": {"data": {"id": 10}},
                    "stat_type": {"data": {"id": 20}},
                },
            }
        ],
        "included": [
            {"id": 10, "type": "new_player", "attributes": {"name": "K. Kicker"}},
            {"id": "20", "type": "stat_type", "attributes": {"name": "FG Made"}},
        ],
    }

    records = parse_projections(payload)

    assert records == [ProjectionRecord(Player="K. Kicker", Stat="FG Made", Line=0.5, id="77")]


def test_parse_projections_coerces_numeric_string_lines():
    payload = {"data": [_projection("1", "p1", "s1", "24.5")], "included": _included()}

    assert parse_projections(payload)[0].Line == 24.5


def test_parse_projections_keeps_record_when_line_unparseable():
    payload = {"data": [_projection("1", "p1", "s1", "n/a")], "included": _included()}

    records = parse_projections(payload)

    assert [record.id for record in records] == ["1"]
    assert records[0].Line is None
