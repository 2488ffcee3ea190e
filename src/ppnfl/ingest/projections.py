"""Flatten the upstream's relational JSON document into projection records."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ppnfl.models import ProjectionRecord


logger = logging.getLogger(__name__)

PLAYER_TYPE = "new_player"
STAT_TYPE = "stat_type"


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _sequence(value: Any) -> list:
    return value if isinstance(value, list) else []


def _related_id(relationships: Mapping[str, Any], name: str) -> Optional[str]:
    related = _mapping(_mapping(relationships.get(name)).get("data")).get("id")
    return str(related) if related is not None else None


def _build_name_lookups(included: list) -> tuple[Dict[str, str], Dict[str, str]]:
    players: Dict[str, str] = {}
    stats: Dict[str, str] = {}
    for item in included:
        if not isinstance(item, Mapping) or item.get("id") is None:
            continue
        name = _mapping(item.get("attributes")).get("name")
        if item.get("type") == PLAYER_TYPE:
            players[str(item["id"])] = name
        elif item.get("type") == STAT_TYPE:
            stats[str(item["id"])] = name
    return players, stats


def parse_projections(payload: Any) -> List[ProjectionRecord]:
    """Return one record per ``data`` entity whose player and stat resolve.

    Entities with missing or dangling relationships are skipped; a malformed
    payload yields an empty list rather than an error.
    """

    document = _mapping(payload)
    players, stats = _build_name_lookups(_sequence(document.get("included")))

    records: List[ProjectionRecord] = []
    skipped = 0
    for entity in _sequence(document.get("data")):
        if not isinstance(entity, Mapping) or entity.get("id") in (None, ""):
            skipped += 1
            continue
        relationships = _mapping(entity.get("relationships"))
        player_id = _related_id(relationships, PLAYER_TYPE)
        stat_id = _related_id(relationships, STAT_TYPE)
        player = players.get(player_id) if player_id is not None else None
        stat = stats.get(stat_id) if stat_id is not None else None
        if not player or not stat:
            skipped += 1
            continue
        line = _mapping(entity.get("attributes")).get("line_score")
        fields = {"Player": str(player), "Stat": str(stat), "id": str(entity["id"])}
        try:
            record = ProjectionRecord(Line=line, **fields)
        except ValidationError:
            logger.debug("Unparseable line_score %r on projection %s", line, fields["id"])
            record = ProjectionRecord(Line=None, **fields)
        records.append(record)

    if skipped:
        logger.debug("Skipped %s projection entities with unresolved relationships", skipped)
    return records
