"""Query-file loading, solving and report writing."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from hyperdist.distance import distance_and_closest_point
from hyperdist.models import DistanceReport, QuerySpec


def load_query(path: Path) -> QuerySpec:
    """Read a YAML file and return a validated QuerySpec."""
    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    return QuerySpec.model_validate(raw)


def validate_query(path: Path) -> list[str]:
    """Validate a YAML file against QuerySpec.  Returns a list of error
    strings (empty on success)."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [f"YAML parse error: {exc}"]
    try:
        QuerySpec.model_validate(raw)
    except ValidationError as exc:
        return [
            f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}"
            for e in exc.errors()
        ]
    return []


def solve_query(query: QuerySpec) -> DistanceReport:
    result = distance_and_closest_point(query.point, query.ellipsoid)
    return DistanceReport(
        query_id=query.query_id,
        point=list(query.point),
        result=result,
    )


def write_report(report: DistanceReport, out_dir: Path) -> Path:
    """Serialise the report to ``<out_dir>/<query_id>/result.json``."""
    dest = out_dir / report.query_id
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / "result.json"
    path.write_text(
        json.dumps(report.model_dump(mode="json"), indent=2) + "\n",
        encoding="utf-8",
    )
    return path
