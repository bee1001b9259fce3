"""Loader for the bundled ubigeo tables.

Each JSON file maps a parent id to the list of its children, mirroring the
public ubigeo datasets. The loader flattens the three files and builds the
``LocationCascade`` once per process.
"""

import json

from functools import lru_cache
from pathlib import Path
from typing import Any

from src.common.logging import get_logger
from src.domain.entities.location import LocationLevel, LocationRecord
from src.domain.services.location_cascade import LocationCascade


logger = get_logger(__name__)

UBIGEO_DIR = Path(__file__).parent / "ubigeo"

_TABLE_FILES = {
    LocationLevel.DEPARTMENT: "departamentos.json",
    LocationLevel.PROVINCE: "provincias.json",
    LocationLevel.DISTRICT: "distritos.json",
}


def _parse_table(raw: dict[str, list[dict[str, Any]]], level: LocationLevel) -> list[LocationRecord]:
    records: list[LocationRecord] = []
    for rows in raw.values():
        for row in rows:
            records.append(
                LocationRecord(
                    id=str(row["id_ubigeo"]),
                    name=str(row["nombre_ubigeo"]),
                    parent_id=str(row["id_padre_ubigeo"]),
                    level=level,
                    code=str(row.get("codigo_ubigeo", "")),
                )
            )
    return records


def load_table(level: LocationLevel, directory: Path = UBIGEO_DIR) -> list[LocationRecord]:
    """Read one level of the hierarchy from ``directory``."""
    path = directory / _TABLE_FILES[level]
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    return _parse_table(raw, level)


def build_cascade(directory: Path = UBIGEO_DIR) -> LocationCascade:
    departments = load_table(LocationLevel.DEPARTMENT, directory)
    provinces = load_table(LocationLevel.PROVINCE, directory)
    districts = load_table(LocationLevel.DISTRICT, directory)
    logger.info(
        "Loaded ubigeo tables",
        departments=len(departments),
        provinces=len(provinces),
        districts=len(districts),
    )
    return LocationCascade.from_tables(departments, provinces, districts)


@lru_cache(maxsize=1)
def get_location_cascade() -> LocationCascade:
    """Process-wide cascade over the bundled tables."""
    return build_cascade()
