"""Tests for the bundled ubigeo tables."""

import json

from pathlib import Path

from src.domain.entities.location import LocationLevel
from src.infrastructure.reference_data.ubigeo_loader import (
    build_cascade,
    get_location_cascade,
    load_table,
)


def _write(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadTable:
    def test_bundled_departments(self) -> None:
        departments = load_table(LocationLevel.DEPARTMENT)

        names = [d.name for d in departments]
        assert "Lima" in names
        assert "Cusco" in names
        assert all(d.level == LocationLevel.DEPARTMENT for d in departments)

    def test_custom_directory(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "departamentos.json",
            {"2534": [{"id_ubigeo": "1", "nombre_ubigeo": "Sur", "id_padre_ubigeo": "2534"}]},
        )
        _write(
            tmp_path / "provincias.json",
            {"1": [{"id_ubigeo": "11", "nombre_ubigeo": "Costa", "id_padre_ubigeo": "1"}]},
        )
        _write(
            tmp_path / "distritos.json",
            {"11": [{"id_ubigeo": "111", "nombre_ubigeo": "Playa", "id_padre_ubigeo": "11"}]},
        )

        cascade = build_cascade(tmp_path)

        assert cascade.department_names() == ["Sur"]
        assert cascade.provinces_for("Sur") == ["Costa"]
        assert cascade.districts_for("Sur", "Costa") == ["Playa"]


class TestBundledCascade:
    def test_every_department_has_provinces(self) -> None:
        cascade = get_location_cascade()

        for department in cascade.department_names():
            assert cascade.provinces_for(department), department

    def test_lima_reaches_miraflores(self) -> None:
        cascade = get_location_cascade()

        assert "Miraflores" in cascade.districts_for("Lima", "Lima")
        assert "Miraflores" in cascade.districts_for_department("Lima")

    def test_cascade_is_cached(self) -> None:
        assert get_location_cascade() is get_location_cascade()
