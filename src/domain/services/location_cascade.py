"""Department → province → district cascade over the ubigeo tables.

The three tables are flat lists linked by ``parent_id``. The cascade indexes
them by parent once, so every lookup is a dictionary access. Lookups never
raise: an unknown or childless name yields an empty list.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, replace

from src.domain.entities.location import LocationRecord


class LocationCascade:
    """Read-only resolver for the location hierarchy."""

    def __init__(
        self,
        departments: list[LocationRecord],
        children_by_parent: dict[str, list[LocationRecord]],
    ) -> None:
        self._departments = departments
        self._department_ids = {d.name: d.id for d in departments}
        self._children = children_by_parent

    @classmethod
    def from_tables(
        cls,
        departments: Iterable[LocationRecord],
        provinces: Iterable[LocationRecord],
        districts: Iterable[LocationRecord],
    ) -> LocationCascade:
        """Build the parent → children index from the three tables."""
        children: dict[str, list[LocationRecord]] = defaultdict(list)
        for record in [*provinces, *districts]:
            children[record.parent_id].append(record)
        return cls(list(departments), dict(children))

    def department_names(self) -> list[str]:
        return [d.name for d in self._departments]

    def provinces_for(self, department_name: str | None) -> list[str]:
        """Province names of a department, in table order."""
        return [p.name for p in self._provinces_of(department_name)]

    def districts_for(
        self, department_name: str | None, province_name: str | None
    ) -> list[str]:
        """District names of a province within a department."""
        if not province_name:
            return []
        for province in self._provinces_of(department_name):
            if province.name == province_name:
                return [d.name for d in self._children.get(province.id, [])]
        return []

    def districts_for_department(self, department_name: str | None) -> list[str]:
        """Every district under every province of a department."""
        names: list[str] = []
        for province in self._provinces_of(department_name):
            names.extend(d.name for d in self._children.get(province.id, []))
        return names

    def _provinces_of(self, department_name: str | None) -> list[LocationRecord]:
        if not department_name:
            return []
        department_id = self._department_ids.get(department_name)
        if department_id is None:
            return []
        return self._children.get(department_id, [])


@dataclass(frozen=True)
class LocationSelection:
    """Current department/province/district choice of a form.

    Changing a level clears every level below it.
    """

    department: str = ""
    province: str = ""
    district: str = ""

    def select_department(self, department: str) -> LocationSelection:
        return LocationSelection(department=department)

    def select_province(self, province: str) -> LocationSelection:
        return LocationSelection(department=self.department, province=province)

    def select_district(self, district: str) -> LocationSelection:
        return replace(self, district=district)

    @property
    def is_complete(self) -> bool:
        return bool(self.department and self.province and self.district)
