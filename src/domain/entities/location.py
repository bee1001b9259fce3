"""Location records of the Peruvian ubigeo hierarchy."""

from dataclasses import dataclass
from enum import Enum


class LocationLevel(str, Enum):
    """Depth of a record in the department → province → district tree."""

    DEPARTMENT = "department"
    PROVINCE = "province"
    DISTRICT = "district"


@dataclass(frozen=True)
class LocationRecord:
    """One row of a location table.

    ``parent_id`` points at the record one level up; departments carry the
    id of the country root, which never matches another record.
    """

    id: str
    name: str
    parent_id: str
    level: LocationLevel
    code: str = ""
