"""User DTOs for the /users listing."""

from typing import Optional

from org_api.application.dto.base import CamelModel


class UserDepartmentDTO(CamelModel):
    id: str
    name: str
    acronym: str
    period_year: int
    image: Optional[str] = None


class UserPeriodDTO(CamelModel):
    id: str
    year: int
    name: str


class UserPositionDTO(CamelModel):
    id: str
    name: str
    # None for organization-wide positions (e.g. administrator)
    department_id: Optional[str] = None


class UserDTO(CamelModel):
    id: str
    name: Optional[str] = None
    username: Optional[str] = None
    image: Optional[str] = None
    bio: Optional[str] = None
    departments: list[UserDepartmentDTO] = []
    periods: list[UserPeriodDTO] = []
    positions: list[UserPositionDTO] = []
