"""Department DTOs for the /departments listing."""

from typing import Optional

from org_api.application.dto.base import CamelModel


class DepartmentPeriodDTO(CamelModel):
    id: str
    year: int
    name: str


class ProgramDTO(CamelModel):
    id: str
    content: str


class DepartmentDTO(CamelModel):
    """
    Department with its period and work programs.

    - type: "BE" (Badan Eksekutif) or "DP" (Dewan Perwakilan)
    - period: None when no period row matches period_year
    - programs: empty list when the department has none
    """

    id: str
    name: str
    acronym: str
    image: Optional[str] = None
    description: Optional[str] = None
    type: str
    period_year: int
    period: Optional[DepartmentPeriodDTO] = None
    programs: list[ProgramDTO] = []
