"""
DTOs - Data Transfer Objects

DTOs for transferring listing results to the presentation layer:
- department.py → DepartmentDTO
- news.py → NewsDTO
- user.py → UserDTO
- page.py → PageResult

Note: field names are snake_case in Python and camelCase on the wire.
"""

from org_api.application.dto.base import CamelModel
from org_api.application.dto.page import PageResult
from org_api.application.dto.department import (
    DepartmentDTO,
    DepartmentPeriodDTO,
    ProgramDTO,
)
from org_api.application.dto.news import AuthorDTO, NewsDTO, PostTagDTO
from org_api.application.dto.user import (
    UserDTO,
    UserDepartmentDTO,
    UserPeriodDTO,
    UserPositionDTO,
)

__all__ = [
    "CamelModel",
    "PageResult",
    "DepartmentDTO",
    "DepartmentPeriodDTO",
    "ProgramDTO",
    "AuthorDTO",
    "NewsDTO",
    "PostTagDTO",
    "UserDTO",
    "UserDepartmentDTO",
    "UserPeriodDTO",
    "UserPositionDTO",
]
