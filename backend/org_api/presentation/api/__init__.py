"""
API Routers - FastAPI endpoint definitions.
"""

from org_api.presentation.api.departments import router as departments_router
from org_api.presentation.api.news import router as news_router
from org_api.presentation.api.users import router as users_router
from org_api.presentation.api.metrics import router as metrics_router

__all__ = [
    "departments_router",
    "news_router",
    "users_router",
    "metrics_router",
]
