"""
Dishka DI Container Setup.

- InfrastructureProvider: process-wide collaborators (Scope.APP)
    Database     → Prisma client, connected once, disconnected on container close
    RateLimiter  → limits-based limiter over RATELIMIT_STORAGE_URI
- AppProvider: per-request repositories and query handlers (Scope.REQUEST)

Tests swap InfrastructureProvider for one that hands out test doubles;
AppProvider is reused as-is.

Flow:
  Container → provides → SqlDepartmentRepository → to → ListDepartmentsHandler
                                  ↓
                         uses Database (APP scope)
"""

from typing import AsyncIterable

from dishka import Provider, Scope, make_async_container, provide, AsyncContainer

from org_api.application.queries.departments import ListDepartmentsHandler
from org_api.application.queries.news import ListNewsHandler
from org_api.application.queries.users import ListUsersHandler
from org_api.config.settings import Config
from org_api.domain.ports import Database, RateLimiter
from org_api.domain.ports.repositories import (
    DepartmentRepository,
    NewsRepository,
    UserRepository,
)
from org_api.infrastructure.persistence import (
    SqlDepartmentRepository,
    SqlNewsRepository,
    SqlUserRepository,
    connect_prisma,
)
from org_api.infrastructure.rate_limit import LimitsRateLimiter


class InfrastructureProvider(Provider):
    """Store handle and rate limiter (singletons, app-scoped)."""

    # ==================== DATABASE ====================
    @provide(scope=Scope.APP)
    async def get_database(self) -> AsyncIterable[Database]:
        """
        Provide the Prisma-backed store handle.

        - Scope.APP = created ONCE, shared across all requests
        - generator so container.close() disconnects the client
        """
        database = await connect_prisma(Config.DATABASE_URL, Config.DATABASE_AUTH_TOKEN)
        yield database
        await database.disconnect()

    # ==================== RATE LIMITER ====================
    @provide(scope=Scope.APP)
    def get_rate_limiter(self) -> RateLimiter:
        storage_options = {}
        if Config.RATELIMIT_STORAGE_URI.startswith("async+redis"):
            storage_options["implementation"] = "redispy"
        return LimitsRateLimiter(
            storage_uri=Config.RATELIMIT_STORAGE_URI,
            rate_limits=Config.DEFAULT_RATE_LIMITS,
            **storage_options,
        )


class AppProvider(Provider):
    """Repositories and query handlers."""

    # ==================== REPOSITORIES ====================
    @provide(scope=Scope.REQUEST)
    def get_department_repository(self, db: Database) -> DepartmentRepository:
        return SqlDepartmentRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_news_repository(self, db: Database) -> NewsRepository:
        return SqlNewsRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, db: Database) -> UserRepository:
        return SqlUserRepository(db)

    # ==================== HANDLERS ====================
    @provide(scope=Scope.REQUEST)
    def get_list_departments_handler(
        self, department_repository: DepartmentRepository
    ) -> ListDepartmentsHandler:
        return ListDepartmentsHandler(department_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_news_handler(self, news_repository: NewsRepository) -> ListNewsHandler:
        return ListNewsHandler(news_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(self, user_repository: UserRepository) -> ListUsersHandler:
        return ListUsersHandler(user_repository)


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create the DI container.

    Called ONCE at app startup. Pass providers to replace the infrastructure
    (e.g. test doubles); AppProvider is always included.
    """
    infrastructure = providers or (InfrastructureProvider(),)
    return make_async_container(AppProvider(), *infrastructure)
