from sqlalchemy import select

from org_api.domain.value_objects import (
    DepartmentFilters,
    DepartmentType,
    NewsFilters,
    Pagination,
    UserFilters,
)
from org_api.infrastructure.persistence import (
    compile_statement,
    sql_department_repository,
    sql_news_repository,
    sql_user_repository,
)
from org_api.infrastructure.persistence.sql_common import int4_equals, int4_in, read_total
from org_api.infrastructure.persistence.tables import departments

TOO_BIG = 10**20


def test_compiles_to_numbered_placeholders():
    sql, params = compile_statement(
        sql_department_repository.build_count_statement(
            DepartmentFilters(type=DepartmentType.DP, year=2025)
        )
    )
    assert "$1" in sql and "$2" in sql
    assert "count(DISTINCT departments.id)" in sql
    assert params == ["DP", 2025]


def test_department_page_windows_before_joining_programs():
    sql, params = compile_statement(
        sql_department_repository.build_page_statement(
            DepartmentFilters(type=DepartmentType.BE, year=2024),
            Pagination(page=2, limit=5),
        )
    )
    window, _, joins = sql.partition(") AS d")

    assert "LIMIT" in window and "OFFSET" in window
    assert "programs" not in window
    assert "LEFT OUTER JOIN programs AS pr" in joins
    assert params[:2] == ["BE", 2024]


def test_acronym_search_escapes_wildcards():
    _, params = compile_statement(
        sql_department_repository.build_count_statement(DepartmentFilters(acronym="50%_"))
    )
    assert params == ["50/%/_"]


def test_news_statement_binds_the_tag_on_filter_and_join():
    sql, params = compile_statement(
        sql_news_repository.build_page_statement(
            NewsFilters(tag_title="berita", search="rapat"), Pagination()
        )
    )
    assert params.count("berita") == 2
    assert "rapat" in params
    assert "published_at IS NOT NULL" in sql
    assert "EXISTS" in sql


def test_user_filters_become_exists_on_the_page():
    sql, params = compile_statement(
        sql_user_repository.build_page_statement(
            UserFilters(position_names=("ketua",)), Pagination()
        )
    )
    assert 'EXISTS (SELECT' in sql
    assert '"_PositionToUser"' in sql
    assert "ketua" in params


def test_child_statements_are_scoped_to_page_users_and_filters():
    statements = sql_user_repository.build_child_statements(
        UserFilters(position_names=("ketua",)), ["usr-1", "usr-2"]
    )
    compiled = [compile_statement(statement) for statement in statements]

    assert len(compiled) == 3
    for _, params in compiled:
        assert params[:2] == ["usr-1", "usr-2"]
    positions_sql, positions_params = compiled[1]
    assert "positions.name IN" in positions_sql
    assert positions_params[2:] == ["ketua"]


def test_user_count_without_filters_has_no_where():
    sql, params = compile_statement(sql_user_repository.build_count_statement(UserFilters()))
    assert "WHERE" not in sql
    assert params == []


def test_unstorable_year_is_never_bound():
    sql, params = compile_statement(
        sql_department_repository.build_count_statement(DepartmentFilters(year=TOO_BIG))
    )
    assert TOO_BIG not in params
    assert "false" in sql


def test_unstorable_period_years_are_dropped():
    _, params = compile_statement(
        sql_user_repository.build_count_statement(UserFilters(period_years=(2024, TOO_BIG)))
    )
    assert params == [2024]


def test_int4_helpers():
    _, params = compile_statement(
        select(departments.c.id).where(int4_equals(departments.c.period_year, 2024))
    )
    sql, no_params = compile_statement(
        select(departments.c.id).where(int4_in(departments.c.period_year, [TOO_BIG]))
    )

    assert params == [2024]
    assert sql.endswith("WHERE false")
    assert no_params == []


def test_read_total():
    assert read_total([{"total": 4}]) == 4
    assert read_total([]) == 0
    assert read_total([{"total": None}]) == 0
