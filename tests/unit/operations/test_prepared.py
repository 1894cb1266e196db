"""
Unit tests for prepared statements (SQL plus bind values).
"""

import sqlite3

import pytest

from param_sql import (
    BoundStatement,
    build_find_sql,
    prepare_count,
    prepare_delete,
    prepare_find,
    prepare_insert,
    prepare_update,
)
from param_sql.exceptions import InvalidArgumentError


class TestPrepare:
    """Tests for the prepare_* helpers."""

    def test_count(self):
        statement = prepare_count("test", {"foo": "bar", "test": "test"})
        assert statement == BoundStatement(
            "SELECT COUNT(*) AS counter FROM test WHERE foo=? AND test=?", ("bar", "test")
        )

    def test_find_matches_build(self):
        criteria = {"name": "john"}
        options = {"projections": ["id"], "limit": 1}
        sql, params = prepare_find("users", criteria, options)
        assert sql == build_find_sql("users", criteria, options)
        assert params == ("john",)

    def test_insert_rows(self):
        statement = prepare_insert(
            "test", [{"name": "a", "age": 1}, {"age": 2, "name": "b"}]
        )
        assert statement.sql == "INSERT INTO test (name,age) VALUES (?,?),(?,?)"
        assert statement.params == ("a", 1, "b", 2)

    def test_insert_requires_rows(self):
        with pytest.raises(InvalidArgumentError):
            prepare_insert("test", [])

    def test_insert_rows_must_share_columns(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            prepare_insert("test", [{"name": "a"}, {"name": "b", "age": 2}])

        assert exc_info.value.argument == "rows"

    def test_update_binds_updates_then_criteria(self):
        statement = prepare_update(
            "test", {"name": "test", "age": 30}, {"name": "john", "address": "x"}
        )
        assert statement.sql == "UPDATE test SET name=?,address=? WHERE name=? AND age=?"
        assert statement.params == ("john", "x", "test", 30)

    def test_delete(self):
        statement = prepare_delete("test", {"name": "john"}, {"limit": 2})
        assert statement.sql == "DELETE FROM test WHERE name=? LIMIT 2"
        assert statement.params == ("john",)

    @pytest.mark.parametrize(
        "statement",
        [
            prepare_count("t", {"a": 1, "b": 2}),
            prepare_find("t", {"a": 1}, {"sort": {"a": "ASC"}}),
            prepare_insert("t", [{"a": 1, "b": 2}] * 3),
            prepare_update("t", {"a": 1}, {"b": 2, "c": 3}),
            prepare_delete("t", {}),
        ],
    )
    def test_placeholder_count_matches_params(self, statement):
        assert statement.sql.count("?") == len(statement.params)


class TestPreparedAgainstSqlite:
    """The emitted SQL binds correctly through a real DB-API driver."""

    @pytest.fixture
    def conn(self):
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE people (name TEXT, age INTEGER)")
        yield conn
        conn.close()

    def test_round_trip(self, conn):
        conn.execute(
            *prepare_insert(
                "people",
                [{"name": "ann", "age": 30}, {"name": "bob", "age": 40}, {"name": "cid", "age": 40}],
            )
        )
        conn.execute(*prepare_update("people", {"name": "bob"}, {"age": 41}))

        count_sql, count_params = prepare_count("people", {"age": 40})
        assert conn.execute(count_sql, count_params).fetchone()[0] == 1

        rows = conn.execute(
            *prepare_find("people", {}, {"projections": ["name"], "sort": {"age": "DESC"}, "limit": 2})
        ).fetchall()
        assert rows == [("bob",), ("cid",)]

        conn.execute(*prepare_delete("people", {"name": "ann"}))
        assert conn.execute(*prepare_count("people", {})).fetchone()[0] == 2
