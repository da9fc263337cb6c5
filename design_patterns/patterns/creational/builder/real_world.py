"""Builder - real-world example: SQL query builders.

The same client code assembles a query through the builder interface and
gets dialect-specific SQL from whichever concrete builder it was handed.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from design_patterns.domain.core.exceptions import QueryBuilderError


class SQLQueryBuilder(ABC):
    """Declares the steps needed to assemble an SQL query."""

    @abstractmethod
    def select(self, table: str, fields: List[str]) -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def update(self, table: str, values: Dict[str, Any]) -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def insert(self, table: str, values: Dict[str, Any]) -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def where(self, field: str, value: Any, operator: str = "=") -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def limit(self, start: int, offset: int) -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def get_sql(self) -> str:
        pass


class _Query:
    def __init__(self):
        self.base = ""
        self.type = ""
        self.where: List[str] = []
        self.limit = ""


class MysqlQueryBuilder(SQLQueryBuilder):
    """Builds queries in MySQL syntax."""

    def __init__(self):
        self._query: Optional[_Query] = None

    def reset(self) -> None:
        self._query = _Query()

    def select(self, table: str, fields: List[str]) -> "SQLQueryBuilder":
        self.reset()
        self._query.base = f"SELECT {', '.join(fields)} FROM {table}"
        self._query.type = "select"
        return self

    def update(self, table: str, values: Dict[str, Any]) -> "SQLQueryBuilder":
        self.reset()
        assignments = ", ".join(f"{field} = '{value}'" for field, value in values.items())
        self._query.base = f"UPDATE {table} SET {assignments}"
        self._query.type = "update"
        return self

    def insert(self, table: str, values: Dict[str, Any]) -> "SQLQueryBuilder":
        self.reset()
        fields = ", ".join(values)
        literals = ", ".join(f"'{value}'" for value in values.values())
        self._query.base = f"INSERT INTO {table} ({fields}) VALUES ({literals})"
        self._query.type = "insert"
        return self

    def where(self, field: str, value: Any, operator: str = "=") -> "SQLQueryBuilder":
        self._require_query()
        if self._query.type not in ("select", "update"):
            raise QueryBuilderError("WHERE can only be added to SELECT or UPDATE")
        self._query.where.append(f"{field} {operator} '{value}'")
        return self

    def limit(self, start: int, offset: int) -> "SQLQueryBuilder":
        self._require_query()
        if self._query.type != "select":
            raise QueryBuilderError("LIMIT can only be added to SELECT")
        self._query.limit = f" LIMIT {start}, {offset}"
        return self

    def get_sql(self) -> str:
        self._require_query()
        query = self._query
        sql = query.base
        if query.where:
            sql += " WHERE " + " AND ".join(query.where)
        if query.limit:
            sql += query.limit
        return sql + ";"

    def _require_query(self) -> None:
        if self._query is None:
            raise QueryBuilderError("A query must be started with select(), update() or insert() first")


class PostgresQueryBuilder(MysqlQueryBuilder):
    """PostgreSQL differs from MySQL only in its LIMIT syntax."""

    def limit(self, start: int, offset: int) -> "SQLQueryBuilder":
        super().limit(start, offset)
        self._query.limit = f" LIMIT {start} OFFSET {offset}"
        return self


def client_code(query_builder: SQLQueryBuilder) -> str:
    return (
        query_builder.select("users", ["name", "email", "password"])
        .where("age", 18, ">")
        .where("age", 30, "<")
        .limit(10, 20)
        .get_sql()
    )


def main() -> None:
    print("Testing MySQL query builder:")
    print(client_code(MysqlQueryBuilder()))

    print()

    print("Testing PostgresSQL query builder:")
    print(client_code(PostgresQueryBuilder()))


if __name__ == "__main__":
    main()
