"""Tests for the Builder examples."""

import pytest

from design_patterns.domain.core.exceptions import QueryBuilderError
from design_patterns.patterns.creational.builder import conceptual, real_world


class TestBuilderConceptual:
    """Test the director and the concrete builder."""

    def test_get_product_resets_builder(self):
        """Test a fresh product is started after the result is taken."""
        builder = conceptual.ConcreteBuilder1()
        builder.produce_part_a()

        first = builder.get_product()
        second = builder.get_product()

        assert first.parts == ["PartA1"]
        assert second.parts == []
        assert first is not second

    def test_director_full_featured_product(self):
        """Test the director runs every step in order."""
        builder = conceptual.ConcreteBuilder1()
        director = conceptual.Director()
        director.set_builder(builder)

        director.build_full_featured_product()

        assert builder.get_product().parts == ["PartA1", "PartB1", "PartC1"]

    def test_main_output(self, capsys):
        """Test the three products are listed."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Standard basic product:\n"
            "Product parts: PartA1\n\n"
            "Standard full featured product:\n"
            "Product parts: PartA1, PartB1, PartC1\n\n"
            "Custom product:\n"
            "Product parts: PartA1, PartC1\n\n"
        )


class TestQueryBuilders:
    """Test the SQL query builders."""

    def test_mysql_query(self):
        """Test MySQL syntax for the sample query."""
        assert real_world.client_code(real_world.MysqlQueryBuilder()) == (
            "SELECT name, email, password FROM users "
            "WHERE age > '18' AND age < '30' LIMIT 10, 20;"
        )

    def test_postgres_query(self):
        """Test PostgreSQL only differs in the LIMIT clause."""
        assert real_world.client_code(real_world.PostgresQueryBuilder()) == (
            "SELECT name, email, password FROM users "
            "WHERE age > '18' AND age < '30' LIMIT 10 OFFSET 20;"
        )

    def test_select_starts_a_new_query(self):
        """Test select() discards the previous query."""
        builder = real_world.MysqlQueryBuilder()
        builder.select("users", ["name"]).where("age", 18, ">")

        sql = builder.select("orders", ["id"]).get_sql()

        assert sql == "SELECT id FROM orders;"

    def test_where_defaults_to_equality(self):
        """Test the default operator."""
        builder = real_world.MysqlQueryBuilder()

        sql = builder.select("users", ["name"]).where("email", "a@example.com").get_sql()

        assert sql == "SELECT name FROM users WHERE email = 'a@example.com';"

    def test_update_query(self):
        """Test UPDATE statements accept WHERE conditions."""
        builder = real_world.PostgresQueryBuilder()

        sql = builder.update("users", {"name": "Ann", "age": 31}).where("id", 7).get_sql()

        assert sql == "UPDATE users SET name = 'Ann', age = '31' WHERE id = '7';"

    def test_insert_query(self):
        """Test INSERT statements list fields and quoted values."""
        builder = real_world.MysqlQueryBuilder()

        sql = builder.insert("users", {"name": "Ann", "email": "ann@example.com"}).get_sql()

        assert sql == "INSERT INTO users (name, email) VALUES ('Ann', 'ann@example.com');"

    def test_where_rejected_on_insert(self):
        """Test WHERE is only allowed on SELECT and UPDATE."""
        builder = real_world.MysqlQueryBuilder().insert("users", {"name": "Ann"})

        with pytest.raises(QueryBuilderError, match="WHERE can only be added"):
            builder.where("id", 1)

    @pytest.mark.parametrize("builder_class", [
        real_world.MysqlQueryBuilder,
        real_world.PostgresQueryBuilder,
    ])
    @pytest.mark.parametrize("start", [
        lambda builder: builder.update("users", {"name": "Ann"}),
        lambda builder: builder.insert("users", {"name": "Ann"}),
    ])
    def test_limit_rejected_outside_select(self, builder_class, start):
        """Test LIMIT is only allowed on SELECT in both dialects."""
        builder = start(builder_class())

        with pytest.raises(QueryBuilderError, match="LIMIT can only be added to SELECT"):
            builder.limit(1, 2)

    @pytest.mark.parametrize("step", [
        lambda builder: builder.where("age", 1),
        lambda builder: builder.limit(1, 2),
        lambda builder: builder.get_sql(),
    ])
    def test_steps_require_select(self, step):
        """Test steps fail before a query is started."""
        with pytest.raises(QueryBuilderError):
            step(real_world.MysqlQueryBuilder())

    def test_main_output(self, capsys):
        """Test both dialects are printed."""
        real_world.main()

        out = capsys.readouterr().out
        assert "Testing MySQL query builder:\n" in out
        assert "Testing PostgresSQL query builder:\n" in out
        assert "LIMIT 10, 20;" in out
        assert "LIMIT 10 OFFSET 20;" in out
