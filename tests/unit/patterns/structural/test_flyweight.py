"""Tests for the Flyweight examples."""

from design_patterns.data import CATS_CSV
from design_patterns.patterns.structural.flyweight import conceptual, real_world


class TestFlyweightFactory:
    """Test sharing flyweights by state."""

    def test_key_ignores_order(self):
        """Test the same state in a different order maps to one key."""
        assert conceptual.FlyweightFactory.get_key(["b", "a"]) == "a_b"
        assert conceptual.FlyweightFactory.get_key(["a", "b"]) == "a_b"

    def test_get_flyweight_reuses_existing(self, capsys):
        """Test a known state is reused and an unknown one is created."""
        factory = conceptual.FlyweightFactory([["BMW", "M5", "red"]])

        first = factory.get_flyweight(["red", "BMW", "M5"])
        second = factory.get_flyweight(["BMW", "M5", "red"])
        factory.get_flyweight(["BMW", "X1", "red"])

        assert first is second
        assert len(factory) == 2
        assert capsys.readouterr().out == (
            "FlyweightFactory: Reusing existing flyweight.\n"
            "FlyweightFactory: Reusing existing flyweight.\n"
            "FlyweightFactory: Can't find a flyweight, creating new one.\n"
        )

    def test_main_output(self, capsys):
        """Test the count grows from five to six."""
        conceptual.main()

        out = capsys.readouterr().out
        assert "FlyweightFactory: I have 5 flyweights:" in out
        assert "FlyweightFactory: I have 6 flyweights:" in out
        assert ('Flyweight: Displaying shared (["BMW", "M5", "red"]) '
                'and unique (["CL234IR", "James Doe"]) state.') in out


class TestCatDataBase:
    """Test the cat database."""

    def test_cats_share_variations(self, capsys):
        """Test cats with identical breed data share one variation."""
        db = real_world.CatDataBase()

        db.load_csv(CATS_CSV)

        assert len(db.cats) == 8
        assert len(db.variations) == 5
        steve = db.find_cat({"name": "Steve"})
        siri = db.find_cat({"name": "Siri"})
        assert steve.variation is siri.variation

    def test_find_cat_by_variation_field(self, capsys):
        """Test queries can mix cat and variation fields."""
        db = real_world.CatDataBase()
        db.load_csv(CATS_CSV)

        cat = db.find_cat({"breed": "Siamese", "owner": "Jane Doe"})

        assert cat.name == "Luna"

    def test_find_cat_with_unknown_field(self, capsys):
        """Test a query field no cat has matches nothing."""
        db = real_world.CatDataBase()
        db.add_cat("Tom", "3", "Ann", "Persian", "/p.jpg", "White", "Solid", "Long", "Large")

        assert db.find_cat({"whiskers": "long"}) is None
        assert capsys.readouterr().out.endswith(
            "CatDataBase: Sorry, your query does not yield any results.\n"
        )

    def test_main_output(self, capsys):
        """Test Siri is found and Bob is not."""
        real_world.main()

        out = capsys.readouterr().out
        assert out.count("CatDataBase: Added a cat (") == 8
        assert ("= Siri =\n"
                "Age: 2\n"
                "Owner: Alexander Shvets\n"
                "Breed: Bengal\n"
                "Image: /cats/bengal.jpg\n"
                "Color: Brown\n"
                "Texture: Stripes\n") in out
        assert out.endswith(
            'Client: Let\'s look for a cat named "Bob".\n'
            "CatDataBase: Sorry, your query does not yield any results.\n"
        )
