"""Tests for the Abstract Factory examples."""

from design_patterns.patterns.creational.abstract_factory import conceptual, real_world


class TestAbstractFactoryConceptual:
    """Test product families created by the conceptual factories."""

    def test_factories_create_matching_variants(self):
        """Test each factory creates products of its own variant."""
        factory = conceptual.ConcreteFactory2()

        product_a = factory.create_product_a()
        product_b = factory.create_product_b()

        assert isinstance(product_a, conceptual.ConcreteProductA2)
        assert isinstance(product_b, conceptual.ConcreteProductB2)
        assert product_b.another_useful_function_b(product_a) == (
            "The result of the B2 collaborating with the (The result of the product A2.)"
        )

    def test_main_output(self, capsys):
        """Test the narration for both factories."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Client: Testing client code with the first factory type:\n"
            "The result of the product B1.\n"
            "The result of the B1 collaborating with the (The result of the product A1.)\n"
            "\n"
            "Client: Testing the same client code with the second factory type:\n"
            "The result of the product B2.\n"
            "The result of the B2 collaborating with the (The result of the product A2.)\n"
        )


class TestAbstractFactoryRealWorld:
    """Test template engine families."""

    def test_twig_page_embeds_twig_title(self):
        """Test the Twig page template uses the Twig title syntax."""
        page = real_world.TwigTemplateFactory().create_page_template()

        assert page.get_template_string() == (
            '<div class="page">\n'
            "    <h1>{{ title }}</h1>\n"
            '    <article class="content">{{ content }}</article>\n'
            "</div>"
        )

    def test_php_page_embeds_php_title(self):
        """Test the PHP page template uses the PHP title syntax."""
        page = real_world.PHPTemplateFactory().create_page_template()

        template = page.get_template_string()
        assert "<h1><?= $title; ?></h1>" in template
        assert "<?= $content; ?>" in template
        assert "{{" not in template

    def test_main_output(self, capsys):
        """Test both renderings are printed under their headers."""
        real_world.main()

        out = capsys.readouterr().out
        assert out.startswith("Testing rendering with the Twig factory:\n")
        assert "\n\nTesting rendering with the PHPTemplate factory:\n" in out
        assert out.count('<div class="page">') == 2
