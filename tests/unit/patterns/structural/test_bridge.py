"""Tests for the Bridge examples."""

from design_patterns.patterns.structural.bridge import conceptual, real_world


class TestBridgeConceptual:
    """Test abstractions delegating to implementations."""

    def test_main_output(self, capsys):
        """Test both abstraction/implementation pairs."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Abstraction: Base operation with:\n"
            "ConcreteImplementationA: Here's the result on the platform A.\n"
            "\n"
            "ExtendedAbstraction: Extended operation with:\n"
            "ConcreteImplementationB: Here's the result on the platform B.\n"
        )


class TestPagesAndRenderers:
    """Test pages rendered by different renderers."""

    def _product(self):
        return real_world.Product("7", "Lamp", "Bright.", "/lamp.png", 1234.5)

    def test_simple_page_html(self):
        """Test the HTML rendering of a simple page."""
        page = real_world.SimplePage(real_world.HTMLRenderer(), "Home", "Welcome!")

        assert page.view() == (
            "<html><body>\n"
            "<h1>Home</h1>\n"
            "<div class='text'>Welcome!</div>\n"
            "</body></html>"
        )

    def test_simple_page_json_skips_header_and_footer(self):
        """Test the JSON rendering has no empty parts."""
        page = real_world.SimplePage(real_world.JsonRenderer(), "Home", "Welcome!")

        assert page.view() == '{\n"title": "Home",\n"text": "Welcome!"\n}'

    def test_product_page_formats_price_and_link(self):
        """Test the product page parts."""
        view = real_world.ProductPage(real_world.HTMLRenderer(), self._product()).view()

        assert "<div class='text'>$1,234.50</div>" in view
        assert "<a href='/cart/add/7'>Add to cart</a>" in view
        assert "<img src='/lamp.png'>" in view

    def test_change_renderer(self):
        """Test a page switches renderer at runtime."""
        page = real_world.ProductPage(real_world.HTMLRenderer(), self._product())

        page.change_renderer(real_world.JsonRenderer())

        assert page.view().startswith('{\n"title": "Lamp"')
        assert '"link": {"href": "/cart/add/7", "title": "Add to cart"}' in page.view()

    def test_main_output(self, capsys):
        """Test all four views are printed."""
        real_world.main()

        out = capsys.readouterr().out
        assert out.count("<html><body>") == 2
        assert out.count('"title": ') == 3
        assert "$39.95" in out
