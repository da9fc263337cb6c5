"""Tests for the Decorator examples."""

from design_patterns.patterns.structural.decorator import conceptual, real_world


class TestDecoratorConceptual:
    """Test stacked decorators."""

    def test_decorators_wrap_in_order(self):
        """Test the outermost decorator reports first."""
        component = conceptual.ConcreteDecoratorA(
            conceptual.ConcreteDecoratorB(conceptual.ConcreteComponent())
        )

        assert component.operation() == "ConcreteDecoratorA(ConcreteDecoratorB(ConcreteComponent))"

    def test_main_output(self, capsys):
        """Test the simple and decorated results."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Client: I've got a simple component:\n"
            "RESULT: ConcreteComponent\n\n"
            "Client: Now I've got a decorated component:\n"
            "RESULT: ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))\n"
        )


class TestTextFilters:
    """Test text formatting decorators."""

    def test_plain_text_filter_strips_all_tags(self):
        """Test every tag is removed."""
        text_filter = real_world.PlainTextFilter(real_world.TextInput())

        assert text_filter.format_text("<p>Hi <b>there</b></p>") == "Hi there"

    def test_dangerous_filter_removes_scripts_and_handlers(self):
        """Test scripts and event attributes are removed, other tags kept."""
        text_filter = real_world.DangerousHTMLTagsFilter(real_world.TextInput())

        result = text_filter.format_text(
            "<a href='/x' onclick='steal()'>link</a><script>alert(1)</script>"
        )

        assert "<script" not in result
        assert "onclick=" not in result
        assert "<a href='/x' 'steal()'>link</a>" == result

    def test_markdown_format(self):
        """Test headers, paragraphs and emphasis."""
        markdown = real_world.MarkdownFormat(real_world.TextInput())

        assert markdown.format_text("## Title\n\nSome **bold** and *em*") == (
            "<h2>Title</h2>\n\n<p>Some <strong>bold</strong> and <em>em</em></p>"
        )

    def test_safe_forum_post(self):
        """Test markdown plus dangerous tag filtering of the forum post."""
        text_filter = real_world.DangerousHTMLTagsFilter(
            real_world.MarkdownFormat(real_world.TextInput())
        )

        result = text_filter.format_text(real_world.DANGEROUS_FORUM_POST)

        assert result.startswith("<h1>Welcome</h1>\n\n")
        assert "<strong>gorgeous</strong>" in result
        assert "performXSSAttack" not in result

    def test_main_output(self, capsys):
        """Test the unsafe rendering keeps the script and the safe ones do not."""
        real_world.main()

        sections = capsys.readouterr().out.split("Website renders")
        assert len(sections) == 5
        assert "<script" in sections[1]
        assert "<script" not in sections[2]
        assert "<script" in sections[3]
        assert "<h1>Welcome</h1>" in sections[4]
        assert "performXSSAttack" not in sections[4]
