"""Abstract Factory - real-world example: template engine families.

Each factory produces the title and page templates of one template engine
(Twig or plain PHP templates). A page template embeds the title template
made by the same factory, so the two always speak the same syntax.
"""

from abc import ABC, abstractmethod


class TitleTemplate(ABC):
    @abstractmethod
    def get_template_string(self) -> str:
        pass


class TwigTitleTemplate(TitleTemplate):
    def get_template_string(self) -> str:
        return "<h1>{{ title }}</h1>"


class PHPTemplateTitleTemplate(TitleTemplate):
    def get_template_string(self) -> str:
        return "<h1><?= $title; ?></h1>"


class PageTemplate(ABC):
    @abstractmethod
    def get_template_string(self) -> str:
        pass


class BasePageTemplate(PageTemplate):
    """Page templates depend on a title template of their own family."""

    def __init__(self, title_template: TitleTemplate):
        self.title_template = title_template


class TwigPageTemplate(BasePageTemplate):
    def get_template_string(self) -> str:
        rendered_title = self.title_template.get_template_string()
        return (
            '<div class="page">\n'
            f"    {rendered_title}\n"
            '    <article class="content">{{ content }}</article>\n'
            "</div>"
        )


class PHPTemplatePageTemplate(BasePageTemplate):
    def get_template_string(self) -> str:
        rendered_title = self.title_template.get_template_string()
        return (
            '<div class="page">\n'
            f"    {rendered_title}\n"
            '    <article class="content"><?= $content; ?></article>\n'
            "</div>"
        )


class TemplateFactory(ABC):
    """Creates every kind of template for one engine."""

    @abstractmethod
    def create_title_template(self) -> TitleTemplate:
        pass

    @abstractmethod
    def create_page_template(self) -> PageTemplate:
        pass


class TwigTemplateFactory(TemplateFactory):
    def create_title_template(self) -> TitleTemplate:
        return TwigTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        return TwigPageTemplate(self.create_title_template())


class PHPTemplateFactory(TemplateFactory):
    def create_title_template(self) -> TitleTemplate:
        return PHPTemplateTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        return PHPTemplatePageTemplate(self.create_title_template())


def template_renderer(factory: TemplateFactory) -> None:
    page_template = factory.create_page_template()
    print(page_template.get_template_string())


def main() -> None:
    print("Testing rendering with the Twig factory:")
    template_renderer(TwigTemplateFactory())

    print()

    print("Testing rendering with the PHPTemplate factory:")
    template_renderer(PHPTemplateFactory())


if __name__ == "__main__":
    main()
