"""Bridge - real-world example: pages and renderers.

Pages (the abstraction) describe what goes on a page. Renderers (the
implementation) decide how each part looks. Any page works with any
renderer, and a page can switch renderers at runtime.
"""

from abc import ABC, abstractmethod
from typing import List


class Renderer(ABC):
    @abstractmethod
    def render_title(self, title: str) -> str:
        pass

    @abstractmethod
    def render_text_block(self, text: str) -> str:
        pass

    @abstractmethod
    def render_image(self, url: str) -> str:
        pass

    @abstractmethod
    def render_link(self, url: str, title: str) -> str:
        pass

    @abstractmethod
    def render_header(self) -> str:
        pass

    @abstractmethod
    def render_footer(self) -> str:
        pass

    @abstractmethod
    def render_parts(self, parts: List[str]) -> str:
        pass


class HTMLRenderer(Renderer):
    def render_title(self, title: str) -> str:
        return f"<h1>{title}</h1>"

    def render_text_block(self, text: str) -> str:
        return f"<div class='text'>{text}</div>"

    def render_image(self, url: str) -> str:
        return f"<img src='{url}'>"

    def render_link(self, url: str, title: str) -> str:
        return f"<a href='{url}'>{title}</a>"

    def render_header(self) -> str:
        return "<html><body>"

    def render_footer(self) -> str:
        return "</body></html>"

    def render_parts(self, parts: List[str]) -> str:
        return "\n".join(parts)


class JsonRenderer(Renderer):
    def render_title(self, title: str) -> str:
        return f'"title": "{title}"'

    def render_text_block(self, text: str) -> str:
        return f'"text": "{text}"'

    def render_image(self, url: str) -> str:
        return f'"img": "{url}"'

    def render_link(self, url: str, title: str) -> str:
        return f'"link": {{"href": "{url}", "title": "{title}"}}'

    def render_header(self) -> str:
        return ""

    def render_footer(self) -> str:
        return ""

    def render_parts(self, parts: List[str]) -> str:
        # Header and footer render empty in JSON.
        return "{\n" + ",\n".join(part for part in parts if part) + "\n}"


class Page(ABC):
    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def change_renderer(self, renderer: Renderer) -> None:
        self.renderer = renderer

    @abstractmethod
    def view(self) -> str:
        pass


class SimplePage(Page):
    def __init__(self, renderer: Renderer, title: str, content: str):
        super().__init__(renderer)
        self.title = title
        self.content = content

    def view(self) -> str:
        return self.renderer.render_parts([
            self.renderer.render_header(),
            self.renderer.render_title(self.title),
            self.renderer.render_text_block(self.content),
            self.renderer.render_footer(),
        ])


class Product:
    def __init__(self, product_id: str, title: str, description: str, image: str, price: float):
        self.id = product_id
        self.title = title
        self.description = description
        self.image = image
        self.price = price


class ProductPage(Page):
    def __init__(self, renderer: Renderer, product: Product):
        super().__init__(renderer)
        self.product = product

    def view(self) -> str:
        return self.renderer.render_parts([
            self.renderer.render_header(),
            self.renderer.render_title(self.product.title),
            self.renderer.render_text_block(self.product.description),
            self.renderer.render_image(self.product.image),
            self.renderer.render_text_block(f"${self.product.price:,.2f}"),
            self.renderer.render_link(f"/cart/add/{self.product.id}", "Add to cart"),
            self.renderer.render_footer(),
        ])


def client_code(page: Page) -> None:
    print(page.view())


def main() -> None:
    html_renderer = HTMLRenderer()
    json_renderer = JsonRenderer()

    page = SimplePage(html_renderer, "Home", "Welcome to our website!")
    print("HTML view of a simple content page:")
    client_code(page)
    print("\n")

    page.change_renderer(json_renderer)
    print("JSON view of a simple content page, rendered with the same client code:")
    client_code(page)
    print("\n")

    product = Product("123", "Star Wars, episode1",
                      "A long time ago in a galaxy far, far away...",
                      "/images/star-wars.jpeg", 39.95)
    page = ProductPage(html_renderer, product)
    print("HTML view of a product page, same client code:")
    client_code(page)
    print("\n")

    page.change_renderer(json_renderer)
    print("JSON view of a simple content page, with the same client code:")
    client_code(page)


if __name__ == "__main__":
    main()
