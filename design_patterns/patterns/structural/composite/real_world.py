"""Composite - real-world example: HTML forms.

A form is a tree of fieldsets and inputs. Data is fanned out to the tree by
field name, collected back the same way, and the whole tree renders itself
recursively.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class FormElement(ABC):
    def __init__(self, name: str, title: str):
        self.name = name
        self.title = title
        self.data: Any = None

    def get_name(self) -> str:
        return self.name

    def set_data(self, data: Any) -> None:
        self.data = data

    def get_data(self) -> Any:
        return self.data

    @abstractmethod
    def render(self) -> str:
        pass


class Input(FormElement):
    def __init__(self, name: str, title: str, input_type: str):
        super().__init__(name, title)
        self.type = input_type

    def render(self) -> str:
        value = "" if self.data is None else self.data
        return (f'<label for="{self.name}">{self.title}</label>\n'
                f'<input name="{self.name}" type="{self.type}" value="{value}">\n')


class FieldComposite(FormElement):
    """Base class for elements that hold other elements, keyed by name."""

    def __init__(self, name: str, title: str):
        super().__init__(name, title)
        self.fields: Dict[str, FormElement] = {}

    def add(self, field: FormElement) -> None:
        self.fields[field.get_name()] = field

    def remove(self, component: FormElement) -> None:
        self.fields = {name: field for name, field in self.fields.items() if field is not component}

    def set_data(self, data: Dict[str, Any]) -> None:
        for name, field in self.fields.items():
            if name in data:
                field.set_data(data[name])

    def get_data(self) -> Dict[str, Any]:
        return {name: field.get_data() for name, field in self.fields.items()}

    def render(self) -> str:
        return "".join(field.render() for field in self.fields.values())


class Fieldset(FieldComposite):
    def render(self) -> str:
        output = super().render()
        return f"<fieldset><legend>{self.title}</legend>\n{output}</fieldset>\n"


class Form(FieldComposite):
    def __init__(self, name: str, title: str, url: str):
        super().__init__(name, title)
        self.url = url

    def render(self) -> str:
        output = super().render()
        return f'<form action="{self.url}">\n<h3>{self.title}</h3>\n{output}</form>\n'


def get_product_form() -> FormElement:
    form = Form("product", "Add product", "/product/add")
    form.add(Input("name", "Name", "text"))
    form.add(Input("description", "Description", "text"))

    picture = Fieldset("photo", "Product photo")
    picture.add(Input("caption", "Caption", "text"))
    picture.add(Input("image", "Image", "file"))
    form.add(picture)

    return form


def load_product_data(form: FormElement) -> None:
    data = {
        "name": "Apple MacBook",
        "description": "A decent laptop.",
        "photo": {
            "caption": "Front photo.",
            "image": "photo1.png",
        },
    }
    form.set_data(data)


def render_product(form: FormElement) -> None:
    print(form.render(), end="")


def main() -> None:
    form = get_product_form()
    load_product_data(form)
    render_product(form)


if __name__ == "__main__":
    main()
