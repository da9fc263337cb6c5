"""Built-in catalog of pattern examples.

Every pattern ships a conceptual example and a real-world example. Each
entry below is registered under both variants.
"""

from typing import List, Tuple

from design_patterns.infrastructure.registry.example_registry import ExampleRegistry

# (pattern, category, package, conceptual summary, real-world summary)
CatalogEntry = Tuple[str, str, str, str, str]

CATALOG: List[CatalogEntry] = [
    # Creational
    ("Abstract Factory", "creational", "abstract_factory",
     "Families of related products created through a factory interface",
     "Twig and PHPTemplate template families rendering the same page"),
    ("Builder", "creational", "builder",
     "Director assembling products step by step",
     "MySQL and PostgreSQL SQL query builders"),
    ("Factory Method", "creational", "factory_method",
     "Creators delegating product construction to subclasses",
     "Posting a message through Facebook and LinkedIn connectors"),
    ("Prototype", "creational", "prototype",
     "Cloning objects with nested and circular references",
     "Copying a blog page together with its author link"),
    ("Singleton", "creational", "singleton",
     "One instance per subclass, served by get_instance",
     "Application-wide logger and configuration singletons"),
    # Structural
    ("Adapter", "structural", "adapter",
     "Adapting an incompatible interface to the client's target",
     "Sending notifications through a Slack API adapter"),
    ("Bridge", "structural", "bridge",
     "Abstractions delegating work to interchangeable implementations",
     "Web pages rendered as HTML or JSON"),
    ("Composite", "structural", "composite",
     "Tree of leaves and branches treated uniformly",
     "Nested HTML form elements"),
    ("Decorator", "structural", "decorator",
     "Wrapping components to add behavior",
     "Stacked text filters for user comments and forum posts"),
    ("Facade", "structural", "facade",
     "Simple interface over a set of subsystems",
     "Downloading and converting a YouTube video"),
    ("Flyweight", "structural", "flyweight",
     "Sharing intrinsic state between many objects",
     "Cat database sharing breed variations between cats"),
    ("Proxy", "structural", "proxy",
     "Access control and logging in front of a real subject",
     "Caching proxy in front of a downloader"),
    # Behavioral
    ("Chain of Responsibility", "behavioral", "chain_of_responsibility",
     "Request passed along a chain of handlers",
     "Login middleware: throttling, user check and role check"),
    ("Command", "behavioral", "command",
     "Requests turned into objects executed by an invoker",
     "Queued web scraping commands for movie pages"),
    ("Interpreter", "behavioral", "interpreter",
     "Arithmetic expressions in reverse Polish notation",
     "Boolean expressions over named variables"),
    ("Iterator", "behavioral", "iterator",
     "Straight and reverse traversal of a collection",
     "Iterating over the rows of a CSV file"),
    ("Mediator", "behavioral", "mediator",
     "Components talking through a mediator",
     "Event dispatcher connecting repository, logger and notifications"),
    ("Memento", "behavioral", "memento",
     "Saving and restoring originator state",
     "Text editor undo history"),
    ("Observer", "behavioral", "observer",
     "Subject notifying attached observers",
     "User repository events with logger and onboarding observers"),
    ("State", "behavioral", "state",
     "Context switching between concrete states",
     "Invoice lifecycle from draft to paid or void"),
    ("Strategy", "behavioral", "strategy",
     "Interchangeable sorting strategies",
     "Payment methods in an online shop"),
    ("Template Method", "behavioral", "template_method",
     "Algorithm skeleton with overridable steps and hooks",
     "Posting to Facebook or Twitter"),
    ("Visitor", "behavioral", "visitor",
     "Double dispatch between components and visitors",
     "Salary reports for a company, department or employee"),
]

# Real-world examples that read from standard input
INTERACTIVE_EXAMPLES = {"chain_of_responsibility", "template_method"}


def module_path(category: str, package: str, variant: str) -> str:
    return f"design_patterns.patterns.{category}.{package}.{variant}"


def register_builtin_examples(registry: ExampleRegistry) -> None:
    """Register both variants of every built-in pattern."""
    for pattern, category, package, conceptual_summary, real_world_summary in CATALOG:
        registry.register_example(
            pattern=pattern,
            variant="conceptual",
            category=category,
            module=module_path(category, package, "conceptual"),
            summary=conceptual_summary,
        )
        registry.register_example(
            pattern=pattern,
            variant="real_world",
            category=category,
            module=module_path(category, package, "real_world"),
            summary=real_world_summary,
            interactive=package in INTERACTIVE_EXAMPLES,
        )
