"""Design Patterns Catalog - Root Package.

Runnable demonstrations of the classic Gang-of-Four design patterns. Every
pattern ships twice: a commented conceptual version showing the bare roles,
and a real-world version recasting the same roles into a plausible scenario.

Key Components:
    - patterns: the example modules, grouped by creational/structural/behavioral
    - infrastructure: logging, the example registry and the example runner
    - config: configuration schemas and loading
    - cli: command line interface

Usage:
    Every example is a standalone module:

    >>> python -m design_patterns.patterns.structural.adapter.conceptual

    or can be run through the catalog CLI:

    >>> design-patterns patterns run adapter --variant real_world
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
