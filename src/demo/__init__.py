"""Demo — console showcase of the BigNum operations.

Presentation only: calls the public operations of src.core and formats
their results.
"""

from .showcase import (
    Section,
    Showcase,
    ShowcaseConfig,
    ShowcaseLine,
    load_cases,
)

__all__ = [
    "Section",
    "Showcase",
    "ShowcaseConfig",
    "ShowcaseLine",
    "load_cases",
]
