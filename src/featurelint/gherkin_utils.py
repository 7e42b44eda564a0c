from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Pattern

from .model import Feature, FeatureChild

__all__ = ["Placeholder", "feature_spread", "iter_placeholders"]

# The name may contain spaces and anything but ">", but may not start or end with a space.
PLACEHOLDER: Pattern[str] = re.compile(r"<((?! )[^>]+(?<! ))>")


class Placeholder(NamedTuple):
    name: str
    offset: int


def iter_placeholders(text: str) -> Iterator[Placeholder]:
    """
    Yield every ``<name>`` placeholder in the text.

    ``offset`` is the index of the opening ``<``. Each call scans the text from the start.
    """
    for match in PLACEHOLDER.finditer(text):
        yield Placeholder(name=match.group(1), offset=match.start())


def feature_spread(feature: Feature) -> tuple[FeatureChild, ...]:
    """Return the children of the feature with rules replaced by their own children."""
    children: list[FeatureChild] = []
    for child in feature.children:
        if child.rule is not None:
            children.extend(child.rule.children)
        else:
            children.append(child)
    return tuple(children)
