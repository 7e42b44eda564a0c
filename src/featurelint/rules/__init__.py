from __future__ import annotations

from ..rule import Rule
from . import no_unused_variables

__all__ = ["DEFAULT_RULES"]

DEFAULT_RULES = {
    no_unused_variables.NAME: Rule(
        name=no_unused_variables.NAME,
        check=no_unused_variables.run,
        documentation=no_unused_variables.DOCUMENTATION,
    ),
}
