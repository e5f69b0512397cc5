"""Policy modes controlling which metadata fields are mandatory."""

from enum import Enum


class PolicyMode(str, Enum):
    """
    Optionality regime of the record types.

    PERMISSIVE: every field is optional.
    SEMI_STRICT: ``Metadata`` fields are optional, nested records require their core fields.
    STRICT: every core field is required; ``cdn``, ``resolution`` and ``size`` stay optional.
    """

    PERMISSIVE = "permissive"
    SEMI_STRICT = "semi_strict"
    STRICT = "strict"

    @property
    def has_builders(self) -> bool:
        return self is not PolicyMode.STRICT


DEFAULT_MODE = PolicyMode.SEMI_STRICT

# Modes in which a field is required
CONSTRAINED = frozenset({PolicyMode.SEMI_STRICT, PolicyMode.STRICT})
STRICT_ONLY = frozenset({PolicyMode.STRICT})
