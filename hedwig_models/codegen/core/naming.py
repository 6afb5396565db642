"""
Naming utilities for safe code generation.

Turns schema paths and message versions into exported identifiers:
case conversion, initialism normalization and version suffixes.
"""

from typing import Iterable, List, Optional

# Characters that start a new word when converting to camel case
WORD_SEPARATORS = {"_", " ", "-", "."}

PATH_SEPARATOR = "_"


def to_camel(value: str) -> str:
    """
    Convert a name to UpperCamelCase.

    ASCII letters and digits are kept, the first letter and every letter
    following a separator or a digit is upper-cased, and any other
    character is dropped: ``trip_created`` -> ``TripCreated``,
    ``vehicle_1.0`` -> ``Vehicle10``.
    """
    value = value.strip()
    if not value:
        return value

    result = []
    cap_next = True
    for char in value:
        is_upper = "A" <= char <= "Z"
        is_lower = "a" <= char <= "z"
        is_digit = "0" <= char <= "9"

        if cap_next and is_lower:
            char = char.upper()

        if is_upper or is_lower:
            result.append(char)
            cap_next = False
        elif is_digit:
            result.append(char)
            cap_next = True
        else:
            cap_next = char in WORD_SEPARATORS

    return "".join(result)


class NameSynthesizer:
    """Synthesizes type and field names from schema paths."""

    def __init__(self, initialisms: Optional[Iterable[str]] = None):
        """
        Initialize name synthesizer.

        Args:
            initialisms: Upper-case initialisms (e.g. ``ID``, ``URL``) to
                normalize when they end a name
        """
        # Longest first: "Uuid" must become "UUID", not "UuID".
        self.initialisms: List[str] = sorted(
            set(initialisms or ()), key=lambda item: (-len(item), item)
        )

    def apply_initialisms(self, name: str) -> str:
        """Rewrite a trailing title-cased initialism to upper case, at most once."""
        for initialism in self.initialisms:
            title = initialism.lower().capitalize()
            if name.endswith(title):
                return name[: -len(title)] + initialism
        return name

    def synthesize(
        self,
        path: Iterable[str],
        major_version: Optional[int] = None,
        disambiguate_version: bool = False,
    ) -> str:
        """
        Synthesize a type name.

        Args:
            path: Path segments, e.g. ``["TripCreated", "vehicle"]``
            major_version: Major version of the message the type belongs to
            disambiguate_version: Append ``V<major_version>`` to the name

        Returns:
            Type name such as ``TripCreatedVehicle`` or ``TripCreatedV2``
        """
        name = self.apply_initialisms(to_camel(PATH_SEPARATOR.join(path)))
        if disambiguate_version:
            if major_version is None:
                raise ValueError("major_version is required to disambiguate names")
            name = f"{name}V{major_version}"
        return name

    def field_name(self, prop: str) -> str:
        """Synthesize a struct field name from a property name."""
        camel = to_camel(prop)
        if camel == "Id":
            return "ID"
        return self.apply_initialisms(camel)
