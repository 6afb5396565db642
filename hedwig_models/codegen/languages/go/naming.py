"""
Go-specific naming utilities.

Handles Go initialisms, reserved words and package naming conventions.
"""

import re
from typing import Iterable, Optional

from ...core.naming import NameSynthesizer

# Initialisms golint expects in upper case
GO_INITIALISMS = {
    "ACL",
    "API",
    "ASCII",
    "CPU",
    "CSS",
    "DNS",
    "EOF",
    "GUID",
    "HTML",
    "HTTP",
    "HTTPS",
    "ID",
    "IP",
    "JSON",
    "LHS",
    "QPS",
    "RAM",
    "RHS",
    "RPC",
    "SLA",
    "SMTP",
    "SQL",
    "SSH",
    "TCP",
    "TLS",
    "TTL",
    "UDP",
    "UI",
    "UID",
    "UUID",
    "URI",
    "URL",
    "UTF8",
    "VM",
    "XML",
    "XMPP",
    "XSRF",
    "XSS",
}

# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

GO_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def create_go_synthesizer(initialisms: Optional[Iterable[str]] = None) -> NameSynthesizer:
    """
    Create a name synthesizer configured for Go.

    Args:
        initialisms: Initialisms to normalize; None selects GO_INITIALISMS
    """
    if initialisms is None:
        initialisms = GO_INITIALISMS
    return NameSynthesizer(initialisms)


def is_go_identifier(name: str) -> bool:
    """Check if a name is a valid, non-reserved Go identifier."""
    return bool(GO_IDENTIFIER.match(name)) and name not in GO_RESERVED_WORDS


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not GO_IDENTIFIER.match(name):
        errors.append(f"'{name}' is not a valid Go identifier")

    if name in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    # Go-specific conventions
    if name.lower() != name:
        errors.append("Package names should be lowercase")

    if "_" in name:
        errors.append("Package names should not contain underscores")

    return errors
