"""
Canonical formatting of generated Go source.

Formats the constructs the generator emits the way gofmt lays them out:
tab-indented struct bodies with field names, types and tags aligned in
columns, single blank lines between declarations and exactly one trailing
newline. Anything outside that subset is rejected with FormattingError, so
malformed output never reaches the caller.
"""

import re
from typing import List, Tuple

from ....logging_config import get_logger
from ...core.errors import FormattingError
from .naming import is_go_identifier

logger = get_logger(__name__)

PACKAGE_CLAUSE = re.compile(r"^package\s+(\S+)$")
STRUCT_OPEN = re.compile(r"^type\s+(\S+)\s+struct\s*\{$")
TYPE_DECL = re.compile(r"^type\s+(\S+)\s+(\S+)$")
FUNC_DECL = re.compile(r"^func\s+([A-Za-z_][A-Za-z0-9_]*)\s*\(")
FIELD_LINE = re.compile(r"^(\S+)\s+(\S+)(?:\s+(`[^`]*`))?$")
JSON_TAG = re.compile(r'^`json:"[^`]*"`$')
TYPE_EXPR = re.compile(
    r"^(\*|\[\]|map\[string\])*"
    r"([A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?|interface\{\}|any)$"
)

Field = Tuple[str, str, str]


class GoFormatter:
    """Formats generated Go declarations."""

    def format(self, source: str) -> str:
        """
        Format Go source.

        Args:
            source: Generated Go source

        Returns:
            Formatted source ending in a single newline

        Raises:
            FormattingError: If the source is not valid for the supported subset
        """
        lines = source.split("\n")
        output: List[str] = []
        package_seen = False

        index = 0
        while index < len(lines):
            line = lines[index].strip()
            lineno = index + 1
            index += 1

            if not line:
                output.append("")
                continue

            if line.startswith("//"):
                output.append(line)
                continue

            if line.startswith("/*"):
                if not line.endswith("*/"):
                    raise FormattingError(
                        f"unable to format: line {lineno}: unterminated block comment"
                    )
                output.append(line)
                continue

            match = PACKAGE_CLAUSE.match(line)
            if match:
                if package_seen:
                    raise FormattingError(
                        f"unable to format: line {lineno}: duplicate package clause"
                    )
                self._check_identifier(match.group(1), lineno)
                package_seen = True
                output.append(f"package {match.group(1)}")
                continue

            if not package_seen:
                raise FormattingError(
                    f"unable to format: line {lineno}: expected package clause"
                )

            match = STRUCT_OPEN.match(line)
            if match:
                self._check_identifier(match.group(1), lineno)
                body, index = self._format_struct(lines, index, lineno)
                output.append(f"type {match.group(1)} struct {{")
                output.extend(body)
                output.append("}")
                continue

            match = TYPE_DECL.match(line)
            if match:
                self._check_identifier(match.group(1), lineno)
                self._check_type(match.group(2), lineno)
                output.append(f"type {match.group(1)} {match.group(2)}")
                continue

            match = FUNC_DECL.match(line)
            if match:
                self._check_identifier(match.group(1), lineno)
                if line.count("{") != line.count("}") or not line.endswith("}"):
                    raise FormattingError(
                        f"unable to format: line {lineno}: unbalanced braces"
                    )
                output.append(line)
                continue

            raise FormattingError(
                f"unable to format: line {lineno}: unexpected statement: {line}"
            )

        if not package_seen:
            raise FormattingError("unable to format: missing package clause")

        logger.debug("Formatted %d lines of Go source", len(output))
        return self._collapse_blank_lines(output)

    def _format_struct(
        self, lines: List[str], index: int, start_lineno: int
    ) -> Tuple[List[str], int]:
        """Format a struct body; returns the body lines and the index after '}'."""
        body: List[str] = []
        run: List[Field] = []

        while index < len(lines):
            line = lines[index].strip()
            lineno = index + 1
            index += 1

            if line == "}":
                body.extend(self._align(run))
                return self._strip_blank_edges(body), index

            if not line:
                body.extend(self._align(run))
                run = []
                if body and body[-1] != "":
                    body.append("")
                continue

            if line.startswith("//"):
                body.extend(self._align(run))
                run = []
                body.append(f"\t{line}")
                continue

            match = FIELD_LINE.match(line)
            if not match:
                raise FormattingError(
                    f"unable to format: line {lineno}: malformed struct field: {line}"
                )
            name, type_expr, tag = match.group(1), match.group(2), match.group(3) or ""
            self._check_identifier(name, lineno)
            self._check_type(type_expr, lineno)
            if tag and not JSON_TAG.match(tag):
                raise FormattingError(
                    f"unable to format: line {lineno}: malformed struct tag: {tag}"
                )
            run.append((name, type_expr, tag))

        raise FormattingError(
            f"unable to format: line {start_lineno}: unterminated struct"
        )

    @staticmethod
    def _align(run: List[Field]) -> List[str]:
        """Align a run of consecutive fields in columns."""
        if not run:
            return []

        name_width = max(len(name) for name, _, _ in run) + 1
        type_width = max(len(type_expr) for _, type_expr, _ in run) + 1

        aligned = []
        for name, type_expr, tag in run:
            if tag:
                aligned.append(
                    f"\t{name.ljust(name_width)}{type_expr.ljust(type_width)}{tag}"
                )
            else:
                aligned.append(f"\t{name.ljust(name_width)}{type_expr}")
        return aligned

    @staticmethod
    def _strip_blank_edges(lines: List[str]) -> List[str]:
        start, end = 0, len(lines)
        while start < end and not lines[start]:
            start += 1
        while end > start and not lines[end - 1]:
            end -= 1
        return lines[start:end]

    @staticmethod
    def _collapse_blank_lines(lines: List[str]) -> str:
        result: List[str] = []
        for line in lines:
            if not line and (not result or not result[-1]):
                continue
            result.append(line)
        while result and not result[-1]:
            result.pop()
        return "\n".join(result) + "\n"

    @staticmethod
    def _check_identifier(name: str, lineno: int):
        if not is_go_identifier(name):
            raise FormattingError(
                f"unable to format: line {lineno}: invalid identifier: {name}"
            )

    @staticmethod
    def _check_type(type_expr: str, lineno: int):
        if not TYPE_EXPR.match(type_expr):
            raise FormattingError(
                f"unable to format: line {lineno}: invalid type: {type_expr}"
            )


def format_go_source(source: str) -> str:
    """Format Go source with a default GoFormatter."""
    return GoFormatter().format(source)
