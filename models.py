"""
Type definitions and data models used across the enum-arrays application.

This module contains shared type definitions including enums and TypedDict
structures that are used throughout the codebase for type safety and consistency.
"""

from enum import StrEnum
from typing import TypedDict


class PathContext(StrEnum):
    """
    Structural role inferred from the path at which an enumeration was found.

    The value doubles as the prefix used when a colliding name has to be
    qualified (e.g. "query" + "Type" -> "queryType").
    """

    QUERY = "query"
    REQUEST = "request"
    RESPONSE = "response"


class EnumArraysConfig(TypedDict, total=False):
    """
    Configuration accepted by the generator.

    All keys are optional. Missing keys are filled from the defaults returned
    by `core.config.default_config()`.

    Attributes:
        name: Identifier of the generator (informational only).
        output: Output file name without the ".ts" extension.
        input: Name of the type-definition file inside the output directory.
        includePatterns: Keep only enums whose final name contains one of these substrings.
        excludePatterns: Drop enums whose final name contains any of these substrings.
        arrayPrefix: String prepended to every emitted array identifier.
        debug: Enables verbose diagnostic output. Never changes the generated text.
    """

    name: str
    output: str
    input: str
    includePatterns: list[str] | None
    excludePatterns: list[str] | None
    arrayPrefix: str
    debug: bool
