"""
Tests for the emitter module.

Tests cover:
- to_array_name: suffix substitution and the Values suffix
- render_declaration: prefix, sorted values, quoting
- render_enum_arrays: header and layout of the whole file
"""

import pytest

from constants import HEADER_COMMENT
from core.emitter import (
    quote_value,
    render_declaration,
    render_enum_arrays,
    to_array_name,
)


# ============================================================================
# Tests for to_array_name
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,expected",
    [
        ("OrderStatus", "orderStatuses"),
        ("userType", "userTypes"),
        ("aiModel", "aiModels"),
        ("userRole", "userRoles"),
        ("dataSource", "dataSources"),
        ("displayMode", "displayModes"),
        ("status", "statusValues"),
        ("Color", "colorValues"),
        ("format", "formatValues"),
        ("statusValues", "statusValuesValues"),
        ("actinValues", "actinValuesValues"),
    ],
)
def test_to_array_name(name, expected):
    assert to_array_name(name) == expected


# ============================================================================
# Tests for render_declaration
# ============================================================================


@pytest.mark.unit
def test_declaration_sorts_values(record_factory):
    record = record_factory("Color", ["red", "blue", "green"], "type Color")

    assert (
        render_declaration(record)
        == "export const colorValues = ['blue', 'green', 'red'] as const"
    )


@pytest.mark.unit
def test_declaration_with_prefix(record_factory):
    record = record_factory("status", ["inactive", "active"], "type Status")

    assert (
        render_declaration(record, "ENUM_")
        == "export const ENUM_statusValues = ['active', 'inactive'] as const"
    )


@pytest.mark.unit
def test_values_sorted_by_code_point(record_factory):
    """Upper-case letters sort before lower-case ones."""
    record = record_factory("OrderStatus", ["pending", "PENDING", "COMPLETED"], "type OrderStatus")

    assert render_declaration(record).endswith(
        "= ['COMPLETED', 'PENDING', 'pending'] as const"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("plain", "'plain'"),
        ("it's", "'it\\'s'"),
        ("already\\'escaped", "'already\\'escaped'"),
        ('say "hi"', "'say \"hi\"'"),
    ],
)
def test_quote_value(value, expected):
    assert quote_value(value) == expected


# ============================================================================
# Tests for render_enum_arrays
# ============================================================================


@pytest.mark.unit
def test_empty_render_is_header_only():
    assert render_enum_arrays([]) == HEADER_COMMENT


@pytest.mark.unit
def test_header_blank_line_then_declarations(record_factory):
    records = [
        record_factory("status", ["active", "inactive", "pending"], "type Status"),
        record_factory("OrderStatus", ["PENDING", "COMPLETED"], "type OrderStatus"),
    ]

    result = render_enum_arrays(records)

    assert result == (
        "// This file is auto-generated by openapi-enum-arrays\n"
        "\n"
        "export const statusValues = ['active', 'inactive', 'pending'] as const\n"
        "export const orderStatuses = ['COMPLETED', 'PENDING'] as const"
    )


@pytest.mark.unit
def test_prefix_applies_to_every_declaration(record_factory):
    records = [
        record_factory("a", ["x", "y"], "type A"),
        record_factory("b", ["z", "w"], "type B"),
    ]

    lines = render_enum_arrays(records, array_prefix="API_").splitlines()[2:]

    assert all(line.startswith("export const API_") for line in lines)
