"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing the generation
pipeline, including sample type-definition text, record builders and
observer doubles.
"""

from unittest.mock import MagicMock

import pytest

from core.models import EnumRecord
from ui.observer import NoOpPipelineObserver


@pytest.fixture
def output_dir(tmp_path):
    """Create a temporary client output directory for testing."""
    path = tmp_path / "client"
    path.mkdir()
    return path


@pytest.fixture
def record_factory():
    """Factory for building EnumRecord instances."""

    def _factory(name, values, path):
        return EnumRecord(name, tuple(values), path)

    return _factory


@pytest.fixture
def observer():
    """Observer for testing."""
    return NoOpPipelineObserver()


@pytest.fixture
def tracking_observer():
    """Observer that records every call for inspection."""
    return MagicMock(spec=NoOpPipelineObserver)


@pytest.fixture
def nested_types_content():
    """A nested object type three levels deep with comments and siblings."""
    return """
export type Root = {
    // Display name
    name: string;
    config: {
        /**
         * Storage settings
         */
        database: {
            host: string;
            type: 'mysql' | 'postgres' | 'sqlite';
        };
        cache?: boolean;
    };
    mode: 'light' | 'dark';
};
""".strip()


@pytest.fixture
def operation_types_content():
    """Generated operation types sharing a `format` query/body/response field."""
    return """
export type GetV1ItemsData = {
    query?: {
        format?: 'formatA' | 'formatB';
    };
    url: '/v1/items';
};

export type PostV1ItemsData = {
    body: {
        format: 'formatA' | 'formatB';
    };
    url: '/v1/items';
};

export type PutV1ItemsData = {
    body: {
        format: 'formatB' | 'formatA';
    };
    path: {
        id: string;
    };
    url: '/v1/items/{id}';
};

export type ResponseData = {
    format: 'formatA' | 'formatB';
};
""".strip()


@pytest.fixture
def types_content():
    """A small generated types file mixing standalone and nested unions."""
    return """
export type Status = 'active' | 'inactive' | 'pending';

export type OrderStatus = 'PENDING' | 'COMPLETED';

export type NonEnum = string | number;

export type GetV1UsersData = {
    query?: {
        role?: 'admin' | 'user' | 'guest';
        tags?: Array<'tag1' | 'tag2'>;
    };
    url: '/v1/users';
};
""".strip()
