"""Shared fixtures for htkdocs tests."""

from datetime import datetime, timezone

import pytest

from htkdocs.core import Group, Root, Rule

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


def make_tree() -> Root:
    """Build a small tree: one group holding a titled mock rule, plus a bare rule."""
    return Root(items=[
        Group(
            id="g1",
            title="Auth",
            description="Login **flows**.",
            items=[
                Rule(
                    id="r1",
                    matchers=[
                        {"type": "method", "method": "POST"},
                        {"type": "simple-path", "path": "/login"},
                    ],
                    steps=[{"type": "simple", "status": 200}],
                    title="Login mock",
                    description="Returns a token.",
                ),
            ],
        ),
        Rule(
            id="r2",
            matchers=[{"type": "wildcard"}],
            steps=[{"type": "passthrough"}],
        ),
    ])


@pytest.fixture
def tree() -> Root:
    return make_tree()


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW
