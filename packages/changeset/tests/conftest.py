"""Shared fixtures for changeset tests."""

from __future__ import annotations

import re

import pytest

from ddd_changeset import Changeset
from ddd_changeset.comparators import build_default_registry

NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


@pytest.fixture
def registry():
    """Fresh comparator registry."""
    return build_default_registry()


@pytest.fixture
def signup_defaults():
    return {"age": 0, "name": "", "agreedToTerms": False}


@pytest.fixture
def signup(signup_defaults):
    return Changeset(signup_defaults)


@pytest.fixture
def signup_rules():
    """The validator chain for a signup form."""

    def run(changeset: Changeset) -> Changeset:
        return (
            changeset.validate_acceptance("agreedToTerms")
            .validate_length("age", {"gt": 18})
            .validate_format("name", NAME_PATTERN)
            .validate_required(["age", "name", "agreedToTerms"])
        )

    return run
