"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random

import pytest
from pydantic import BaseModel


class Record(BaseModel):
    """Record with an integer, a float and a list of strings."""

    a: int
    b: float
    c: list[str]


@pytest.fixture
def record() -> Record:
    """Record whose repeated strings compress well."""
    return Record(
        a=4578234323,
        b=1.46437485,
        c=["Hello World", "Hello World", "Hello World", "Hello World", "Hello World"],
    )


@pytest.fixture
def repetitive_payload() -> bytes:
    """Highly compressible payload."""
    return b"underwater acoustic telemetry " * 40


@pytest.fixture
def random_payload() -> bytes:
    """Incompressible payload."""
    return random.Random(1234).randbytes(1000)
