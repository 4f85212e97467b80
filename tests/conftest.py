"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from typed_reflection.domain.services.reflection import (
    AccessorResolver,
    MemberIntrospector,
    Reflector,
)
from typed_reflection.infrastructure.config import DEFAULT_CONFIG
from typed_reflection.infrastructure.logging import LoggerSetup

from tests.sample_types import Account


@pytest.fixture(autouse=True)
def clean_reflection_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure REFLECTION_* overrides from the outer environment don't leak into tests."""
    for key in DEFAULT_CONFIG:
        monkeypatch.delenv(f"REFLECTION_{key}", raising=False)


@pytest.fixture
def account() -> Account:
    """Return a fresh account with a balance of 50."""
    return Account("alice", 50)


@pytest.fixture
def introspector() -> MemberIntrospector:
    return MemberIntrospector()


@pytest.fixture
def resolver(introspector: MemberIntrospector) -> AccessorResolver:
    """Return a resolver with lazy (per-call) type checking."""
    return AccessorResolver(introspector)


@pytest.fixture
def reflector() -> Reflector:
    return Reflector()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo LoggerSetup.initialize after a test."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
