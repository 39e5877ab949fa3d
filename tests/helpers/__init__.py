"""Test helpers for IdeaBoard."""

from tests.helpers.fake_clock import FakeClock
from tests.helpers.sequential_ids import SequentialIdGenerator

__all__ = ["FakeClock", "SequentialIdGenerator"]
