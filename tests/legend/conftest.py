"""Shared fixtures and utilities for legend tests."""

from typing import List

import pytest

from legend.legend_annotator import LegendAnnotator
from legend.legend_applier import LegendApplier
from legend.legend_matcher import LegendMatcher
from legend.legend_parser import LegendParser
from legend.legend_patcher import LegendPatcher
from legend.legend_resolver import LegendChoice, LegendResolver
from legend.legend_types import LegendOperation, MatchCandidate


class RecordingResolver(LegendResolver):
    """Resolver that records each request and answers from a script of choices."""

    def __init__(self, choices: List[LegendChoice] | None = None):
        self.calls: List[tuple[LegendOperation, str, List[MatchCandidate]]] = []
        self._choices = list(choices) if choices else []

    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        self.calls.append((operation, target, candidates))
        if self._choices:
            return self._choices.pop(0)

        return LegendChoice.at(candidates[0].index)


class FailingResolver(LegendResolver):
    """Resolver for cases where resolution must not happen."""

    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        raise AssertionError(f"Resolver should not have been called for {target!r}")


@pytest.fixture
def matcher():
    """Create a matcher with default settings."""
    return LegendMatcher()


@pytest.fixture
def parser():
    """Create a permissive parser."""
    return LegendParser()


@pytest.fixture
def applier():
    """Create an applier with default settings."""
    return LegendApplier()


@pytest.fixture
def annotator():
    """Create an annotator."""
    return LegendAnnotator()


@pytest.fixture
def patcher():
    """Create a patcher with default settings."""
    return LegendPatcher()


@pytest.fixture
def recording_resolver():
    """Factory for recording resolvers with scripted choices."""
    def _create_resolver(choices: List[LegendChoice] | None = None):
        return RecordingResolver(choices)
    return _create_resolver


@pytest.fixture
def failing_resolver():
    """Create a resolver that fails the test if consulted."""
    return FailingResolver()
