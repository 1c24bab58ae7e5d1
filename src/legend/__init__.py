"""
Legend script parsing, fuzzy line matching, and patch application.

A legend script describes edits by the content of the lines they touch
rather than by line number, so it can still be applied when the text has
drifted or is only approximately quoted.
"""

from legend.legend_annotator import LegendAnnotator
from legend.legend_applier import LegendApplier
from legend.legend_distance import distance
from legend.legend_exceptions import (
    LegendError,
    LegendParseError,
    LegendResolutionError,
    LegendSettingsError,
)
from legend.legend_matcher import LegendMatcher
from legend.legend_normalizer import normalize
from legend.legend_parser import LegendParser
from legend.legend_patcher import LegendPatcher, describe_operation, number_lines
from legend.legend_resolver import (
    AsyncLegendResolver,
    CallbackResolver,
    FirstCandidateResolver,
    LegendChoice,
    LegendResolver,
    SkipResolver,
)
from legend.legend_settings import LegendSettings
from legend.legend_types import (
    AnnotatedLine,
    DeleteOperation,
    InsertOperation,
    LegendOperation,
    LegendOperationType,
    LegendPatchResult,
    LegendStatistics,
    LineStatus,
    MatchCandidate,
    MatchResult,
    OperationOutcome,
    ReplaceOperation,
)

__all__ = [
    # Exceptions
    'LegendError',
    'LegendParseError',
    'LegendResolutionError',
    'LegendSettingsError',
    # Types
    'LegendOperationType',
    'DeleteOperation',
    'ReplaceOperation',
    'InsertOperation',
    'LegendOperation',
    'MatchCandidate',
    'MatchResult',
    'LineStatus',
    'AnnotatedLine',
    'OperationOutcome',
    'LegendStatistics',
    'LegendPatchResult',
    # Resolution
    'LegendChoice',
    'LegendResolver',
    'AsyncLegendResolver',
    'FirstCandidateResolver',
    'SkipResolver',
    'CallbackResolver',
    # Core
    'normalize',
    'distance',
    'LegendSettings',
    'LegendMatcher',
    'LegendParser',
    'LegendApplier',
    'LegendAnnotator',
    'LegendPatcher',
    'number_lines',
    'describe_operation',
]
