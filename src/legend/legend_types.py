"""Shared dataclasses for legend script operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class LegendOperationType(Enum):
    """Kinds of edit a legend script can describe."""

    DELETE = "delete"
    REPLACE = "replace"
    INSERT = "insert"


@dataclass(frozen=True)
class DeleteOperation:
    """Remove the line matching `content`."""

    content: str

    @property
    def type(self) -> LegendOperationType:
        return LegendOperationType.DELETE

    @property
    def target(self) -> str:
        return self.content


@dataclass(frozen=True)
class ReplaceOperation:
    """Replace the line matching `old_lines[0]` with `new_lines`."""

    old_lines: tuple[str, ...]
    new_lines: tuple[str, ...]

    @property
    def type(self) -> LegendOperationType:
        return LegendOperationType.REPLACE

    @property
    def target(self) -> str:
        return self.old_lines[0]


@dataclass(frozen=True)
class InsertOperation:
    """Insert `new_lines` immediately after the line matching `anchor`."""

    anchor: str
    new_lines: tuple[str, ...]

    @property
    def type(self) -> LegendOperationType:
        return LegendOperationType.INSERT

    @property
    def target(self) -> str:
        return self.anchor


LegendOperation = Union[DeleteOperation, ReplaceOperation, InsertOperation]


@dataclass
class MatchCandidate:
    """A buffer line that might be the target of an operation."""

    index: int  # 0-indexed position in the buffer
    text: str  # The buffer line as it appears (not normalized)
    exact: bool
    distance: int | None = None  # Only set for close (non-exact) candidates


@dataclass
class MatchResult:
    """Result of searching a buffer for a target line."""

    exact: List[int] = field(default_factory=list)
    close: List[MatchCandidate] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when neither exact nor close candidates were found."""
        return not self.exact and not self.close


class LineStatus(Enum):
    """Status of a line in the annotated change view."""

    UNCHANGED = "unchanged"
    DELETED = "deleted"
    INSERTED = "inserted"


@dataclass
class AnnotatedLine:
    """A line in the annotated change view."""

    text: str
    status: LineStatus


class OperationOutcome(Enum):
    """What happened when an operation was applied."""

    APPLIED = "applied"
    UNMATCHED = "unmatched"
    SKIPPED = "skipped"


@dataclass
class LegendStatistics:
    """Counts of what an apply run actually did."""

    deletes: int = 0
    replaces: int = 0
    inserts: int = 0  # Total inserted lines across insert operations
    unmatched: int = 0
    skipped: int = 0
    selected: int = 0

    @property
    def applied(self) -> int:
        """Number of operations that took effect."""
        return self.selected - self.unmatched - self.skipped


@dataclass
class LegendPatchResult:
    """Result of one apply invocation."""

    text: str
    lines: List[str]
    annotated: List[AnnotatedLine]
    statistics: LegendStatistics
    operations: List[LegendOperation]
