"""
Target Resolver — Map a user reference to a position in the command list

Users reference saved commands by:
- 1-based position ("3")
- Exact name ("deploy", case-sensitive)

Resolution never raises: it returns a ResolveResult whose status says
which rule matched or why nothing did. Callers turn failures into
errors with the phrasing they need.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, TYPE_CHECKING

from rapidfuzz import fuzz, process

if TYPE_CHECKING:
    from .store import CommandRecord


# ASCII decimal with optional leading '+'; a '-' prefix is never a position
_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")

SUGGESTION_LIMIT = 3
SUGGESTION_CUTOFF = 70


class ResolveStatus(Enum):
    """Resolution outcome."""
    BY_INDEX = "by_index"
    BY_NAME = "by_name"
    MISSING = "missing"
    NOT_FOUND = "not_found"
    OUT_OF_RANGE = "out_of_range"


@dataclass
class ResolveResult:
    """Result of target resolution."""
    status: ResolveStatus
    index: Optional[int] = None
    query: str = ""
    suggestions: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status in (ResolveStatus.BY_INDEX, ResolveStatus.BY_NAME)


def parse_position(text: str) -> Optional[int]:
    """Parse a 1-based position token, or None if it is not a number."""
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    return int(text)


def resolve_target(commands: Sequence['CommandRecord'], query: Optional[str]) -> ResolveResult:
    """
    Resolve a reference to a 0-based index.

    Args:
        commands: Current command list
        query: First argument given to the action (may be None)

    Returns:
        ResolveResult; index is set only when status is BY_INDEX or BY_NAME
    """
    if not query:
        return ResolveResult(status=ResolveStatus.MISSING, query=query or "")

    number = parse_position(query)
    if number is not None:
        # 0 has no 1-based slot; rejecting it here keeps index >= 0
        if number < 1 or number > len(commands):
            return ResolveResult(status=ResolveStatus.OUT_OF_RANGE, query=query)
        return ResolveResult(status=ResolveStatus.BY_INDEX, index=number - 1, query=query)

    for i, command in enumerate(commands):
        if command.name == query:
            return ResolveResult(status=ResolveStatus.BY_NAME, index=i, query=query)

    return ResolveResult(
        status=ResolveStatus.NOT_FOUND,
        query=query,
        suggestions=suggest_names(commands, query),
    )


def suggest_names(commands: Sequence['CommandRecord'], query: str) -> List[str]:
    """Names close to the query, best match first."""
    names = [command.name for command in commands if command.name]
    if not names:
        return []

    matches = process.extract(
        query,
        names,
        scorer=fuzz.ratio,
        limit=SUGGESTION_LIMIT,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return [name for name, _score, _index in matches]
