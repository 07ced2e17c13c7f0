from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional, Tuple

from .locate import locate
from .model import FocusContext, FocusRange, RelationRecord
from .patterns import split_lines
from .relations import find_relations

logger = logging.getLogger(__name__)


DEFAULT_PADDING = 2


def related_lines(relations: Iterable[RelationRecord]) -> FrozenSet[int]:
	return frozenset(r.line for r in relations)


def synthesize(
	relations: Iterable[RelationRecord],
	total_lines: int,
	padding: int = DEFAULT_PADDING,
) -> Tuple[FrozenSet[int], FocusRange]:
	"""Collapse relations into their distinct lines and a padded window around them.

	With nothing related the whole document is the window. Bounds are always
	clamped into ``[1, total_lines]``; a negative padding counts as zero.
	"""
	padding = max(0, padding)
	last = max(1, total_lines)
	lines = frozenset(n for n in related_lines(relations) if 1 <= n <= total_lines)
	if not lines:
		return lines, FocusRange(start_line=1, end_line=last)

	ordered = sorted(lines)
	start = max(1, ordered[0] - padding)
	end = min(last, ordered[-1] + padding)
	return lines, FocusRange(start_line=start, end_line=end)


def create_focus_field(
	source_text: str,
	file: str,
	line: int,
	column: int,
	padding: int = DEFAULT_PADDING,
) -> Optional[FocusContext]:
	"""Locate the entity at (line, column) and gather everything related to it.

	Returns None when the cursor is not on anything the locator recognizes.
	"""
	target = locate(source_text, file, line, column)
	if target is None:
		return None

	relations = find_relations(source_text, file, target)
	lines, focus_range = synthesize(relations, len(split_lines(source_text)), padding)
	logger.debug(
		"Focus on %s %s: %d relations, lines %d-%d",
		target.kind,
		target.name,
		len(relations),
		focus_range.start_line,
		focus_range.end_line,
	)
	return FocusContext(
		target=target,
		relations=relations,
		related_lines=lines,
		focus_range=focus_range,
	)
