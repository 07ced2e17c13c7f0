from __future__ import annotations

import logging
from typing import Optional

from .model import EntityTarget
from .patterns import MATCHERS, split_lines

logger = logging.getLogger(__name__)


def target_id(file: str, line: int, column: int, kind: str) -> str:
	return f"{file}-{line}-{column}-{kind}"


def locate(source_text: str, file: str, line: int, column: int) -> Optional[EntityTarget]:
	"""Find the named entity under the cursor, or None when there is nothing to focus."""
	lines = split_lines(source_text)
	if line < 1 or line > len(lines) or column < 1:
		logger.debug("Position %s:%s outside %s (%d lines)", line, column, file, len(lines))
		return None

	text = lines[line - 1]
	if not text:
		return None

	for matcher in MATCHERS:
		found = matcher(text, column)
		if found is not None:
			return EntityTarget(
				id=target_id(file, line, column, found.kind),
				kind=found.kind,
				name=found.name,
				line=line,
				column=found.name_start,
				end_column=found.name_end,
				file=file,
			)

	logger.debug("No entity at %s:%s:%s", file, line, column)
	return None
