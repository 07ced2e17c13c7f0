from __future__ import annotations

import logging
from typing import List

from .model import EntityTarget, RelationKind, RelationRecord
from .patterns import keyword_pattern, modification_pattern, spans, split_lines, usage_pattern

logger = logging.getLogger(__name__)


RELATION_LABELS = {
	"definition": "Definition",
	"usage": "Usage",
	"modification": "Modification",
	"reference": "Reference",
	"import": "Import",
	"export": "Export",
}

RELATION_SEVERITY = {
	"definition": "primary",
	"modification": "primary",
	"usage": "secondary",
	"reference": "secondary",
	"import": "tertiary",
	"export": "tertiary",
}


def _record(target: EntityTarget, kind: RelationKind, line: int, column: int, end_column: int) -> RelationRecord:
	if kind == "definition":
		record_id = f"{target.id}-definition"
	else:
		record_id = f"{target.id}-{kind}-{line}-{column}"
	return RelationRecord(
		id=record_id,
		relation_kind=kind,
		target_id=target.id,
		line=line,
		column=column,
		end_column=end_column,
		description=f"{RELATION_LABELS[kind]} of {target.name}",
		severity=RELATION_SEVERITY[kind],
	)


def find_relations(source_text: str, file: str, target: EntityTarget) -> List[RelationRecord]:
	"""Scan every line for occurrences related to ``target``.

	Records come out per line in the order definition, usage, modification,
	import, export. Scanners do not de-duplicate against each other, so an
	assignment shows up both as a usage and as a modification.
	"""
	name = target.name
	if not name or not name.strip():
		return []

	scanners = (
		("usage", usage_pattern(name)),
		("modification", modification_pattern(name)),
		("import", keyword_pattern("import", name)),
		("export", keyword_pattern("export", name)),
	)

	relations: List[RelationRecord] = []
	for index, text in enumerate(split_lines(source_text)):
		line = index + 1
		if line == target.line:
			relations.append(_record(target, "definition", line, target.column, target.end_column))
		for kind, pattern in scanners:
			for start, end in spans(pattern, text):
				relations.append(_record(target, kind, line, start, end))

	logger.debug("Found %d relations for %s in %s", len(relations), name, file)
	return relations
