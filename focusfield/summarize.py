from __future__ import annotations

from typing import Dict, List, Optional

from .model import FocusContext, FocusSummary, LineDecoration, RelationRecord


def get_focus_field_summary(context: FocusContext) -> FocusSummary:
	by_kind: Dict[str, int] = {}
	for relation in context.relations:
		by_kind[relation.relation_kind] = by_kind.get(relation.relation_kind, 0) + 1

	return FocusSummary(
		target_name=context.target.name,
		target_kind=context.target.kind,
		total_relations=len(context.relations),
		by_kind=by_kind,
		focus_range_size=context.focus_range.size,
	)


def filter_relations(
	context: FocusContext,
	relation_kind: Optional[str] = None,
	query: str = "",
) -> List[RelationRecord]:
	"""Relations of one kind (or all) whose description or line number contains ``query``."""
	relations = context.relations
	if relation_kind:
		relations = [r for r in relations if r.relation_kind == relation_kind]
	if query:
		needle = query.lower()
		relations = [r for r in relations if needle in r.description.lower() or query in str(r.line)]
	return list(relations)


def classify_lines(context: FocusContext, total_lines: int) -> List[LineDecoration]:
	name = context.target.name
	decorations: List[LineDecoration] = []
	for line in range(1, total_lines + 1):
		if line in context.related_lines:
			decorations.append(
				LineDecoration(line=line, status="related", message=f"Line {line}: Directly related to {name}")
			)
		elif context.focus_range.contains(line):
			decorations.append(
				LineDecoration(
					line=line,
					status="focus_range",
					message=f"Line {line}: In focus range but not directly related to {name}",
				)
			)
		else:
			decorations.append(
				LineDecoration(line=line, status="unrelated", message=f"Line {line}: Not related to current focus field")
			)
	return decorations
