from __future__ import annotations

from typing import Dict, FrozenSet, List, Literal

from pydantic import BaseModel, ConfigDict, field_serializer


EntityKind = Literal["variable", "function", "class", "import", "property", "method"]
RelationKind = Literal["definition", "usage", "modification", "reference", "import", "export"]
Severity = Literal["primary", "secondary", "tertiary"]
LineStatus = Literal["related", "focus_range", "unrelated"]


class EntityTarget(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: str
	kind: EntityKind
	name: str
	line: int
	column: int
	end_column: int
	file: str


class RelationRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: str
	relation_kind: RelationKind
	target_id: str
	line: int
	column: int
	end_column: int
	description: str
	severity: Severity


class FocusRange(BaseModel):
	model_config = ConfigDict(frozen=True)

	start_line: int
	end_line: int

	@property
	def size(self) -> int:
		return self.end_line - self.start_line + 1

	def contains(self, line: int) -> bool:
		return self.start_line <= line <= self.end_line


class FocusContext(BaseModel):
	model_config = ConfigDict(frozen=True)

	target: EntityTarget
	relations: List[RelationRecord] = []
	related_lines: FrozenSet[int] = frozenset()
	focus_range: FocusRange

	@field_serializer("related_lines")
	def _sorted_lines(self, lines: FrozenSet[int]) -> List[int]:
		return sorted(lines)


class FocusSummary(BaseModel):
	target_name: str
	target_kind: EntityKind
	total_relations: int
	by_kind: Dict[str, int] = {}
	focus_range_size: int


class LineDecoration(BaseModel):
	line: int
	status: LineStatus
	message: str
