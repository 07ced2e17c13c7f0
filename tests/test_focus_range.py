from focusfield.focus_range import create_focus_field, related_lines, synthesize
from focusfield.model import RelationRecord


def _relation(line):
	return RelationRecord(
		id=f"t-usage-{line}-1",
		relation_kind="usage",
		target_id="t",
		line=line,
		column=1,
		end_column=2,
		description="Usage of x",
		severity="secondary",
	)


def test_padding_around_related_lines():
	lines, focus = synthesize([_relation(10), _relation(14), _relation(10)], 30)
	assert lines == frozenset({10, 14})
	assert (focus.start_line, focus.end_line) == (8, 16)


def test_padding_is_clamped():
	_, focus = synthesize([_relation(1), _relation(3)], 3)
	assert (focus.start_line, focus.end_line) == (1, 3)


def test_custom_padding():
	_, focus = synthesize([_relation(10)], 30, padding=0)
	assert (focus.start_line, focus.end_line) == (10, 10)


def test_no_relations_covers_whole_document():
	lines, focus = synthesize([], 12)
	assert lines == frozenset()
	assert (focus.start_line, focus.end_line) == (1, 12)


def test_zero_lines_still_yields_valid_range():
	_, focus = synthesize([], 0)
	assert (focus.start_line, focus.end_line) == (1, 1)


def test_related_lines_dedupes():
	assert related_lines([_relation(2), _relation(2), _relation(5)]) == frozenset({2, 5})


def test_create_focus_field_scenario():
	context = create_focus_field("const x = 1;\nconsole.log(x);\nx = 2;", "a.js", 1, 7)
	assert context.target.kind == "variable"
	assert context.target.name == "x"
	assert context.related_lines == frozenset({1, 2, 3})
	assert (context.focus_range.start_line, context.focus_range.end_line) == (1, 3)
	assert all(r.target_id == context.target.id for r in context.relations)


def test_create_focus_field_narrows_long_files():
	filler = ["// filler"] * 20
	code = "\n".join(filler[:10] + ["let total = 0;", "total += 1;"] + filler[10:])
	context = create_focus_field(code, "a.js", 11, 6)
	assert context.related_lines == frozenset({11, 12})
	assert (context.focus_range.start_line, context.focus_range.end_line) == (9, 14)


def test_create_focus_field_is_idempotent():
	code = "function foo() {}\n// calls foo elsewhere\nfoo();"
	first = create_focus_field(code, "a.js", 1, 10)
	second = create_focus_field(code, "a.js", 1, 10)
	assert first == second


def test_create_focus_field_not_found():
	assert create_focus_field("", "a.js", 1, 1) is None
	assert create_focus_field("console.log(x);", "a.js", 1, 3) is None
	assert create_focus_field("const x = 1;", "a.js", 5, 1) is None


def test_related_lines_serialize_sorted():
	context = create_focus_field("x = 2;\nconst x = 1;", "a.js", 2, 7)
	assert context.model_dump(mode="json")["related_lines"] == [1, 2]


def test_negative_padding_counts_as_zero():
	_, focus = synthesize([_relation(5)], 9, padding=-3)
	assert (focus.start_line, focus.end_line) == (5, 5)

	code = "\n".join(["//"] * 4 + ["let a = 1;"] + ["//"] * 4)
	context = create_focus_field(code, "a.js", 5, 5, padding=-3)
	assert context.focus_range.start_line <= context.focus_range.end_line
	assert (context.focus_range.start_line, context.focus_range.end_line) == (5, 5)
