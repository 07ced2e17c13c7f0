"""Focus Field: line-based code relation analysis for a cursor position.

Modules:
- patterns.py: Declaration matchers and per-name relation patterns.
- locate.py: Finds the named entity under a cursor.
- relations.py: Finds definitions, usages, modifications, imports and exports.
- focus_range.py: Related lines, padded focus window and the combined entry point.
- summarize.py: Summary counts, relation filtering and per-line classification.
- session.py: Caller-side focus state for an editor buffer.
- model.py: Data structures for targets, relations and contexts.
"""

from .focus_range import create_focus_field
from .locate import locate
from .relations import find_relations
from .summarize import get_focus_field_summary

__all__ = [
	"create_focus_field",
	"find_relations",
	"get_focus_field_summary",
	"locate",
]
