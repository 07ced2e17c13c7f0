"""Textual pattern tables used by the locator and the relation scanners.

Everything here works line by line on raw text. Nothing is tokenized, so
identifiers inside comments and string literals match like any other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .model import EntityKind


IDENT = r"[A-Za-z_$][\w$]*"
_END = r"(?![\w$])"
_START = r"(?<![\w$])"

VARIABLE_RE = re.compile(rf"\b(?:const|let|var)\s+(?P<name>{IDENT}){_END}", re.ASCII)
FUNCTION_RE = re.compile(
	rf"\bfunction\s+(?P<decl>{IDENT}){_END}"
	rf"|{_START}(?P<expr>{IDENT})\s*[:=]\s*(?:async\s+)?"
	rf"(?:function\b|\([^)]*\)\s*=>|{IDENT}\s*=>)",
	re.ASCII,
)
CLASS_RE = re.compile(rf"\bclass\s+(?P<name>{IDENT}){_END}", re.ASCII)
METHOD_RE = re.compile(rf"{_START}(?P<name>{IDENT})\s*\([^)]*\)\s*\{{", re.ASCII)
PROPERTY_RE = re.compile(rf"{_START}(?P<name>{IDENT})\s*[:=]\s*[^;,\n]+", re.ASCII)

# Compound operators are listed longest first so ">>>=" wins over ">>=".
ASSIGNMENT_OPERATORS = r"(?:\*\*|<<|>>>|>>|&&|\|\||\?\?|[+\-*/%&|^])?="

_WORD_CHAR = re.compile(r"\w", re.ASCII)


@dataclass(frozen=True)
class DeclarationMatch:
	"""One declaration-like match on a single line.

	``start``/``end`` cover the whole match (1-based, inclusive), and
	``name_start``/``name_end`` cover just the identifier (1-based, end exclusive).
	"""

	kind: EntityKind
	name: str
	start: int
	end: int
	name_start: int
	name_end: int

	def contains(self, column: int) -> bool:
		return self.start <= column <= self.end


Matcher = Callable[[str, int], Optional[DeclarationMatch]]


def _first_containing(kind: EntityKind, pattern: re.Pattern[str], text: str, column: int) -> Optional[DeclarationMatch]:
	for m in pattern.finditer(text):
		group = next((g for g, value in m.groupdict().items() if value), None)
		if group is None:
			continue
		start = m.start() + 1
		found = DeclarationMatch(
			kind=kind,
			name=m.group(group),
			start=start,
			end=start + len(m.group(0)),
			name_start=m.start(group) + 1,
			name_end=m.end(group) + 1,
		)
		if found.contains(column):
			return found
	return None


def match_variable(text: str, column: int) -> Optional[DeclarationMatch]:
	return _first_containing("variable", VARIABLE_RE, text, column)


def match_function(text: str, column: int) -> Optional[DeclarationMatch]:
	return _first_containing("function", FUNCTION_RE, text, column)


def match_class(text: str, column: int) -> Optional[DeclarationMatch]:
	return _first_containing("class", CLASS_RE, text, column)


def match_method(text: str, column: int) -> Optional[DeclarationMatch]:
	return _first_containing("method", METHOD_RE, text, column)


def match_property(text: str, column: int) -> Optional[DeclarationMatch]:
	return _first_containing("property", PROPERTY_RE, text, column)


# Priority order: declarations before the looser property-assignment form.
MATCHERS: Tuple[Matcher, ...] = (
	match_variable,
	match_function,
	match_class,
	match_method,
	match_property,
)


def bounded_name(name: str) -> str:
	"""Regex for ``name`` as a whole identifier.

	Plain ``\\b`` does not work next to ``$``, which is not a word character,
	so those edges use explicit lookarounds instead.
	"""
	left = r"\b" if _WORD_CHAR.match(name[0]) else _START
	right = r"\b" if _WORD_CHAR.match(name[-1]) else _END
	return left + re.escape(name) + right


def usage_pattern(name: str) -> re.Pattern[str]:
	return re.compile(bounded_name(name), re.ASCII)


def modification_pattern(name: str) -> re.Pattern[str]:
	# Comparisons (==, ===) and arrows (=>) are not assignments.
	return re.compile(bounded_name(name) + r"\s*" + ASSIGNMENT_OPERATORS + r"(?![=>])", re.ASCII)


def keyword_pattern(keyword: str, name: str) -> re.Pattern[str]:
	return re.compile(keyword + r".*" + bounded_name(name), re.ASCII)


def spans(pattern: re.Pattern[str], text: str) -> Iterator[Tuple[int, int]]:
	"""Yield 1-based (start, exclusive end) columns of every match in ``text``."""
	for m in pattern.finditer(text):
		yield m.start() + 1, m.end() + 1


def split_lines(source_text: str) -> List[str]:
	return source_text.split("\n")
