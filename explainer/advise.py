from __future__ import annotations

import re
from typing import List

from .extract import IDENTIFIER
from .messages import ENGLISH, MessageCatalog
from .summarize import LINE_SPLIT


DEFAULT_LONG_FUNCTION_LINES = 20

# A def header whose next line(s) are blank-ish and not a triple-quoted string.
MISSING_DOCSTRING = re.compile(rf'def\s+{IDENTIFIER}\s*\([^)]*\)\s*:\s*(?:\n\s*)+(?!""")')

ASSIGNMENT_LINE = re.compile(rf"^[ \t]*({IDENTIFIER})\s*=.+$", re.MULTILINE)
DECLARATION = re.compile(r"(const|let|var)\s+")

# Body runs until the newline before the next "def " or the end of the text.
PYTHON_FUNCTION_BODY = re.compile(
	rf"def\s+{IDENTIFIER}\s*\([^)]*\):\s*(.*?)(?:\n(?=def )|\n?\Z)",
	re.DOTALL,
)


def has_missing_docstring(text: str) -> bool:
	return MISSING_DOCSTRING.search(text) is not None


def has_undeclared_assignment(text: str) -> bool:
	for m in ASSIGNMENT_LINE.finditer(text):
		if not DECLARATION.search(m.group(0)):
			return True
	return False


def has_long_function(text: str, max_lines: int = DEFAULT_LONG_FUNCTION_LINES) -> bool:
	for m in PYTHON_FUNCTION_BODY.finditer(text):
		if len(LINE_SPLIT.split(m.group(1))) > max_lines:
			return True
	return False


def advise(
	text: str,
	long_function_lines: int = DEFAULT_LONG_FUNCTION_LINES,
	catalog: MessageCatalog = ENGLISH,
) -> List[str]:
	"""Run the code-smell checks in their fixed order.

	Every check sees the original text and contributes at most one advisory.
	When nothing fires, the two generic advisories are returned instead.
	"""
	suggestions: List[str] = []
	if has_missing_docstring(text):
		suggestions.append(catalog.advice_docstring)
	if has_undeclared_assignment(text):
		suggestions.append(catalog.advice_declare_variables)
	if has_long_function(text, long_function_lines):
		suggestions.append(catalog.advice_long_function)
	if not suggestions:
		suggestions.append(catalog.advice_naming)
		suggestions.append(catalog.advice_error_handling)
	return suggestions


def join_advisories(suggestions: List[str]) -> str:
	return " ".join(suggestions)
