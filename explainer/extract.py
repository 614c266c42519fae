from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from .model import Dialect, FunctionSignature, SignatureForm


IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"


@dataclass(frozen=True)
class SignatureMatcher:
	"""One independent scan for a surface function-definition shape.

	Group 1 of ``pattern`` is the function name, group 2 the raw text between
	the parentheses.
	"""

	dialect: Dialect
	form: SignatureForm
	pattern: re.Pattern

	def scan(self, text: str) -> List[FunctionSignature]:
		return [
			FunctionSignature(
				dialect=self.dialect,
				form=self.form,
				name=m.group(1),
				params=m.group(2).strip(),
			)
			for m in self.pattern.finditer(text)
		]


# Passes run in this order and are concatenated, never merged by position.
SIGNATURE_MATCHERS: Tuple[SignatureMatcher, ...] = (
	SignatureMatcher(
		dialect=Dialect.PYTHON,
		form=SignatureForm.KEYWORD,
		pattern=re.compile(rf"def\s+({IDENTIFIER})\s*\(([^)]*)\)"),
	),
	SignatureMatcher(
		dialect=Dialect.JAVASCRIPT,
		form=SignatureForm.KEYWORD,
		pattern=re.compile(rf"function\s+({IDENTIFIER})\s*\(([^)]*)\)"),
	),
	SignatureMatcher(
		dialect=Dialect.JAVASCRIPT,
		form=SignatureForm.ARROW,
		pattern=re.compile(rf"({IDENTIFIER})\s*=\s*\(([^)]*)\)\s*=>"),
	),
)


def extract_signatures(text: str) -> List[FunctionSignature]:
	signatures: List[FunctionSignature] = []
	for matcher in SIGNATURE_MATCHERS:
		signatures.extend(matcher.scan(text))
	return signatures
