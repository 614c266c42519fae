from __future__ import annotations

import logging
from typing import Optional

from .advise import advise, join_advisories
from .config import Settings, get_settings
from .document import document_signatures
from .extract import extract_signatures
from .messages import get_catalog
from .model import AnalyzeResult
from .summarize import count_code_lines, summarize_signatures

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
	"""Raised when the submitted snippet has no non-whitespace characters."""

	def __init__(self, message: str = "input is empty") -> None:
		super().__init__(message)
		self.message = message


def analyze_source(text: str, settings: Optional[Settings] = None) -> AnalyzeResult:
	"""Explain, review and document one snippet.

	The three passes are independent and only read ``text``. Whitespace-only
	input is rejected before any of them runs.
	"""
	settings = settings or get_settings()
	catalog = get_catalog(settings.locale)
	if not text.strip():
		raise EmptyInputError(catalog.empty_input)

	signatures = extract_signatures(text)
	explanation = summarize_signatures(signatures, count_code_lines(text), catalog)
	suggestions = advise(text, settings.long_function_lines, catalog)
	documentation = document_signatures(signatures, catalog)
	logger.debug(
		"Analyzed %d chars: %d function(s), %d suggestion(s)",
		len(text),
		len(signatures),
		len(suggestions),
	)

	return AnalyzeResult(
		source=text,
		functions=signatures,
		explanation=explanation,
		suggestions=suggestions,
		suggestion_text=join_advisories(suggestions),
		documentation=documentation,
		documentation_text="\n".join(documentation),
	)
