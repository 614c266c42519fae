from __future__ import annotations

import re
from typing import List

from .extract import extract_signatures
from .messages import ENGLISH, MessageCatalog
from .model import FunctionSignature, SignatureForm


LINE_SPLIT = re.compile(r"\r?\n")


def count_code_lines(text: str) -> int:
	return len([line for line in LINE_SPLIT.split(text) if line.strip() != ""])


def describe_signature(sig: FunctionSignature, catalog: MessageCatalog = ENGLISH) -> str:
	template = (
		catalog.explanation_arrow_part
		if sig.form == SignatureForm.ARROW
		else catalog.explanation_keyword_part
	)
	return template.format(
		language=catalog.language_names[sig.dialect.value],
		name=sig.name,
		params=sig.params or catalog.no_params,
	)


def summarize_signatures(
	signatures: List[FunctionSignature],
	line_count: int,
	catalog: MessageCatalog = ENGLISH,
) -> str:
	if not signatures:
		return catalog.explanation_no_functions.format(count=line_count)
	parts = [describe_signature(sig, catalog) for sig in signatures]
	return catalog.explanation_found.format(count=len(signatures), parts="; ".join(parts))


def explain(text: str, catalog: MessageCatalog = ENGLISH) -> str:
	"""Plain-language summary of the functions found in ``text``."""
	return summarize_signatures(extract_signatures(text), count_code_lines(text), catalog)
