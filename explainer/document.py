from __future__ import annotations

from typing import List

from .extract import extract_signatures
from .messages import ENGLISH, MessageCatalog
from .model import FunctionSignature


def split_params(params: str) -> List[str]:
	if not params:
		return []
	return [p.strip() for p in params.split(",")]


def document_signature(sig: FunctionSignature, catalog: MessageCatalog = ENGLISH) -> List[str]:
	lines: List[str] = [
		catalog.doc_header.format(name=sig.name),
		catalog.doc_description,
	]
	params = split_params(sig.params)
	if params and params != [""]:
		lines.append(catalog.doc_params_heading)
		for param in params:
			lines.append(catalog.doc_param_item.format(param=param))
	else:
		lines.append(catalog.doc_no_params)
	lines.append(catalog.doc_returns)
	lines.append("")
	return lines


def document_signatures(
	signatures: List[FunctionSignature],
	catalog: MessageCatalog = ENGLISH,
) -> List[str]:
	if not signatures:
		return list(catalog.doc_no_functions)
	lines: List[str] = []
	for sig in signatures:
		lines.extend(document_signature(sig, catalog))
	return lines


def generate_documentation(text: str, catalog: MessageCatalog = ENGLISH) -> List[str]:
	return document_signatures(extract_signatures(text), catalog)
