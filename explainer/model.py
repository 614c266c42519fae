from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class Dialect(str, Enum):
	PYTHON = "python"
	JAVASCRIPT = "javascript"


class SignatureForm(str, Enum):
	KEYWORD = "keyword"
	ARROW = "arrow"


class FunctionSignature(BaseModel):
	model_config = ConfigDict(frozen=True)

	dialect: Dialect
	form: SignatureForm = SignatureForm.KEYWORD
	name: str
	params: str = ""


class AnalyzeResult(BaseModel):
	source: str
	functions: List[FunctionSignature] = []
	explanation: str
	suggestions: List[str] = []
	suggestion_text: str = ""
	documentation: List[str] = []
	documentation_text: str = ""
