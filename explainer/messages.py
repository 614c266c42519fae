"""User-facing text for the explanation, suggestions and documentation.

Each locale is a complete ``MessageCatalog``. Templates use ``str.format``
placeholders.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class MessageCatalog(BaseModel):
	model_config = ConfigDict(frozen=True)

	language_names: Dict[str, str]
	no_params: str
	explanation_found: str
	explanation_keyword_part: str
	explanation_arrow_part: str
	explanation_no_functions: str

	advice_docstring: str
	advice_declare_variables: str
	advice_long_function: str
	advice_naming: str
	advice_error_handling: str

	doc_header: str
	doc_description: str
	doc_params_heading: str
	doc_param_item: str
	doc_no_params: str
	doc_returns: str
	doc_no_functions: List[str]

	empty_input: str


ENGLISH = MessageCatalog(
	language_names={"python": "Python", "javascript": "JavaScript"},
	no_params="no parameters",
	explanation_found="Found {count} function(s): {parts}.",
	explanation_keyword_part="{language}: function {name}({params})",
	explanation_arrow_part="{language}: arrow function {name}({params})",
	explanation_no_functions=(
		"The code has {count} line(s). Consider adding functions\n"
		"to organize the logic and make it easier to maintain."
	),
	advice_docstring="Add docstrings to your Python functions to explain their purpose and parameters.",
	advice_declare_variables="In JavaScript, declare variables with const or let to avoid scoping problems.",
	advice_long_function="Consider splitting very long functions into smaller ones to improve readability.",
	advice_naming="Use descriptive variable and function names and add comments where needed.",
	advice_error_handling="Add error handling to make the code more robust.",
	doc_header="### Function `{name}()`",
	doc_description="**Description:** describe what the function does.",
	doc_params_heading="**Parameters:**",
	doc_param_item="- `{param}`: parameter description.",
	doc_no_params="**Parameters:** This function takes no parameters.",
	doc_returns="**Returns:** describe the value returned by the function.",
	doc_no_functions=[
		"# Code Documentation",
		"This code snippet contains no function definitions.",
		"Use sections and comments to document the logic.",
	],
	empty_input="Please enter a code snippet to analyze.",
)

PORTUGUESE = MessageCatalog(
	language_names={"python": "Python", "javascript": "JavaScript"},
	no_params="sem parâmetros",
	explanation_found="Foram identificada(s) {count} função(ões): {parts}.",
	explanation_keyword_part="{language}: função {name}({params})",
	explanation_arrow_part="{language}: função {name}({params})",
	explanation_no_functions=(
		"O código possui {count} linha(s). Considere adicionar funções\n"
		"para organizar melhor a lógica e facilitar a manutenção."
	),
	advice_docstring="Adicione docstrings às suas funções em Python para explicar o propósito e os parâmetros.",
	advice_declare_variables="No JavaScript, declare variáveis usando const ou let para evitar problemas de escopo.",
	advice_long_function="Considere dividir funções muito longas em funções menores para melhorar a legibilidade.",
	advice_naming="Use nomes de variáveis e funções descritivos e adicione comentários quando necessário.",
	advice_error_handling="Implemente tratamento de erros para tornar o código mais robusto.",
	doc_header="### Função `{name}()`",
	doc_description="**Descrição:** descreva aqui o que a função faz.",
	doc_params_heading="**Parâmetros:**",
	doc_param_item="- `{param}`: descrição do parâmetro.",
	doc_no_params="**Parâmetros:** Esta função não recebe parâmetros.",
	doc_returns="**Retorno:** descreva aqui o valor retornado pela função.",
	doc_no_functions=[
		"# Documentação do Código",
		"Este trecho de código não contém definições de funções.",
		"Use seções e comentários para documentar a lógica.",
	],
	empty_input="Por favor, insira um trecho de código para analisar.",
)

CATALOGS: Dict[str, MessageCatalog] = {
	"en": ENGLISH,
	"pt": PORTUGUESE,
}

DEFAULT_LOCALE = "en"


def get_catalog(locale: str = DEFAULT_LOCALE) -> MessageCatalog:
	key = locale.strip().lower()
	if key not in CATALOGS:
		raise ValueError(f"Unknown locale '{locale}'. Valid: {sorted(CATALOGS)}")
	return CATALOGS[key]
