"""Explainer package: explanation, suggestions and documentation stubs for code snippets.

Modules:
- extract.py: Regex scans for def/function/arrow-function signatures.
- advise.py: Code-smell heuristics producing improvement suggestions.
- document.py: Per-function documentation stubs.
- summarize.py: Plain-language explanation of the functions found.
- messages.py: User-facing text catalogs (en, pt).
- model.py: Data structures for signatures and analysis results.
- config.py: Environment-based settings.
- engine.py: Single entry point running all passes over one snippet.
"""

__all__ = [
	"extract",
	"advise",
	"document",
	"summarize",
	"messages",
	"model",
	"config",
	"engine",
]
