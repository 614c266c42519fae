from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from explainer.config import Settings, get_settings
from explainer.engine import EmptyInputError, analyze_source
from explainer.model import AnalyzeResult

logger = logging.getLogger(__name__)


def _read_source(path: str) -> str:
	if path == "-":
		return sys.stdin.read()
	with open(path, "r", encoding="utf-8") as fh:
		return fh.read()


def _settings_from_args(args: argparse.Namespace) -> Settings:
	overrides = {}
	if getattr(args, "locale", None):
		overrides["locale"] = args.locale
	if getattr(args, "long_function_lines", None) is not None:
		overrides["long_function_lines"] = args.long_function_lines
	return get_settings(**overrides)


def format_result(result: AnalyzeResult) -> str:
	sections = [
		("Explanation", result.explanation),
		("Suggestions", result.suggestion_text),
		("Documentation", result.documentation_text),
	]
	parts: List[str] = []
	for title, body in sections:
		parts.append(f"== {title} ==")
		parts.append(body)
		parts.append("")
	return "\n".join(parts)


def cmd_analyze(args: argparse.Namespace) -> int:
	settings = _settings_from_args(args)
	text = _read_source(args.path)
	try:
		result = analyze_source(text, settings)
	except EmptyInputError as e:
		print(e.message, file=sys.stderr)
		return 1
	if args.json:
		print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
	else:
		print(format_result(result))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	settings = get_settings()
	host = args.host or settings.host
	port = args.port or settings.port
	logger.info("Serving on http://%s:%d", host, port)
	uvicorn.run("web.app:app", host=host, port=port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="code-explainer")
	parser.add_argument("--log-level", default=None, help="Logging level (default from EXPLAINER_LOG_LEVEL)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Explain, review and document a code snippet")
	pa.add_argument("path", nargs="?", default="-", help="File to analyze ('-' for stdin)")
	pa.add_argument("--json", action="store_true", help="Print the full result as JSON")
	pa.add_argument("--locale", default=None, help="Output language (en, pt)")
	pa.add_argument("--long-function-lines", type=int, default=None)
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run the web interface")
	ps.add_argument("--host", default=None)
	ps.add_argument("--port", type=int, default=None)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	try:
		level = args.log_level or get_settings().log_level
	except ValidationError as e:
		parser.error(str(e))
	logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
	try:
		return args.func(args)
	except ValidationError as e:
		parser.error(str(e))


if __name__ == "__main__":
	sys.exit(main())
