from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Tuple

import uvicorn

from focusfield.config import FocusFieldSettings
from focusfield.focus_range import create_focus_field
from focusfield.model import FocusContext
from focusfield.summarize import get_focus_field_summary


def _read_source(path: str) -> Optional[str]:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read()
	except OSError as e:
		print(f"Cannot read {path}: {e}", file=sys.stderr)
		return None


def _analyze(args: argparse.Namespace, settings: FocusFieldSettings) -> Tuple[int, Optional[FocusContext]]:
	text = _read_source(args.path)
	if text is None:
		return 2, None
	padding = settings.padding if args.padding is None else args.padding
	context = create_focus_field(text, args.path, args.line, args.column, padding)
	return (0 if context is not None else 1), context


def cmd_analyze(args: argparse.Namespace, settings: FocusFieldSettings) -> int:
	code, context = _analyze(args, settings)
	if code == 2:
		return code
	print(json.dumps(context.model_dump(mode="json") if context else None, indent=2))
	return code


def cmd_summary(args: argparse.Namespace, settings: FocusFieldSettings) -> int:
	code, context = _analyze(args, settings)
	if code == 2:
		return code
	summary = get_focus_field_summary(context).model_dump() if context else None
	print(json.dumps(summary, indent=2))
	return code


def cmd_serve(args: argparse.Namespace, settings: FocusFieldSettings) -> int:
	uvicorn.run(
		"api:app",
		host=settings.host if args.host is None else args.host,
		port=settings.port if args.port is None else args.port,
		reload=args.reload,
		log_level=settings.log_level.lower(),
	)
	return 0


def _add_position(p: argparse.ArgumentParser) -> None:
	p.add_argument("path", help="Path to source file")
	p.add_argument("--line", type=int, required=True, help="1-based cursor line")
	p.add_argument("--column", type=int, required=True, help="1-based cursor column")
	p.add_argument("--padding", type=int, default=None, help="Context lines around related lines")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="focusfield")
	parser.add_argument("--log-level", default=None, help="Logging level (default from FOCUSFIELD_LOG_LEVEL)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Print the focus field for a cursor position as JSON")
	_add_position(pa)
	pa.set_defaults(func=cmd_analyze)

	psum = sub.add_parser("summary", help="Print the focus field summary as JSON")
	_add_position(psum)
	psum.set_defaults(func=cmd_summary)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default=None)
	ps.add_argument("--port", type=int, default=None)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[list] = None) -> int:
	args = build_parser().parse_args(argv)
	settings = FocusFieldSettings.from_env()
	if args.log_level:
		settings = settings.model_copy(update={"log_level": args.log_level.upper()})
	logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
	return args.func(args, settings)


if __name__ == "__main__":
	sys.exit(main())
