from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from focusfield.config import FocusFieldSettings
from focusfield.focus_range import create_focus_field
from focusfield.model import FocusContext, FocusSummary, LineDecoration
from focusfield.patterns import split_lines
from focusfield.summarize import classify_lines, get_focus_field_summary


app = FastAPI(title="Focus Field Analyzer")
settings = FocusFieldSettings.from_env()


class FocusFieldRequest(BaseModel):
	source_text: str
	file: str
	line: int
	column: int
	padding: Optional[int] = Field(default=None, ge=0)


def _context_for(req: FocusFieldRequest) -> FocusContext:
	padding = settings.padding if req.padding is None else req.padding
	context = create_focus_field(req.source_text, req.file, req.line, req.column, padding)
	if context is None:
		raise HTTPException(status_code=404, detail=f"No entity at {req.file}:{req.line}:{req.column}")
	return context


@app.post("/focus-field", response_model=FocusContext)
def focus_field(req: FocusFieldRequest) -> FocusContext:
	return _context_for(req)


@app.post("/focus-field/summary", response_model=FocusSummary)
def focus_field_summary(req: FocusFieldRequest) -> FocusSummary:
	return get_focus_field_summary(_context_for(req))


@app.post("/focus-field/lines", response_model=List[LineDecoration])
def focus_field_lines(req: FocusFieldRequest) -> List[LineDecoration]:
	context = _context_for(req)
	return classify_lines(context, len(split_lines(req.source_text)))


def create_app() -> FastAPI:
	return app
