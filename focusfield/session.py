from __future__ import annotations

import logging
from typing import List, Optional

from .config import INTENSITIES, FocusFieldSettings
from .focus_range import create_focus_field
from .model import FocusContext, LineDecoration
from .patterns import split_lines
from .summarize import classify_lines

logger = logging.getLogger(__name__)


class FocusSession:
	"""Editor-side focus state for one buffer.

	The analyzer itself keeps nothing between calls. This wraps it for a caller
	that tracks the active focus while the cursor moves and the text changes.
	"""

	def __init__(self, source_text: str, file: str, settings: Optional[FocusFieldSettings] = None):
		self.source_text = source_text
		self.file = file
		self.settings = settings or FocusFieldSettings()
		self.intensity = self.settings.intensity
		self.current: Optional[FocusContext] = None
		self.disposed = False

	def _analyze(self, line: int, column: int) -> Optional[FocusContext]:
		return create_focus_field(self.source_text, self.file, line, column, self.settings.padding)

	def create(self, line: int, column: int) -> Optional[FocusContext]:
		if self.disposed:
			return None
		context = self._analyze(line, column)
		if context is not None:
			self.current = context
		return context

	def clear(self) -> None:
		self.current = None

	def move_cursor(self, line: int, column: int) -> Optional[FocusContext]:
		"""Follow the cursor while it stays on the same name."""
		if self.disposed or self.current is None:
			return self.current
		context = self._analyze(line, column)
		if context is not None and context.target.name == self.current.target.name:
			self.current = context
		return self.current

	def update_source(self, source_text: str) -> Optional[FocusContext]:
		self.source_text = source_text
		if self.disposed or self.current is None:
			return self.current
		target = self.current.target
		context = self._analyze(target.line, target.column)
		if context is not None:
			self.current = context
		else:
			logger.debug("Focus on %s lost after edit, keeping previous context", target.name)
		return self.current

	def set_intensity(self, intensity: str) -> None:
		if intensity not in INTENSITIES:
			raise ValueError(f"Unknown focus intensity: {intensity}")
		self.intensity = intensity

	def decorations(self) -> List[LineDecoration]:
		if self.current is None:
			return []
		return classify_lines(self.current, len(split_lines(self.source_text)))

	def dispose(self) -> None:
		self.disposed = True
		self.current = None
