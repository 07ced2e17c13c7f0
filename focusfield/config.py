from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field


Intensity = Literal["subtle", "medium", "strong"]
INTENSITIES = ("subtle", "medium", "strong")


class FocusFieldSettings(BaseModel):
	padding: int = Field(default=2, ge=0)
	intensity: Intensity = "medium"
	host: str = "127.0.0.1"
	port: int = 8000
	log_level: str = "INFO"

	@classmethod
	def from_env(cls) -> "FocusFieldSettings":
		return cls(
			padding=os.getenv("FOCUSFIELD_PADDING", "2"),
			intensity=os.getenv("FOCUSFIELD_INTENSITY", "medium"),
			host=os.getenv("FOCUSFIELD_HOST", "127.0.0.1"),
			port=os.getenv("FOCUSFIELD_PORT", "8000"),
			log_level=os.getenv("FOCUSFIELD_LOG_LEVEL", "INFO").upper(),
		)
