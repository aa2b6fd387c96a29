"""Default option values for the html2slide CLI.

Every command-line option has a field here. A YAML file with the same keys
can replace the built-in defaults (``--config``); flags given on the
command line still take precedence.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..utils.file_utils import load_yaml
from .capture_schema import WaitStrategy


class ConverterSettings(BaseModel):
    """Defaults for a single HTML → PPTX conversion."""

    model_config = ConfigDict(extra="forbid")

    out: str = Field(default="slide.pptx", description="Output .pptx path")
    png: Optional[str] = Field(
        default=None,
        description="Intermediate PNG path. None = derived from `out`.",
    )
    selector: str = Field(default="", description="CSS selector; empty = full page")
    width: int = Field(default=960, gt=0)
    height: int = Field(default=540, gt=0)
    scale: float = Field(default=2, gt=0)
    timeout: int = Field(default=30000, gt=0, description="Navigation timeout in ms")
    wait: WaitStrategy = "networkidle"
    settle: int = Field(default=800, ge=0, description="Post-navigation settle delay in ms")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ConverterSettings":
        """Load settings from a YAML configuration file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        return cls.model_validate(load_yaml(path))
