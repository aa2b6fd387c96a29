from .capture_schema import (
    WAIT_STRATEGIES, WIDESCREEN_HEIGHT_IN, WIDESCREEN_LAYOUT_NAME, WIDESCREEN_WIDTH_IN,
    CaptureRequest, PackagingRequest, PipelineResult, WaitStrategy,
)
from .settings import ConverterSettings

__all__ = [
    "WAIT_STRATEGIES",
    "WIDESCREEN_HEIGHT_IN",
    "WIDESCREEN_LAYOUT_NAME",
    "WIDESCREEN_WIDTH_IN",
    "CaptureRequest",
    "PackagingRequest",
    "PipelineResult",
    "WaitStrategy",
    "ConverterSettings",
]
