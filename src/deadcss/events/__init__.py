from deadcss.events.bus import EventBus
from deadcss.events.types import (
    AnalysisAborted,
    AnalysisCompleted,
    AnalysisSkipped,
    AnalysisStarted,
    FileAnalyzed,
    RunEvent,
)

__all__ = [
    "EventBus",
    "RunEvent",
    "AnalysisStarted",
    "FileAnalyzed",
    "AnalysisCompleted",
    "AnalysisSkipped",
    "AnalysisAborted",
]
