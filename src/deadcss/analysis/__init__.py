from deadcss.analysis.projection import project, publish
from deadcss.analysis.reconciler import distinct_unused, find_unused
from deadcss.analysis.result import AnalysisResult, AnalysisStatus
from deadcss.analysis.runner import AnalysisSession, Analyzer

__all__ = [
    "find_unused",
    "distinct_unused",
    "project",
    "publish",
    "AnalysisResult",
    "AnalysisStatus",
    "Analyzer",
    "AnalysisSession",
]
