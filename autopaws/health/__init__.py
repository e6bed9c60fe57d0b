# autopaws/health/__init__.py
from .analysis import AnalysisResult, analyze, default_analysis
from .classifier import classify
from .predictions import Projection, project
from .recommendations import recommend
from .scoring import compute_score

__all__ = [
    'AnalysisResult',
    'analyze',
    'default_analysis',
    'classify',
    'project',
    'Projection',
    'recommend',
    'compute_score',
]
