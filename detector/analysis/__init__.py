from detector.analysis.analyzer import AnalysisClient
from detector.analysis.client_base import BaseInferenceClient
from detector.analysis.factory import AnalysisClientFactory

__all__ = ["AnalysisClient", "AnalysisClientFactory", "BaseInferenceClient"]
