"""Model loading and scoring for the inference branch."""

from .loader import ModelArtifact, ModelLoadError, load_model
from .predict import ModelExplainError, PredictionEngine, explain_prediction
from .schemas import FeatureContribution, SentimentIssue, SentimentPrediction

__all__ = [
    'ModelArtifact',
    'ModelLoadError',
    'load_model',
    'ModelExplainError',
    'PredictionEngine',
    'explain_prediction',
    'FeatureContribution',
    'SentimentIssue',
    'SentimentPrediction',
]
