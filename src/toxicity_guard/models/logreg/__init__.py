"""Logistic Regression model implementation.

- training.py: feature pipeline (TF-IDF word + char n-grams) and LogReg trainer
"""

from .training import (
    TrainingResult,
    build_pipeline,
    build_vectorizer,
    score_frame,
    train_model,
    trainer_name,
)

__all__ = [
    'TrainingResult',
    'build_pipeline',
    'build_vectorizer',
    'score_frame',
    'train_model',
    'trainer_name',
]
