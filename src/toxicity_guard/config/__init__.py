"""Configuration utilities for toxicity_guard."""

from .app import (
    MODE_INFER,
    MODE_TRAIN,
    AppConfig,
    ClassifierConfig,
    InferenceConfig,
    PathConfig,
    SplitConfig,
    VectorizerConfig,
    VectorizerStrategy,
    load_app_config,
)

__all__ = [
    'MODE_INFER',
    'MODE_TRAIN',
    'AppConfig',
    'ClassifierConfig',
    'InferenceConfig',
    'PathConfig',
    'SplitConfig',
    'VectorizerConfig',
    'VectorizerStrategy',
    'load_app_config',
]
