"""Dataset loading and splitting for toxicity_guard."""

from .loader import (
    LABEL_COLUMN,
    SENTIMENT_SCHEMA,
    TEXT_COLUMN,
    DatasetError,
    DatasetSchema,
    load_dataset,
)
from .split import TrainTestData, split_dataset

__all__ = [
    'LABEL_COLUMN',
    'SENTIMENT_SCHEMA',
    'TEXT_COLUMN',
    'DatasetError',
    'DatasetSchema',
    'load_dataset',
    'TrainTestData',
    'split_dataset',
]
