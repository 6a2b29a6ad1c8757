"""Console reporting."""

from .console import (
    format_binary_classification_metrics,
    format_single_prediction,
    print_binary_classification_metrics,
    print_explanation,
    print_model_saved,
    print_single_prediction,
)

__all__ = [
    'format_binary_classification_metrics',
    'format_single_prediction',
    'print_binary_classification_metrics',
    'print_explanation',
    'print_model_saved',
    'print_single_prediction',
]
