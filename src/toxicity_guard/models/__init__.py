"""Model implementations and archive persistence for toxicity_guard."""

from .artifacts import save_metrics, save_model, save_predictions, sidecar_path

__all__ = ['save_metrics', 'save_model', 'save_predictions', 'sidecar_path']
