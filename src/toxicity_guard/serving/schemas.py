"""Pydantic row schemas for scoring."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SentimentIssue(BaseModel):
    """One row of labeled (or unlabeled) text."""

    text: str = Field(..., description='Raw text to classify.')
    label: bool | None = Field(
        default=None,
        description='True when the text is toxic; unset for prediction input.',
    )


class SentimentPrediction(BaseModel):
    """Scoring output for a single row."""

    prediction: bool = Field(..., description='Predicted label, True = toxic.')
    probability: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description='Calibrated probability of being toxic.',
    )
    score: float = Field(..., description='Raw decision score (margin).')


class FeatureContribution(BaseModel):
    """A single feature's signed contribution to a prediction."""

    feature: str = Field(..., description='The n-gram.')
    contribution: float = Field(..., description='tf-idf value times coefficient.')
