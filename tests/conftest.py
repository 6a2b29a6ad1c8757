"""Shared fixtures: a small synthetic toxicity corpus and matching configs."""

from __future__ import annotations

from dataclasses import replace
from itertools import product
from pathlib import Path

import pytest

from toxicity_guard.config import AppConfig, PathConfig

TOXIC_WORDS = ['rude', 'stupid', 'idiotic', 'disgusting', 'pathetic', 'hateful']
CLEAN_WORDS = ['helpful', 'thoughtful', 'useful', 'accurate', 'interesting', 'careful']
SUBJECTS = ['edit', 'movie', 'article', 'comment', 'page']
TEMPLATES = [
    'This is a very {word} {subject}',
    'What a {word} {subject} you wrote',
]


def toxicity_rows() -> list[tuple[int, str]]:
    rows: list[tuple[int, str]] = []
    for template, word, subject in product(TEMPLATES, TOXIC_WORDS, SUBJECTS):
        rows.append((1, template.format(word=word, subject=subject)))
    for template, word, subject in product(TEMPLATES, CLEAN_WORDS, SUBJECTS):
        rows.append((0, template.format(word=word, subject=subject)))
    return rows


def write_toxicity_tsv(path: Path, header: tuple[str, str] = ('Sentiment', 'SentimentText')) -> Path:
    lines = ['\t'.join(header)]
    lines.extend(f'{label}\t{text}' for label, text in toxicity_rows())
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path


@pytest.fixture
def toxicity_tsv(tmp_path: Path) -> Path:
    return write_toxicity_tsv(tmp_path / 'Data' / 'toxicity.tsv')


@pytest.fixture
def app_config(tmp_path: Path, toxicity_tsv: Path) -> AppConfig:
    config = AppConfig.default(tmp_path)
    return replace(
        config,
        paths=PathConfig(
            data=toxicity_tsv,
            model=tmp_path / 'MLModels' / 'SentimentModel.joblib',
        ),
    )
