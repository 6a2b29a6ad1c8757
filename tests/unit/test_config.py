"""Unit tests for app config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from toxicity_guard.config import (
    MODE_INFER,
    AppConfig,
    VectorizerStrategy,
    load_app_config,
)


def test_default_config_reproduces_fixed_constants(tmp_path: Path) -> None:
    config = AppConfig.default(tmp_path)

    assert config.mode == MODE_INFER
    assert config.paths.data == (tmp_path / 'Data' / 'wikiDetoxAnnotated40kRows.tsv').resolve()
    assert config.paths.model == (tmp_path / 'MLModels' / 'SentimentModel.joblib').resolve()
    assert config.split.test_fraction == 0.2
    assert config.split.seed == 1
    assert config.inference.sample_text == 'This is a very rude movie'


def test_load_app_config_resolves_paths_relative_to_file(tmp_path: Path) -> None:
    config_dir = tmp_path / 'configs'
    config_dir.mkdir()
    config_file = config_dir / 'app.yaml'
    config_file.write_text(
        """
mode: train
paths:
  data: ../Data/train.tsv
  model: ../MLModels/model.joblib
split:
  test_fraction: 0.25
  seed: 7
vectorizer:
  strategies:
    words:
      analyzer: word
      ngram_range: [1, 3]
      min_df: 2
classifier:
  C: 0.5
inference:
  sample_text: hello there
  wait_for_key: false
""",
        encoding='utf-8',
    )

    config = load_app_config(config_file)

    assert config.mode == 'train'
    assert config.paths.data == (tmp_path / 'Data' / 'train.tsv').resolve()
    assert config.paths.model == (tmp_path / 'MLModels' / 'model.joblib').resolve()
    assert config.split.test_fraction == 0.25
    assert config.split.seed == 7
    assert config.vectorizer.strategies == {
        'words': VectorizerStrategy(analyzer='word', ngram_range=(1, 3), min_df=2),
    }
    assert config.classifier.C == 0.5
    assert config.inference.sample_text == 'hello there'
    assert config.inference.wait_for_key is False


def test_load_app_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / 'app.yaml'
    config_file.write_text('', encoding='utf-8')

    config = load_app_config(config_file)

    assert config.mode == MODE_INFER
    assert set(config.vectorizer.strategies) == {'word', 'char'}
    assert config.paths.model == (tmp_path / 'MLModels' / 'SentimentModel.joblib').resolve()


def test_load_app_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match='Config file not found'):
        load_app_config(tmp_path / 'missing.yaml')


@pytest.mark.parametrize('fraction', [0.0, 1.0, 1.5])
def test_load_app_config_rejects_bad_test_fraction(tmp_path: Path, fraction: float) -> None:
    config_file = tmp_path / 'app.yaml'
    config_file.write_text(f'split:\n  test_fraction: {fraction}\n', encoding='utf-8')

    with pytest.raises(ValueError, match='test_fraction'):
        load_app_config(config_file)


def test_load_app_config_rejects_bad_ngram_range(tmp_path: Path) -> None:
    config_file = tmp_path / 'app.yaml'
    config_file.write_text(
        'vectorizer:\n  strategies:\n    word:\n      ngram_range: [1, 2, 3]\n',
        encoding='utf-8',
    )

    with pytest.raises(ValueError, match='ngram_range'):
        load_app_config(config_file)
