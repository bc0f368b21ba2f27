"""설정 로드 / MetricSettings / 로깅 테스트"""

import logging

import pytest

from facial_harmony.config.settings import MetricSettings, WeightConfiguration
from facial_harmony.utils.config_loader import CONFIG_PATH_ENV, Config, get_config
from facial_harmony.utils.exceptions import InvalidInputError
from facial_harmony.utils.logging_config import get_logger


def test_packaged_config_loads():
    config = get_config()
    assert config.get('harmony.tolerances.symmetry') == 0.04
    assert config.harmony.targets.golden_ratio == 1.618
    assert config.get('harmony.not_there', 'fallback') == 'fallback'
    with pytest.raises(AttributeError):
        config.not_a_section


def test_packaged_config_matches_builtin_defaults():
    config = get_config()
    assert MetricSettings.from_config(config) == MetricSettings()
    assert WeightConfiguration.from_config(config) == WeightConfiguration()


def test_env_var_overrides_config_path(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("harmony:\n  tolerances:\n    fifths: 0.3\n  weights:\n    eyeGap: 0\n", encoding='utf-8')
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    config = Config()
    assert config.config_path == path

    settings = MetricSettings.from_config(config)
    assert settings.fifths_tolerance == 0.3
    # 섹션에 없는 값은 기본값
    assert settings.symmetry_tolerance == 0.04
    assert settings.face_length_correction == 1.4

    weights = WeightConfiguration.from_config(config)
    assert weights.eye_gap == 0
    assert weights.symmetry == 40


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "missing.yaml")


def test_malformed_config_file(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("harmony: [unclosed\n", encoding='utf-8')
    with pytest.raises(ValueError):
        Config(path)


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding='utf-8')
    config = Config(path)
    assert config.to_dict() == {}
    assert MetricSettings.from_config(config) == MetricSettings()


@pytest.mark.parametrize("field", [
    'symmetry_tolerance', 'proportion_tolerance', 'fifths_tolerance', 'eye_gap_tolerance',
])
@pytest.mark.parametrize("value", [0.0, -0.2])
def test_settings_reject_non_positive_tolerance(field, value):
    with pytest.raises(InvalidInputError):
        MetricSettings(**{field: value})


def test_tolerance_lookup_by_metric_name():
    settings = MetricSettings()
    assert settings.tolerance_for('symmetry') == 0.04
    assert settings.tolerance_for('proportion') == 0.15
    assert settings.tolerance_for('fifths') == 0.18
    assert settings.tolerance_for('eye_gap') == 0.25


def test_logger_setup_is_idempotent():
    logger = get_logger("facial_harmony.test_logger")
    handlers = list(logger.handlers)
    assert get_logger("facial_harmony.test_logger") is logger
    assert logger.handlers == handlers
    assert logger.level == logging.INFO
