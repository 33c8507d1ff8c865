"""
Tests for the configuration schemas and the packaged Hydra config.
"""
import logging
from pathlib import Path

import pytest
from hydra import compose, initialize_config_dir
from omegaconf import OmegaConf, errors as omegaconf_errors
from pydantic import ValidationError

import acrostic
from acrostic.config.schemas import AppConfig, GenerationConfig
from acrostic.main import run_generation

CONFIG_DIR = Path(acrostic.__file__).parent / "conf"


def compose_config(overrides=None):
    with initialize_config_dir(config_dir=str(CONFIG_DIR.resolve()), version_base=None, job_name="test_app_config"):
        return compose(config_name="config", overrides=overrides or [])


def test_generation_config_defaults():
    config = GenerationConfig()
    assert config.temperature == 0.75
    assert config.initial_letters == ""
    assert config.seed_text is None
    assert config.stream is False


def test_generation_config_letters_strip_whitespace():
    config = GenerationConfig(initial_letters="h w\ta")
    assert config.letters == ["h", "w", "a"]


@pytest.mark.parametrize("temperature", [0.0, -0.5, 1.5])
def test_out_of_range_temperature_warns(caplog, temperature):
    with caplog.at_level(logging.WARNING, logger="acrostic.config.schemas"):
        config = GenerationConfig(temperature=temperature)
    assert config.temperature == temperature
    assert "outside the intended range" in caplog.text


def test_app_config_requires_model_dir():
    with pytest.raises(ValidationError):
        AppConfig()


def test_app_config_rejects_unknown_device():
    with pytest.raises(ValidationError):
        AppConfig(model_dir="m", device="tpu")


def test_packaged_config_composes_and_validates():
    cfg = compose_config(["model_dir=/tmp/model", "generation.initial_letters=HI"])
    validated = AppConfig(**OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True))
    assert validated.model_dir == "/tmp/model"
    assert validated.generation.letters == ["H", "I"]
    assert validated.device == "auto"


def test_run_generation_missing_model_dir_raises():
    cfg = compose_config()
    with pytest.raises(omegaconf_errors.MissingMandatoryValue):
        run_generation(cfg)


def test_run_generation_end_to_end(model_dir):
    cfg = compose_config([
        f"model_dir='{model_dir}'",
        "device=cpu",
        "seed=0",
        "generation.initial_letters='h w'",
        "generation.seed_text=hello",
    ])
    assert run_generation(cfg) == "h  w "


def test_run_generation_random_seed_from_corpus(model_dir, corpus_file):
    cfg = compose_config([
        f"model_dir='{model_dir}'",
        f"corpus_path='{corpus_file}'",
        "device=cpu",
        "generation.initial_letters=a",
    ])
    assert run_generation(cfg) == "a "


def test_run_generation_without_letters_returns_empty(model_dir):
    cfg = compose_config([f"model_dir='{model_dir}'"])
    assert run_generation(cfg) == ""


def test_run_generation_streams_full_text_to_stdout(model_dir, capsys):
    cfg = compose_config([
        f"model_dir='{model_dir}'",
        "device=cpu",
        "seed=0",
        "generation.initial_letters='h w'",
        "generation.seed_text=hello",
        "generation.stream=true",
    ])
    result = run_generation(cfg)
    assert result == "h  w "
    assert capsys.readouterr().out == result


def test_run_generation_unknown_initial_fails_before_streaming(model_dir, capsys):
    cfg = compose_config([
        f"model_dir='{model_dir}'",
        "device=cpu",
        "generation.initial_letters='h Q'",
        "generation.seed_text=hello",
        "generation.stream=true",
    ])
    with pytest.raises(ValueError, match="not in the char set"):
        run_generation(cfg)
    assert capsys.readouterr().out == ""
