import logging

import pytest

from spacescroll import SceneConfig


def test_defaults():
    config = SceneConfig()

    assert config.fov == 75
    assert (config.near, config.far) == (0.1, 1000)
    assert config.camera_z == 30
    assert config.torus_delta == (0.01, 0.01, 0.01)
    assert config.moon_delta == (0.05, 0.075, 0.05)
    assert config.camera_scroll_scale == -0.0002
    assert config.star_count == 200
    assert config.moon_position == (2.0, 0.0, 0.0)
    assert config.assets_dir is None
    assert repr(config) == "<SceneConfig>"


def test_overrides():
    config = SceneConfig(star_count=10, torus_delta=[0, 0.1, 0])

    assert config.star_count == 10
    assert config.torus_delta == (0.0, 0.1, 0.0)
    assert "star_count=10" in repr(config)


def test_unknown_field():
    with pytest.raises(TypeError):
        SceneConfig(stars=10)

    config = SceneConfig()
    with pytest.raises(AttributeError):
        config.stars = 10


def test_vector_fields_need_three_numbers():
    with pytest.raises(ValueError):
        SceneConfig(moon_delta=(1, 2))
    with pytest.raises(ValueError):
        SceneConfig(moon_delta=0.1)
    with pytest.raises(ValueError):
        SceneConfig(moon_position=("a", "b", "c"))


def test_fields():
    fields = SceneConfig.fields()
    assert "torus_delta" in fields
    assert "page_height" in fields


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SPACESCROLL_STAR_COUNT", "42")
    monkeypatch.setenv("SPACESCROLL_CAMERA_SCROLL_SCALE", "-0.001")
    monkeypatch.setenv("SPACESCROLL_ASSETS_DIR", str(tmp_path))
    monkeypatch.setenv("SPACESCROLL_SEED", "7")

    config = SceneConfig.from_env()

    assert config.star_count == 42
    assert config.camera_scroll_scale == -0.001
    assert config.assets_dir == str(tmp_path)
    assert config.seed == 7


def test_from_env_overrides_win(monkeypatch):
    monkeypatch.setenv("SPACESCROLL_STAR_COUNT", "42")

    config = SceneConfig.from_env(star_count=3)

    assert config.star_count == 3


def test_from_env_invalid_value(monkeypatch, caplog):
    monkeypatch.setenv("SPACESCROLL_STAR_COUNT", "lots")

    with caplog.at_level(logging.WARNING, logger="spacescroll"):
        config = SceneConfig.from_env()

    assert config.star_count == 200
    assert "SPACESCROLL_STAR_COUNT" in caplog.text


def test_from_env_skips_vector_fields(monkeypatch):
    monkeypatch.setenv("SPACESCROLL_MOON_DELTA", "1,1,1")

    config = SceneConfig.from_env()

    assert config.moon_delta == (0.05, 0.075, 0.05)
