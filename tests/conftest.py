"""Pytest fixtures for tdeecalc tests."""

from __future__ import annotations

import pytest

from tdeecalc.config import settings as settings_module


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the global settings at a config file under tmp_path."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.setattr(settings_module, "_config_path", config_path)
    return config_path


@pytest.fixture
def male_gain():
    """182 cm, 84 kg, 23-year-old moderately active man aiming to gain."""
    return {
        "height": 182,
        "weight": 84,
        "age": 23,
        "sex": "male",
        "activity": "moderately",
        "aim": "gain",
    }


@pytest.fixture
def female_lose():
    """150 cm, 90 kg, 30-year-old sedentary woman aiming to lose."""
    return {
        "height": 150,
        "weight": 90,
        "age": 30,
        "sex": "female",
        "activity": "sedentary",
        "aim": "lose",
    }
