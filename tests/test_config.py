"""
Test cases for settings defaults and environment overrides.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from config import Settings, settings
from engine.datasets import default_parameters


def test_defaults_match_reference_dataset():
    s = Settings()
    assert (s.default_universe_min, s.default_universe_max) == (30.0, 100.0)
    assert s.default_num_fuzzy_sets == 7
    assert (s.min_fuzzy_sets, s.max_fuzzy_sets) == (3, 15)
    assert s.series_step_months == 6


def test_env_prefix_override(monkeypatch):
    monkeypatch.setenv("FUZZYCAST_SERIES_STEP_MONTHS", "3")
    monkeypatch.setenv("FUZZYCAST_MAPE_WARNING_THRESHOLD", "12.5")
    s = Settings()
    assert s.series_step_months == 3
    assert s.mape_warning_threshold == 12.5


def test_default_parameters_follow_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_num_fuzzy_sets", 9)
    assert default_parameters()["num_fuzzy_sets"] == 9
