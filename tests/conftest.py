"""Pytest 配置"""

import pytest

from pulselayout import Rect, config


@pytest.fixture(autouse=True)
def clean_layout_env(monkeypatch):
    """不让外部 PULSE_LAYOUT 影响 preset 解析"""
    monkeypatch.setattr(config, "LAYOUT_PRESET_OVERRIDE", "")


@pytest.fixture
def screen() -> Rect:
    """常用的 100x50 终端区域"""
    return Rect(x=0, y=0, width=100, height=50)
