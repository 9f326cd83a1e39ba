# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from spatial_kernel.main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('SPATIAL_DEMO_ANGLE', 'SPATIAL_DEMO_AXIS', 'SPATIAL_DEMO_POINT'):
        monkeypatch.delenv(name, raising=False)


def test_main_prints_before_and_after(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("[ 0.0; 0.0i; 1.0j; 1.0k ] 45deg > [ ")


def test_main_accepts_parameters(capsys):
    assert main(['--angle', '90', '--axis', '0,0,1', '--point', '1,0,0,0']) == 0

    assert "90deg >" in capsys.readouterr().out


def test_main_uses_environment(monkeypatch, capsys):
    monkeypatch.setenv('SPATIAL_DEMO_ANGLE', '30')

    assert main([]) == 0
    assert "30deg >" in capsys.readouterr().out


def test_main_rejects_malformed_parameters(capsys, caplog):
    assert main(['--axis', '1,0']) == 1

    assert capsys.readouterr().out == ""
    assert "Invalid demo parameters" in caplog.text
