#!/usr/bin/env python3
"""
Test 5: Demo script
Honest exchange succeeds, substituted r1 is caught, bad parameters exit 2
"""

import sys
import os
# Add project root to path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import importlib.util

import pytest

spec = importlib.util.spec_from_file_location("demo_exchange", os.path.join(ROOT, "scripts", "demo_exchange.py"))
demo = importlib.util.module_from_spec(spec)
spec.loader.exec_module(demo)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("DH_GENERATOR", "DH_MODULUS"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_honest_exchange(capsys):
    assert demo.main(["--env-file", "absent.env", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "2048 bits" in out
    assert "same secret" in out


def test_custom_group_from_command_line(capsys):
    assert demo.main(["--env-file", "absent.env", "-g", "627", "-p", "941"]) == 0
    assert "10 bits" in capsys.readouterr().out


def test_tampered_exchange_detected(capsys):
    assert demo.main(["--env-file", "absent.env", "--seed", "3", "--tamper"]) == 1
    assert "Inconsistent" in capsys.readouterr().out


def test_bad_parameters(capsys):
    assert demo.main(["--env-file", "absent.env", "-g", "1", "-p", "941"]) == 2
    assert "1 < g < p" in capsys.readouterr().out


def test_tamper_never_reports_consistent_on_small_group(capsys):
    codes = [
        demo.main(["--env-file", "absent.env", "-g", "627", "-p", "941", "--seed", str(seed), "--tamper"])
        for seed in range(300)
    ]
    capsys.readouterr()
    assert 0 not in codes
    # 3 only when the substitute genuinely reproduces sk under b
    assert set(codes) <= {1, 3}
    assert codes.count(1) >= 270
