"""
Day31: toolkit のテスト。

狙い：
- logger が stderr 専用で、二重に handler を積まないことを押さえる
- 「プログラムの置き場所」の決め方（frozen / argv[0] / フォールバック）を確認する
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

import toolkit


def test_setup_logger_levels_and_single_handler() -> None:
    # テスト意図：verbose で INFO / WARNING が切り替わり、何度呼んでも handler は1つ
    logger = toolkit.setup_logger("test-toolkit", False)
    assert logger.level == logging.WARNING
    assert logger.propagate is False

    logger = toolkit.setup_logger("test-toolkit", True)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_resolve_program_dir_uses_argv0(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # テスト意図：普通のスクリプト実行では argv[0] の親ディレクトリになる
    script = tmp_path / "countdown_main.py"
    script.write_text("", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(script)])
    monkeypatch.delattr(sys, "frozen", raising=False)

    assert toolkit.resolve_program_dir() == tmp_path.resolve()


def test_resolve_program_dir_uses_executable_when_frozen(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # テスト意図：固めた実行ファイルでは sys.executable の親ディレクトリになる
    exe = tmp_path / "countdown.exe"
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "executable", str(exe))

    assert toolkit.resolve_program_dir() == tmp_path.resolve()


def test_resolve_program_dir_falls_back_to_module_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    # テスト意図：argv[0] が空なら toolkit.py 自身の置き場所を使う
    monkeypatch.setattr(sys, "argv", [""])
    monkeypatch.delattr(sys, "frozen", raising=False)

    assert toolkit.resolve_program_dir() == Path(toolkit.__file__).resolve().parent
