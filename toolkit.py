"""
Day31: 小ツール共通の部品集（toolkit）

狙い：
- logsum / dirscan で使ってきた「logger構成」をそのまま使い回す
- countdown で新しく必要になった「プログラム自身の置き場所」の解決もここに置く

注意：
- ここに入れるのは「どのツールでも同じ意味で使えるもの」だけ
- ファイル名（dates.txt など）やエラーの文言は各ツール側で持つ
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(name: str, verbose: bool) -> logging.Logger:
    """
    ログをstderrに出すためのloggerを構成する。

    設計意図：
    - stdoutは「結果の出力」で使いたい
    - なので進捗/警告/失敗はstderrへ寄せる
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def resolve_program_dir() -> Path:
    """
    実行中プログラムが置かれているディレクトリを返す。

    - PyInstaller などで固めた実行ファイル（sys.frozen）なら sys.executable の親
    - 普通のスクリプト / console script なら sys.argv[0] の親
    - argv[0] が空（対話実行など）のときは、このモジュール自身の親

    呼び出し側で1回だけ呼んで、値として持ち回す想定。
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and argv0 != "-c":
        return Path(argv0).resolve().parent
    return Path(__file__).resolve().parent
