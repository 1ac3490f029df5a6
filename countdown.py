"""
Day31: 日付カウントダウン（countdown）

狙い：
- 小さなテキストファイル（dates.txt）を1行ずつ読み、
  「その日まであと何日 / その日から何日経ったか」を表示する
- logsum と同じく「行のパース（純粋関数）」と「ファイルI/O」を分ける
- 失敗は「何行目で何が起きたか」を持った例外にして、main でだけ表示/終了コードに変換する

dates.txt の形式：
    # コメント行と空行は無視する
    2024/1/15 旅行
    2024-01-05 締め切り

出力例（今日が 2024-01-10 のとき）：
    距离 旅行 还有 5 天
    距离 締め切り 已经过去了 5 天
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

import toolkit

LOGGER_NAME = "countdown"
DATE_FILE_NAME = "dates.txt"
DATE_FORMAT = "%Y-%m-%d"

# 表示文言はここだけ。多言語化するならこの表を差し替える。
MESSAGES = {
    "today": "{content} 就在今天",
    "remain": "距离 {content} 还有 {days} 天",
    "passed": "距离 {content} 已经过去了 {days} 天",
}


# -------------------------
# エラー（どれも致命的。リトライしない）
# -------------------------


class CountdownError(Exception):
    """countdown の失敗すべての基底クラス。main はこれだけを捕まえる。"""


class FileOpenError(CountdownError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f'Failed to open file "{path}": {cause}')


class FileReadError(CountdownError):
    def __init__(self, path: Path, lineno: int, cause: Exception) -> None:
        self.path = path
        self.lineno = lineno
        self.cause = cause
        super().__init__(f'Failed to read file "{path}":{lineno}: {cause}')


class MissingSeparatorError(CountdownError):
    def __init__(self, lineno: int) -> None:
        self.lineno = lineno
        super().__init__(f"Failed to parse line {lineno}: No spaces found.")


class InvalidDateError(CountdownError):
    def __init__(self, lineno: int, token: str, reason: str) -> None:
        self.lineno = lineno
        self.token = token
        self.reason = reason
        super().__init__(f"Failed to parse line {lineno}: Illegal date expression {token}: {reason}.")


# -------------------------
# データモデル（DTO）
# -------------------------


@dataclass(frozen=True)
class Entry:
    """
    1行ぶんの解釈結果（日付 + 内容）。

    集めて保持はしない。1行ごとに作って、表示したら捨てる。
    """

    date: date
    content: str


# -------------------------
# 行のパース / 表示（副作用なし）
# -------------------------


def parse_entry(line: str, lineno: int) -> Entry:
    """
    `{yyyy}/{m}/{d} {content}` を Entry にする。

    仕様として守りたいこと：
    - 最初の空白1つで分ける（content 側の空白はそのまま残す）
    - 空白が無ければ日付を見る前に MissingSeparatorError
    - `/` は `-` に揃えてからパースする（2024/3/5 と 2024-3-5 は同じ日）
    - 月/日の範囲チェックは strptime に任せる（独自の事前チェックはしない）
    - 数字は ASCII だけ（strptime の \\d は全角数字も通してしまう）
    """
    date_part, sep, content = line.partition(" ")
    if not sep:
        raise MissingSeparatorError(lineno)

    token = date_part.replace("/", "-")
    if not token.isascii():
        raise InvalidDateError(lineno, token, "non-ASCII characters in date")
    try:
        parsed = datetime.strptime(token, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(lineno, token, str(exc)) from exc
    return Entry(date=parsed, content=content)


def days_until(target: date, today: date) -> int:
    """target - today を日数で返す（未来なら正、過去なら負）。"""
    return (target - today).days


def format_message(content: str, days_diff: int) -> str:
    if days_diff == 0:
        return MESSAGES["today"].format(content=content)
    if days_diff > 0:
        return MESSAGES["remain"].format(content=content, days=days_diff)
    return MESSAGES["passed"].format(content=content, days=-days_diff)


def parse_line(today: date, line: str, lineno: int) -> str:
    """
    1行をパースして、表示する1行ぶんの文字列を返す。

    呼び出し側で空行/コメント行は取り除いておくこと。
    同じ (today, line, lineno) なら何度呼んでも同じ結果になる。
    """
    entry = parse_entry(line, lineno)
    return format_message(entry.content, days_until(entry.date, today))


def is_skipped(line: str) -> bool:
    # 空行とコメント行（先頭が #）は読み飛ばす
    return line == "" or line.startswith("#")


# -------------------------
# 入力（I/O境界）
# -------------------------


def iter_numbered_lines(fp: BinaryIO, path: Path) -> Iterator[tuple[int, str]]:
    """
    バイナリで開いたファイルから (行番号, 改行を除いた行) を順に yield する。

    - 行番号は1始まり
    - 行の区切りは `\\n` と `\\r\\n` だけ（単独の `\\r` は行の中身として残す）
    - UTF-8 のデコードは1行ずつ。壊れた行より前の行はそれまでどおり流れる
    - 読み取り中の失敗は FileReadError（何行目を読んでいたか付き）にする
    """
    lineno = 0
    while True:
        lineno += 1
        try:
            raw = fp.readline()
        except OSError as exc:
            raise FileReadError(path, lineno, exc) from exc
        if raw == b"":
            return
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FileReadError(path, lineno, exc) from exc
        yield lineno, line


# -------------------------
# 実行本体
# -------------------------


@dataclass(frozen=True)
class Countdown:
    """
    today と dates.txt のパスを起動時に1回だけ決めて持つ実行本体。

    どちらも外から渡す（テストでは tmp_path と固定の日付を渡す）。
    """

    today: date
    date_file_path: Path

    @classmethod
    def create(cls, program_dir: Path, today: date | None = None) -> Countdown:
        return cls(
            today=today if today is not None else date.today(),
            date_file_path=program_dir / DATE_FILE_NAME,
        )

    def open(self) -> BinaryIO:
        try:
            return self.date_file_path.open("rb")
        except OSError as exc:
            raise FileOpenError(self.date_file_path, exc) from exc

    def run(self, out: TextIO | None = None) -> int:
        """
        dates.txt を先頭から処理して、表示した件数を返す。

        最初に失敗した行で CountdownError を投げて止まる（それまでの出力は残る）。
        """
        out = out if out is not None else sys.stdout

        printed = 0
        with self.open() as fp:
            for lineno, line in iter_numbered_lines(fp, self.date_file_path):
                if is_skipped(line):
                    continue
                print(parse_line(self.today, line, lineno), file=out)
                printed += 1
        return printed


# -------------------------
# CLI（入口）
# -------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    CLI引数を解析する。

    countdown はオプションを取らない（入力はプログラムと同じ場所の dates.txt 固定）。
    --help で使い方だけ出せるようにしておく。
    """
    parser = argparse.ArgumentParser(
        description=f"Print days remaining until / passed since each date listed in {DATE_FILE_NAME} "
        "(located next to this program)."
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    実行入口（テストからも呼べる形）。

    - エラーを stderr（logger.error）に出して終了コードにするのはここだけ
    - 成功なら 0（1件も無くても 0）、失敗なら 1
    """
    parse_args(argv)
    logger = toolkit.setup_logger(LOGGER_NAME, verbose=False)

    countdown = Countdown.create(toolkit.resolve_program_dir())
    try:
        countdown.run()
    except CountdownError as exc:
        logger.error("%s", exc)
        return 1
    return 0
