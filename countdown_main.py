"""
Day31: countdown のエントリーポイント（薄いラッパー）

狙い：
- import される「実装本体」と、CLI実行の「入口」を分離する
- dates.txt はこのファイルと同じディレクトリに置く
"""

from __future__ import annotations

import sys

if __name__ == "__main__":
    from countdown import main

    raise SystemExit(main(sys.argv[1:]))
