"""
どこで: リポジトリ直下 `main.py`。
何を: Shape Drawer のウィンドウを起動する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

from shapedraw.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
