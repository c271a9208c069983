"""
どこで: リポジトリ直下 `main.py`。
何を: 既定設定で double F アニメーションを起動する。クリックごとに 1 ノードが 1 スイープ進む。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import logging
import sys

sys.path.append("src")

from doublef import run

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
