# どこで: `src/doublef/__init__.py`。
# 何を: ルート `doublef` パッケージを定義する。
# なぜ: import 起点を `doublef` に統一するため。

from __future__ import annotations

from doublef.api import run
from doublef.core.config import AnimationConfig

__all__ = ["AnimationConfig", "run"]
