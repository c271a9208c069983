# どこで: `src/doublef/core/__init__.py`。
# 何を: ヘッドレスなコア層（補間・状態機械・ジオメトリ）をまとめるパッケージ。
# なぜ: interactive/export から独立して import・テストできるようにするため。
