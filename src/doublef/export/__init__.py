# どこで: `src/doublef/export/__init__.py`。
# 何を: ヘッドレス export（SVG）をまとめるパッケージ。
