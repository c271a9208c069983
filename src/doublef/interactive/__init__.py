# どこで: `src/doublef/interactive/__init__.py`。
# 何を: pyglet / ModernGL に依存するライブ描画層をまとめるパッケージ。
# なぜ: GUI 依存をこの層に閉じ込め、core/export をヘッドレスに保つため。
