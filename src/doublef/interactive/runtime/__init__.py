# どこで: `src/doublef/interactive/runtime/__init__.py`。
# 何を: ウィンドウループと描画サブシステムをまとめるパッケージ。
