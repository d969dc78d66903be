"""release_ci: CI 向けリリースタグ付けレイヤ.

次バージョンの解決とタグ作成/push のオーケストレーションを提供する。
エントリポイントは `release_ci.main:main`（`release-ci` コマンド）。
"""

__version__ = "0.1.0"
