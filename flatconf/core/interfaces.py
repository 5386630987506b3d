"""ポートインターフェース定義。

設定ストアはここで定義されるProtocolに依存し、具体実装は adapters 層へ分離する。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable


class EnvironmentPort(Protocol):
    """環境変数取得ポート。"""

    def items(self) -> Iterable[tuple[str, str]]:
        """呼び出し時点の (名前, 値) の組を返す。"""
