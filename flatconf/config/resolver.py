"""ネストした設定のフラット化と環境変数の選別。"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flatconf.config.errors import ConfigSchemaError
from flatconf.core.value import ValueKind, classify

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


def join_prefix(prefix: str) -> str:
    """キー接頭辞をドット区切り形式にする（空なら空文字）"""
    return f"{prefix}." if prefix else ""


def flatten(node: Mapping[Any, Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
    """ネストしたオブジェクトを (ドット区切りキー, 葉の値) に展開する

    オブジェクトは任意の深さまで展開し、配列は単一の葉として扱う。
    入力の走査順のまま列挙する。明示的なスタックで走査するため深さに上限はない。

    Args:
        node: 展開するオブジェクト
        prefix: キーの名前空間（空なら最上位）

    Yields:
        (キー, 値) の組

    Raises:
        ConfigSchemaError: 設定値として扱えない型が含まれる場合
    """
    stack = [(join_prefix(prefix), iter(node.items()))]
    while stack:
        p, items = stack[-1]
        for k, v in items:
            key = p + str(k)
            kind = classify(v)
            if kind is None:
                raise ConfigSchemaError(f"サポートされていない値の型です: {key} ({type(v).__name__})", key=key)
            if kind is ValueKind.OBJECT:
                # 子オブジェクトを先に走査し、終わったら親の続きに戻る
                stack.append((join_prefix(key), iter(v.items())))
                break
            yield key, v
        else:
            stack.pop()


def select_environment(pairs: Iterable[tuple[str, str]], source_prefix: str = "") -> dict[str, str]:
    """名前が source_prefix で始まる環境変数だけを抽出する

    接頭辞は単純な文字列前方一致で判定し、名前からは取り除かない。
    空の接頭辞はすべての変数に一致する。
    """
    return {name: value for name, value in pairs if name.startswith(source_prefix)}
