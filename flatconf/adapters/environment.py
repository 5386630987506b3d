"""EnvironmentPort の具体実装。"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from flatconf.core.interfaces import EnvironmentPort

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


def parse_environ_entries(entries: Iterable[str]) -> Iterator[tuple[str, str]]:
    """'NAME=VALUE' 形式の文字列を (名前, 値) に分解する

    最初の '=' で分割し、'=' を含まない場合は値を空文字とする。
    """
    for entry in entries:
        name, _, value = entry.partition("=")
        yield name, value


class OsEnvironment(EnvironmentPort):
    """プロセスの環境変数を呼び出し時点のスナップショットとして返す。"""

    def items(self) -> Iterable[tuple[str, str]]:
        return list(os.environ.items())


class StaticEnvironment(EnvironmentPort):
    """固定の環境変数集合。テストや埋め込み用途向け。

    Args:
        values: 名前から値へのマッピング
        entries: 'NAME=VALUE' 形式の文字列の並び
    """

    def __init__(self, values: Mapping[str, str] | None = None, entries: Iterable[str] | None = None):
        self.values: dict[str, str] = dict(values or {})
        if entries is not None:
            self.values.update(parse_environ_entries(entries))

    def items(self) -> Iterable[tuple[str, str]]:
        return list(self.values.items())
