"""Flat configuration store with file and environment ingestion."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from flatconf.adapters.environment import OsEnvironment
from flatconf.config.errors import ConfigTypeError
from flatconf.config.loader import load_config_file
from flatconf.config.resolver import flatten, join_prefix, select_environment
from flatconf.core.value import ValueKind, classify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from flatconf.core.interfaces import EnvironmentPort

logger = logging.getLogger(__name__)


class FlatConfig(Mapping[str, Any]):
    """ドット区切りキーで設定値を保持するフラットなストア

    JSON/YAMLファイルと環境変数から読み込んだ設定を単一の名前空間にマージし、
    型付きアクセサで値を提供する。ネストしたオブジェクトは葉のキーまで展開され、
    中間キー（例: 'a', 'a.b'）は作られない。

    読み取りは Mapping として行い、変更はマージ操作のみで行う。
    スレッドセーフではないため、初期化時にマージを終えてから共有すること。

    Attributes:
        environment: add_environment が参照する環境変数ポート
    """

    def __init__(self, environment: EnvironmentPort | None = None):
        """空のストアを作成する

        Args:
            environment: 環境変数ポート（デフォルト: OsEnvironment）
        """
        self.environment = environment or OsEnvironment()
        self._values: dict[str, Any] = {}

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def add_file(self, path: str | Path, dest_prefix: str = "", override: bool = False) -> None:
        """設定ファイルを読み込み、ストアにマージする

        ファイル全体の展開が成功した後に書き込むため、失敗時にストアは変更されない。

        Args:
            path: 設定ファイルのパス
            dest_prefix: マージ先の名前空間（空なら最上位）
            override: 既存キーを上書きする場合True

        Raises:
            ConfigIOError: ファイルを読み込めない場合
            ConfigParseError: JSON/YAMLとして不正な場合
            ConfigSchemaError: トップレベルがオブジェクトでない、または未対応の値を含む場合
        """
        data = load_config_file(path)
        written = self.nested_merge(data, dest_prefix, override)
        logger.debug(f"設定ファイル '{path}' をマージしました: {written}/{len(self)} キー")

    def add_environment(self, source_prefix: str = "", dest_prefix: str = "", override: bool = False) -> None:
        """環境変数をストアにマージする

        名前が source_prefix で始まる変数を、名前をそのままキーとして dest_prefix 配下に追加する。
        値は常に文字列の葉として扱い、名前に '.' を含んでも分解しない。

        Args:
            source_prefix: 対象とする変数名の接頭辞（空ならすべて）
            dest_prefix: マージ先の名前空間（空なら最上位）
            override: 既存キーを上書きする場合True
        """
        selected = select_environment(self.environment.items(), source_prefix)
        p = join_prefix(dest_prefix)
        written = self._merge_leaves(((p + name, value) for name, value in selected.items()), override)
        logger.debug(f"環境変数をマージしました: prefix='{source_prefix}', {written}/{len(selected)} キー")

    def nested_merge(self, node: Mapping[Any, Any], prefix: str = "", override: bool = False) -> int:
        """ネストしたオブジェクトを展開してストアにマージする

        override=False の場合は最初の書き込みが優先され、以降の同一キーは無視される。

        Args:
            node: マージするオブジェクト
            prefix: マージ先の名前空間
            override: 既存キーを上書きする場合True

        Returns:
            書き込んだキーの数
        """
        # 未対応の値で途中まで書き込まないよう、先に全体を展開する
        leaves = list(flatten(node, prefix))
        return self._merge_leaves(leaves, override)

    def _merge_leaves(self, leaves: Iterable[tuple[str, Any]], override: bool) -> int:
        written = 0
        for key, value in leaves:
            if key not in self._values or override:
                self._values[key] = value
                written += 1
        return written

    def has_key(self, key: str) -> bool:
        """キーに null 以外の値が設定されているか

        null が明示的に設定されたキーは False になる。単純な存在確認は `key in config` を使う。
        """
        return self._values.get(key) is not None

    def as_string(self, key: str) -> str:
        """設定値を文字列として取得する（未設定や null の場合は空文字）"""
        value = self._values.get(key)
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)

    def as_int(self, key: str) -> int:
        """数値の設定値を整数として取得する

        小数は0方向に切り捨てる。

        Raises:
            ConfigTypeError: 値が数値でない、未設定、または有限でない場合
        """
        value = self._values.get(key)
        if classify(value) is not ValueKind.NUMBER:
            raise ConfigTypeError(f"数値の設定値が必要です: '{key}' = {value!r}", key)
        if isinstance(value, float) and not math.isfinite(value):
            raise ConfigTypeError(f"有限の数値の設定値が必要です: '{key}' = {value!r}", key)
        return int(value)


def read_from_file(path: str | Path) -> FlatConfig:
    """設定ファイル1つから新しいストアを作成する（接頭辞なし、上書きなし）"""
    config = FlatConfig()
    config.add_file(path)
    return config


def read_from_env(prefix: str = "", environment: EnvironmentPort | None = None) -> FlatConfig:
    """環境変数から新しいストアを作成する（接頭辞に一致する変数を最上位に追加）"""
    config = FlatConfig(environment)
    config.add_environment(prefix)
    return config
