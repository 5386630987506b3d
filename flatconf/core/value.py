"""デコード済み設定値の種別定義。

JSON/YAML デコーダが返す汎用ツリーの各ノードを、閉じた種別集合に分類する。
マージ処理は型そのものではなくこの種別で分岐する。
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """設定値の種別"""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def classify(value: Any) -> ValueKind | None:
    """値の種別を判定する

    bool は int のサブクラスなので数値より先に判定する。

    Args:
        value: デコード済みの値

    Returns:
        種別。どの種別にも該当しない場合は None
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return None
