"""設定ストアの表示用フォーマッタ。"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from flatconf.config.store import FlatConfig


def render_config(config: FlatConfig, fmt: str = "text") -> str:
    """ストア全体をキー順に文字列化する

    Args:
        config: 表示する設定
        fmt: 'text'（key = value 形式）、'json'、'yaml' のいずれか

    Returns:
        整形済み文字列（末尾改行なし）
    """
    data = {key: config[key] for key in sorted(config)}

    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False).rstrip("\n")
    if fmt == "text":
        return "\n".join(f"{key} = {config.as_string(key)}" for key in data)
    raise ValueError(f"サポートされていない表示形式: {fmt}")
