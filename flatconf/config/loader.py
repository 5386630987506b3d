"""設定ファイルの読み込み専用モジュール。"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from flatconf.config.errors import ConfigIOError, ConfigParseError, ConfigSchemaError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def read_config_bytes(path: str | Path) -> bytes:
    """設定ファイルの内容をバイト列として読み込む

    Raises:
        ConfigIOError: ファイルが存在しない、または読み込めない場合
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as f:
            return f.read()
    except OSError as e:
        raise ConfigIOError(f"設定ファイルを読み込めません: {config_path}: {e}", str(config_path)) from e


def _reject_constant(name: str) -> Any:
    # NaN/Infinity はJSONの値ではない
    raise ValueError(f"JSONでは使用できない値です: {name}")


def decode_config_text(text: str, suffix: str = ".json", source: str = "<string>") -> Any:
    """テキストを汎用の値ツリーにデコードする

    拡張子が .yaml/.yml の場合はYAML、それ以外はJSONとして扱う。

    Raises:
        ConfigParseError: デコードに失敗した場合（ネストが深すぎる場合を含む）
    """
    if suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"YAML解析エラー: {source}: {e}", source) from e
        except RecursionError as e:
            raise ConfigParseError(f"YAML解析エラー: {source}: ネストが深すぎます", source) from e
        # 空のYAML文書は空オブジェクトとして扱う
        return {} if data is None else data

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise ConfigParseError(f"JSON解析エラー: {source}: {e}", source) from e
    except RecursionError as e:
        raise ConfigParseError(f"JSON解析エラー: {source}: ネストが深すぎます", source) from e


def decode_config_bytes(data: bytes, suffix: str = ".json", source: str = "<bytes>") -> Any:
    """UTF-8のバイト列を汎用の値ツリーにデコードする

    Raises:
        ConfigParseError: UTF-8として不正、またはデコードに失敗した場合
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"設定ファイルがUTF-8ではありません: {source}: {e}", source) from e
    return decode_config_text(text, suffix, source)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """設定ファイルを読み込み、トップレベルのオブジェクトを返す

    Args:
        path: 設定ファイルのパス

    Returns:
        デコード済みのトップレベルオブジェクト

    Raises:
        ConfigIOError: ファイルを読み込めない場合
        ConfigParseError: UTF-8やJSON/YAMLとして不正な場合
        ConfigSchemaError: トップレベルがオブジェクトでない場合
    """
    config_path = Path(path)
    raw = read_config_bytes(config_path)
    data = decode_config_bytes(raw, config_path.suffix, str(config_path))

    if not isinstance(data, dict):
        raise ConfigSchemaError(
            f"トップレベルの値はオブジェクトである必要があります: {config_path} ({type(data).__name__})",
            path=str(config_path),
        )

    logger.debug(f"設定ファイル '{config_path}' を読み込みました。")
    return data
