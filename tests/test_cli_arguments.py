"""Test cases for CLI arguments."""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from flatconf.cli.arguments import parse_arguments


def test_parse_arguments_default():
    """デフォルト引数のパース"""
    test_args = ["script_name"]

    with patch.object(sys, "argv", test_args):
        args = parse_arguments()

        assert args.config == []
        assert args.env_prefix is None
        assert args.dest_prefix == ""
        assert args.override is False
        assert args.get is None
        assert args.format == "text"
        assert args.log_dir is None
        assert args.debug is False


def test_parse_arguments_multiple_configs():
    """設定ファイルは複数指定でき、指定順が保たれる"""
    test_args = ["script_name", "--config", "base.json", "--config", "local.json"]

    with patch.object(sys, "argv", test_args):
        args = parse_arguments()

        assert args.config == ["base.json", "local.json"]


def test_parse_arguments_empty_env_prefix():
    """空の環境変数接頭辞は None と区別される"""
    test_args = ["script_name", "--env-prefix", ""]

    with patch.object(sys, "argv", test_args):
        args = parse_arguments()

        assert args.env_prefix == ""


def test_parse_arguments_merge_options():
    """マージ関連オプションの指定"""
    test_args = ["script_name", "--dest-prefix", "svc", "--override", "--get", "svc.port", "--debug"]

    with patch.object(sys, "argv", test_args):
        args = parse_arguments()

        assert args.dest_prefix == "svc"
        assert args.override is True
        assert args.get == "svc.port"
        assert args.debug is True


def test_parse_arguments_invalid_format():
    """未対応の表示形式はエラーで終了する"""
    test_args = ["script_name", "--format", "toml"]

    with patch.object(sys, "argv", test_args):
        with pytest.raises(SystemExit):
            parse_arguments()
