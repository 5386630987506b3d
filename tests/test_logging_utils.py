"""Test cases for logging_utils."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from flatconf.utils.logging_utils import setup_logging


def test_setup_logging_debug_mode(tmp_path: Path):
    """デバッグモードでのロギング設定"""
    output_dir = str(tmp_path / "output")

    setup_logging(debug_mode=True, output_dir=output_dir)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG

    # ファイルハンドラーが設定されていることを確認
    file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(Path(output_dir) / "system.log")


def test_setup_logging_info_mode():
    """INFOモードでのロギング設定"""
    setup_logging(debug_mode=False)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO


def test_setup_logging_console_only():
    """出力ディレクトリ未指定ではコンソール出力のみ"""
    setup_logging()

    root_logger = logging.getLogger()
    assert len(root_logger.handlers) == 1
    assert root_logger.handlers[0].stream is sys.stderr


def test_setup_logging_creates_directory(tmp_path: Path):
    """存在しないディレクトリが自動作成される"""
    output_dir = str(tmp_path / "new" / "output")

    setup_logging(debug_mode=False, output_dir=output_dir)

    assert Path(output_dir).exists()


def test_setup_logging_clears_existing_handlers(tmp_path: Path):
    """既存のハンドラーがクリアされる"""
    output_dir = str(tmp_path / "output")

    setup_logging(debug_mode=False, output_dir=output_dir)
    setup_logging(debug_mode=False, output_dir=output_dir)

    root_logger = logging.getLogger()
    assert len(root_logger.handlers) == 2  # console + file
