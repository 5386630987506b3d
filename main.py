#!/usr/bin/env python
"""
flatconf - メインエントリーポイント

JSON/YAML設定ファイルと環境変数を読み込み、
ドット区切りキーのフラットな設定にマージして表示します。
"""

import logging
import sys

from flatconf.cli import parse_arguments, render_config
from flatconf.config import ConfigError, FlatConfig
from flatconf.utils import setup_logging


def main():
    """メイン処理"""
    # コマンドライン引数のパース
    args = parse_arguments()

    setup_logging(args.debug, args.log_dir)
    logger = logging.getLogger(__name__)

    try:
        config = FlatConfig()

        # 設定ファイルの読み込み（指定順にマージ）
        for path in args.config:
            logger.info(f"設定ファイルを読み込んでいます: {path}")
            config.add_file(path, args.dest_prefix, args.override)

        # 環境変数の読み込み
        if args.env_prefix is not None:
            logger.info(f"環境変数を読み込んでいます: prefix='{args.env_prefix}'")
            config.add_environment(args.env_prefix, args.dest_prefix, args.override)

        logger.debug(f"設定キー数: {len(config)}")

        if args.get is not None:
            if args.get not in config:
                logger.error(f"設定キーが見つかりません: {args.get}")
                return 2
            print(config.as_string(args.get))
            return 0

        output = render_config(config, args.format)
        if output:
            print(output)
        return 0

    except ConfigError as e:
        logger.error(f"設定エラー: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("処理が中断されました")
        return 130


if __name__ == "__main__":
    sys.exit(main())
