"""Command-line argument parsing."""

import argparse


def parse_arguments() -> argparse.Namespace:
    """コマンドライン引数をパースする

    Returns:
        パース済み引数
    """
    parser = argparse.ArgumentParser(description="flatconf - JSON設定ファイルと環境変数をフラットな設定にマージして表示")

    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=[],
        help="設定ファイルのパス（複数指定可、指定順にマージ）",
    )

    parser.add_argument(
        "--env-prefix",
        type=str,
        default=None,
        help="この接頭辞で始まる環境変数をマージする（空文字ですべて、指定しない場合は読み込まない）",
    )

    parser.add_argument("--dest-prefix", type=str, default="", help="マージ先の名前空間（デフォルト: 最上位）")

    parser.add_argument("--override", action="store_true", help="後から読み込んだ値で既存のキーを上書きする")

    parser.add_argument("--get", type=str, default=None, metavar="KEY", help="指定したキーの値だけを表示する")

    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json", "yaml"],
        default="text",
        help="全設定の表示形式（デフォルト: text）",
    )

    parser.add_argument("--log-dir", type=str, default=None, help="ログファイルの出力ディレクトリ")

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    return parser.parse_args()
