#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
smpte-timecode - コマンドラインエントリポイント

タイムコードとフレーム番号の変換をコマンドラインから実行する。
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .domain.errors import TimecodeError
from .domain.vo.frame_rate import FrameRate
from .infrastructure.container_config import ContainerConfigurator
from .infrastructure.di_container import DIContainer, set_container
from .infrastructure.services.timecode_service import TimecodeService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """ロギングの設定

    変換結果は標準出力に出すため、ログは標準エラーに出力する。

    Args:
        log_level: ログレベル（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        log_file: ログファイルパス（Noneの場合はコンソールのみ）
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """コマンドライン引数のパース

    Returns:
        パース済みの引数
    """
    parser = argparse.ArgumentParser(
        prog="smpte-timecode",
        description="SMPTEタイムコードと通しフレーム番号の変換ツール",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--rate",
        type=str.upper,
        choices=[rate.value for rate in FrameRate],
        help="フレームレート（デフォルト: 設定ファイルの値、未指定ならSMPTE30）"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="設定ファイル（.yaml / .yml / .json）"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル（デフォルト: 設定ファイルの値、未指定ならINFO）"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="ログファイルパス"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_frames = subparsers.add_parser("to-frames", help="タイムコードをフレーム番号に変換")
    to_frames.add_argument("timecode", help="例: 01:00:00:00, 00:01:00;02")

    to_timecode = subparsers.add_parser("to-timecode", help="フレーム番号をタイムコードに変換")
    to_timecode.add_argument("frame_count", type=int)

    duration = subparsers.add_parser("duration", help="IN点からOUT点までのフレーム数")
    duration.add_argument("in_point")
    duration.add_argument("out_point")

    validate = subparsers.add_parser("validate", help="タイムコードの妥当性を検証")
    validate.add_argument("timecode")

    subparsers.add_parser("rates", help="対応フレームレートの一覧")

    return parser.parse_args(argv)


def print_rates() -> None:
    """対応レートの一覧を表示"""
    for rate in FrameRate:
        profile = rate.profile
        kind = "DF" if profile.drop_frame else "NDF"
        print(
            f"{rate.value:<17} {float(profile.fps):>7.3f}fps {kind:<3} "
            f"frames/day={profile.frames_per_day}"
        )


def run_command(args: argparse.Namespace, service: TimecodeService, rate: FrameRate) -> int:
    """サブコマンドを実行

    Returns:
        終了コード
    """
    if args.command == "to-frames":
        print(service.to_frame_count(args.timecode, rate))
    elif args.command == "to-timecode":
        print(service.format_frame_count(args.frame_count, rate))
    elif args.command == "duration":
        print(service.duration_in_frames(args.in_point, args.out_point, rate))
    elif args.command == "validate":
        if not service.is_valid_timecode_text(args.timecode):
            print(f"invalid: {args.timecode!r} is not a timecode")
            return 1
        timecode = service.parse_timecode(args.timecode, rate)
        print(f"valid: {timecode.to_string(rate)} ({rate.value})")
    elif args.command == "rates":
        print_rates()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """メイン関数

    Returns:
        終了コード（0: 正常終了、1: エラー）
    """
    args = parse_arguments(argv)

    try:
        configurator = ContainerConfigurator(args.config)
    except (OSError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    log_config = configurator.config["logging"]
    setup_logging(args.log_level or log_config["level"], args.log_file or log_config["file"])

    container = DIContainer()
    configurator.configure_container(container)
    set_container(container)

    rate = FrameRate.coerce(args.rate) if args.rate else configurator.default_frame_rate
    logger.debug(f"Running '{args.command}' at {rate.value}")

    try:
        return run_command(args, container.resolve(TimecodeService), rate)
    except TimecodeError as e:
        logger.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
