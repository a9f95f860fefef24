#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公開API

グローバルコンテナのTimecodeServiceに委譲するモジュール関数群。
"""
from typing import Union

from .domain.vo.frame_rate import FrameRate, frame_rate_name
from .domain.vo.timecode import Timecode
from .infrastructure.di_container import get_container, set_container
from .infrastructure.services.timecode_service import TimecodeService


RateLike = Union[FrameRate, str]


def _service() -> TimecodeService:
    return get_container().resolve(TimecodeService)


def reset_default_service() -> None:
    """キャッシュ済みのコンテナを破棄（次回呼び出し時に再構成）"""
    set_container(None)


def is_valid_timecode_text(text: str) -> bool:
    """文字列がタイムコード文法に一致するか（レートは問わない）"""
    return _service().is_valid_timecode_text(text)


def parse_timecode(text: str, rate: RateLike) -> Timecode:
    """
    文字列を解析し、指定レートで検証したタイムコードを返す

    Raises:
        MalformedTimecodeError, OutOfRangeError, UnsupportedRateError
    """
    return _service().parse_timecode(text, rate)


def to_frame_count(text: str, rate: RateLike) -> int:
    """
    タイムコード文字列を通しフレーム番号に変換

    Raises:
        MalformedTimecodeError, OutOfRangeError, UnsupportedRateError
    """
    return _service().to_frame_count(text, rate)


def format_frame_count(frame_count: int, rate: RateLike) -> str:
    """
    通しフレーム番号をタイムコード文字列に変換

    Raises:
        OutOfRangeError: 負のフレーム番号
        UnsupportedRateError: 未対応レート
    """
    return _service().format_frame_count(frame_count, rate)


def duration_in_frames(in_text: str, out_text: str, rate: RateLike) -> int:
    """
    IN点からOUT点までのフレーム数（日跨ぎは折り返して計算）

    Raises:
        MalformedTimecodeError, OutOfRangeError, UnsupportedRateError
    """
    return _service().duration_in_frames(in_text, out_text, rate)


__all__ = [
    "RateLike",
    "reset_default_service",
    "is_valid_timecode_text",
    "parse_timecode",
    "frame_rate_name",
    "to_frame_count",
    "format_frame_count",
    "duration_in_frames",
]
