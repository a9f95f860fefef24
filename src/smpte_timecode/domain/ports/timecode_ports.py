#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
タイムコード変換ポート定義

文字列解析とフレーム数変換のインターフェース。
"""
from typing import Protocol

from ..vo.frame_rate import FrameRate
from ..vo.timecode import Timecode


class ITimecodeParser(Protocol):
    """タイムコード文字列パーサーインターフェース"""

    def matches(self, text: str) -> bool:
        """文法に一致するか（レートは問わない）"""
        ...

    def parse(self, text: str) -> Timecode:
        """
        文字列をタイムコードに変換

        Raises:
            MalformedTimecodeError: 文法に一致しない場合
        """
        ...


class IFrameCounter(Protocol):
    """
    フレーム数変換インターフェース

    タイムコードと通しフレーム番号の相互変換を行う。
    """

    def is_valid(self, timecode: Timecode, rate: FrameRate) -> bool:
        """指定レートでタイムコードが範囲内か"""
        ...

    def to_frame_count(self, timecode: Timecode, rate: FrameRate) -> int:
        """
        タイムコードを通しフレーム番号に変換

        Raises:
            OutOfRangeError: レートの範囲外の場合
        """
        ...

    def to_timecode(self, frame_count: int, rate: FrameRate) -> Timecode:
        """通しフレーム番号をタイムコードに変換（1日で折り返す）"""
        ...

    def format(self, frame_count: int, rate: FrameRate) -> str:
        """通しフレーム番号をタイムコード文字列に変換"""
        ...
