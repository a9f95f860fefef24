#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
タイムコードサービス

パーサーとフレームカウンターを組み合わせ、公開APIの各操作を提供する。
"""
from ...domain.errors import OutOfRangeError
from ...domain.ports.timecode_ports import ITimecodeParser, IFrameCounter
from ...domain.vo.frame_rate import FrameRate
from ...domain.vo.timecode import Timecode


class TimecodeService:
    """
    タイムコード変換サービス

    依存するパーサーとカウンターは状態を持たないため、
    1つのインスタンスを複数スレッドから同時に利用できる。
    """

    def __init__(self, parser: ITimecodeParser, frame_counter: IFrameCounter):
        self._parser = parser
        self._frame_counter = frame_counter

    def is_valid_timecode_text(self, text: str) -> bool:
        """文字列が文法に一致するか（レートは問わない）"""
        return self._parser.matches(text)

    def parse_timecode(self, text: str, rate: FrameRate) -> Timecode:
        """
        文字列を解析し、指定レートで検証したタイムコードを返す

        Raises:
            UnsupportedRateError: 未対応レートの場合
            MalformedTimecodeError: 文法に一致しない場合
            OutOfRangeError: レートの範囲外の場合
        """
        rate = FrameRate.coerce(rate)
        timecode = self._parser.parse(text)
        if not self._frame_counter.is_valid(timecode, rate):
            raise OutOfRangeError(f"Timecode {text!r} is out of range for {rate}")
        return timecode

    def to_frame_count(self, text: str, rate: FrameRate) -> int:
        """タイムコード文字列を通しフレーム番号に変換"""
        rate = FrameRate.coerce(rate)
        return self._frame_counter.to_frame_count(self.parse_timecode(text, rate), rate)

    def to_timecode(self, frame_count: int, rate: FrameRate) -> Timecode:
        """通しフレーム番号をタイムコードに変換"""
        return self._frame_counter.to_timecode(frame_count, FrameRate.coerce(rate))

    def format_frame_count(self, frame_count: int, rate: FrameRate) -> str:
        """
        通しフレーム番号をタイムコード文字列に変換

        Raises:
            UnsupportedRateError: 未対応レートの場合（空文字列は返さない）
        """
        return self._frame_counter.format(frame_count, FrameRate.coerce(rate))

    def duration_in_frames(self, in_text: str, out_text: str, rate: FrameRate) -> int:
        """
        IN点からOUT点までのフレーム数

        OUT点がIN点より前の場合は日付を跨いだものとして、
        1日分のフレーム数で折り返して計算する。
        """
        rate = FrameRate.coerce(rate)

        # 両端の解析を先に行い、その後で範囲検証する
        endpoints = [(self._parser.parse(text), text) for text in (in_text, out_text)]
        for timecode, text in endpoints:
            if not self._frame_counter.is_valid(timecode, rate):
                raise OutOfRangeError(f"Timecode {text!r} is out of range for {rate}")

        in_value, out_value = (
            self._frame_counter.to_frame_count(timecode, rate) for timecode, _ in endpoints
        )

        if in_value <= out_value:
            return out_value - in_value

        frames_per_day = rate.frames_per_day
        return (frames_per_day + (out_value % frames_per_day)) - in_value
