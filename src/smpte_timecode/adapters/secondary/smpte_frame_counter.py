#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SMPTEフレームカウンター

IFrameCounterの実装。
6種類のレートを RateProfile のパラメータだけで扱い、
タイムコードと通しフレーム番号を相互変換する。
"""
import numbers

from ...domain.errors import OutOfRangeError
from ...domain.vo.frame_rate import FrameRate, RateProfile
from ...domain.vo.timecode import Timecode


# ドロップフレームで1分あたり欠番となるラベル数
DROPPED_LABELS_PER_MINUTE = 2


class SmpteFrameCounter:
    """
    SMPTEタイムコード ⇔ フレーム数変換

    ノンドロップは単純な位取り計算、29.97DFは毎分（10分目を除く）
    先頭2ラベルの欠番を考慮して計算する。
    """

    def is_valid(self, timecode: Timecode, rate: FrameRate) -> bool:
        """指定レートでタイムコードが範囲内か"""
        return timecode.is_valid(rate)

    def to_frame_count(self, timecode: Timecode, rate: FrameRate) -> int:
        """
        タイムコードを通しフレーム番号に変換

        Args:
            timecode: タイムコード
            rate: フレームレート

        Returns:
            00:00:00:00 を0とするフレーム番号

        Raises:
            OutOfRangeError: タイムコードがレートの範囲外の場合
            UnsupportedRateError: 未対応レートの場合
        """
        rate = FrameRate.coerce(rate)
        if not timecode.is_valid(rate):
            raise OutOfRangeError(f"Timecode {timecode.as_tuple()} is out of range for {rate}")

        profile = rate.profile
        if profile.drop_frame:
            return self._drop_frame_count(timecode, profile)

        tb = profile.timebase
        return (
            timecode.frames
            + tb * timecode.seconds
            + tb * 60 * timecode.minutes
            + tb * 3600 * timecode.hours
        )

    def _drop_frame_count(self, timecode: Timecode, profile: RateProfile) -> int:
        hours, minutes, seconds, frames = timecode.as_tuple()

        # 欠番ラベル（非10分目の00秒00/01）は同じ分の02として扱う
        if minutes % 10 != 0 and seconds == 0 and frames in (0, 1):
            frames = DROPPED_LABELS_PER_MINUTE

        return (
            frames
            + profile.timebase * seconds
            + profile.frames_per_minute * minutes
            + DROPPED_LABELS_PER_MINUTE * (minutes // 10)
            + profile.frames_per_hour * hours
        )

    def to_timecode(self, frame_count: int, rate: FrameRate) -> Timecode:
        """
        通しフレーム番号をタイムコードに変換

        1日分のフレーム数を超える値は1日の範囲に折り返す。

        Raises:
            OutOfRangeError: フレーム番号が負の場合
            UnsupportedRateError: 未対応レートの場合
        """
        rate = FrameRate.coerce(rate)
        if isinstance(frame_count, bool) or not isinstance(frame_count, numbers.Integral):
            raise TypeError(f"Frame count must be an int, got {frame_count!r}")
        if frame_count < 0:
            raise OutOfRangeError(f"Frame count must be non-negative, got {frame_count}")

        profile = rate.profile
        frame_count = int(frame_count) % profile.frames_per_day

        if profile.drop_frame:
            frame_count = self._insert_dropped_labels(frame_count, profile)

        tb = profile.timebase
        hours, remainder = divmod(frame_count, tb * 3600)
        minutes, remainder = divmod(remainder, tb * 60)
        seconds, frames = divmod(remainder, tb)
        return Timecode(hours, minutes, seconds, frames)

    def _insert_dropped_labels(self, frame_count: int, profile: RateProfile) -> int:
        """
        実フレーム番号をラベル番号（欠番を含む30fps換算の番号）に変換

        10分ブロックの先頭分は欠番なし、残り9分はそれぞれ先頭2ラベルが欠番。
        """
        hours, remainder = divmod(frame_count, profile.frames_per_hour)
        blocks, offset = divmod(remainder, profile.frames_per_ten_minutes)

        labels = remainder + DROPPED_LABELS_PER_MINUTE * 9 * blocks
        if offset >= DROPPED_LABELS_PER_MINUTE:
            labels += DROPPED_LABELS_PER_MINUTE * (
                (offset - DROPPED_LABELS_PER_MINUTE) // profile.frames_per_minute
            )

        return hours * profile.timebase * 3600 + labels

    def format(self, frame_count: int, rate: FrameRate) -> str:
        """通しフレーム番号を HH:MM:SS<sep>FF 形式に変換"""
        rate = FrameRate.coerce(rate)
        return self.to_timecode(frame_count, rate).to_string(rate)
