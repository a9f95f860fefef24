#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
タイムコードValue Object

SMPTEタイムコードを表現する不変オブジェクト。
"""
from dataclasses import dataclass
from typing import Tuple

from .frame_rate import FrameRate


@dataclass(frozen=True)
class Timecode:
    """
    タイムコード値オブジェクト

    時・分・秒・フレームの4つの非負整数を保持する。
    フレームレートは保持しないため、同じ値をどのレートに対しても検証・解釈できる。
    レートに対する妥当性は構築時ではなく is_valid() で判定する。
    """

    hours: int
    minutes: int
    seconds: int
    frames: int

    def __post_init__(self):
        """検証"""
        for name, value in zip(("hours", "minutes", "seconds", "frames"), self.as_tuple()):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """(時, 分, 秒, フレーム) のタプル"""
        return (self.hours, self.minutes, self.seconds, self.frames)

    def is_valid(self, rate: FrameRate) -> bool:
        """
        指定レートでの妥当性を判定

        Args:
            rate: フレームレート

        Returns:
            全フィールドがレートの範囲内ならTrue
        """
        profile = FrameRate.coerce(rate).profile
        return (
            0 <= self.hours <= 23
            and 0 <= self.minutes <= 59
            and 0 <= self.seconds <= 59
            and 0 <= self.frames <= profile.max_frame
        )

    def is_dropped_label(self, rate: FrameRate) -> bool:
        """ドロップフレームで欠番となるラベル（非10分目の00秒、フレーム00/01）か"""
        if not FrameRate.coerce(rate).is_drop_frame:
            return False
        return self.minutes % 10 != 0 and self.seconds == 0 and self.frames in (0, 1)

    def to_string(self, rate: FrameRate = FrameRate.SMPTE30) -> str:
        """タイムコード文字列に変換"""
        separator = FrameRate.coerce(rate).profile.separator
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}{separator}{self.frames:02d}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Timecode({self.hours}, {self.minutes}, {self.seconds}, {self.frames})"
