#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
フレームレートValue Object

6種類の放送用SMPTEフレームレートと、各レートの計算パラメータを表現する。
"""
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Union

from ..errors import UnsupportedRateError


UNKNOWN_RATE_NAME = "Unknown"


@dataclass(frozen=True)
class RateProfile:
    """
    レート記述子

    レートごとに異なるのは以下のパラメータのみで、
    検証・フレーム数変換・書式化はすべてこの記述子から導出される。
    """

    numerator: int  # 実フレームレートの分子
    denominator: int  # 実フレームレートの分母
    timebase: int  # ラベル計算に使う1秒あたりの整数フレーム数
    max_frame: int  # FFフィールドの上限（閉区間）
    drop_frame: bool
    frames_per_day: int  # 日跨ぎ計算の法
    separator: str  # FFの直前に置く区切り文字

    @property
    def fps(self) -> Fraction:
        """正確なフレームレート"""
        return Fraction(self.numerator, self.denominator)

    @property
    def frames_per_minute(self) -> int:
        """1分あたりのフレーム数（ドロップフレームでは非10分目の値）"""
        if self.drop_frame:
            return self.timebase * 60 - 2
        return self.timebase * 60

    @property
    def frames_per_ten_minutes(self) -> int:
        return self.frames_per_minute * 10 + (2 if self.drop_frame else 0)

    @property
    def frames_per_hour(self) -> int:
        return self.frames_per_ten_minutes * 6


class FrameRate(Enum):
    """放送用フレームレート"""

    SMPTE2398 = "SMPTE2398"  # 23.98fps (Film Sync)
    SMPTE24 = "SMPTE24"  # 24fps (Cinema)
    SMPTE25 = "SMPTE25"  # 25fps (PAL)
    SMPTE2997DROP = "SMPTE2997DROP"  # 29.97fps Drop Frame (NTSC)
    SMPTE2997NONDROP = "SMPTE2997NONDROP"  # 29.97fps Non Drop Frame (NTSC)
    SMPTE30 = "SMPTE30"  # 30fps

    @property
    def profile(self) -> RateProfile:
        """レート記述子"""
        return _PROFILES[self]

    @property
    def is_drop_frame(self) -> bool:
        return self.profile.drop_frame

    @property
    def frames_per_day(self) -> int:
        return self.profile.frames_per_day

    @classmethod
    def coerce(cls, value: Union["FrameRate", str]) -> "FrameRate":
        """
        FrameRateまたはその名前からFrameRateを取得

        Args:
            value: FrameRate、または "SMPTE30" のような名前（大文字小文字を区別しない）

        Returns:
            FrameRate

        Raises:
            UnsupportedRateError: 6種類のいずれにも該当しない場合
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]

        raise UnsupportedRateError(value)

    def __str__(self) -> str:
        return self.value


_PROFILES = {
    FrameRate.SMPTE2398: RateProfile(24000, 1001, 24, 23, False, 2073600, ":"),
    FrameRate.SMPTE24: RateProfile(24, 1, 24, 23, False, 2073600, ":"),
    FrameRate.SMPTE25: RateProfile(25, 1, 25, 24, False, 2160000, ":"),
    FrameRate.SMPTE2997DROP: RateProfile(30000, 1001, 30, 29, True, 2589408, ";"),
    FrameRate.SMPTE2997NONDROP: RateProfile(30000, 1001, 30, 29, False, 2592000, ":"),
    FrameRate.SMPTE30: RateProfile(30, 1, 30, 29, False, 2592000, ":"),
}


def frame_rate_name(rate: object) -> str:
    """
    フレームレートの正式名を取得

    6種類以外の値には "Unknown" を返す（例外は送出しない）。
    """
    try:
        return FrameRate.coerce(rate).value
    except UnsupportedRateError:
        return UNKNOWN_RATE_NAME
