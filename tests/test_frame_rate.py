#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FrameRate / RateProfile のテスト
"""
import sys
from fractions import Fraction
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smpte_timecode.domain import (
    FrameRate, RateProfile, UnsupportedRateError, frame_rate_name, UNKNOWN_RATE_NAME
)


class TestFrameRateEnum:
    """列挙値と正式名のテスト"""

    def test_six_rates(self):
        """6種類のレートが定義されている"""
        assert [rate.value for rate in FrameRate] == [
            "SMPTE2398", "SMPTE24", "SMPTE25",
            "SMPTE2997DROP", "SMPTE2997NONDROP", "SMPTE30",
        ]

    def test_frame_rate_name(self):
        """正式名の取得"""
        assert frame_rate_name(FrameRate.SMPTE2398) == "SMPTE2398"
        assert frame_rate_name(FrameRate.SMPTE2997DROP) == "SMPTE2997DROP"
        assert frame_rate_name(FrameRate.SMPTE30) == "SMPTE30"
        assert str(FrameRate.SMPTE25) == "SMPTE25"

    @pytest.mark.parametrize("value", [42, None, "SMPTE60", "", 29.97, object()])
    def test_frame_rate_name_unknown(self, value):
        """未対応の値は "Unknown" """
        assert frame_rate_name(value) == UNKNOWN_RATE_NAME == "Unknown"

    def test_coerce(self):
        """名前からの変換（大文字小文字・前後空白を無視）"""
        assert FrameRate.coerce(FrameRate.SMPTE24) is FrameRate.SMPTE24
        assert FrameRate.coerce("smpte25") is FrameRate.SMPTE25
        assert FrameRate.coerce(" SMPTE2997NONDROP ") is FrameRate.SMPTE2997NONDROP

    @pytest.mark.parametrize("value", [3, None, "SMPTE60", "29.97", True])
    def test_coerce_unsupported(self, value):
        """未対応レートはフォールバックせず例外"""
        with pytest.raises(UnsupportedRateError) as exc_info:
            FrameRate.coerce(value)
        assert exc_info.value.rate == value
        assert isinstance(exc_info.value, ValueError)


class TestRateProfile:
    """レート記述子のテスト"""

    @pytest.mark.parametrize("rate, frames_per_day", [
        (FrameRate.SMPTE2398, 2073600),
        (FrameRate.SMPTE24, 2073600),
        (FrameRate.SMPTE25, 2160000),
        (FrameRate.SMPTE2997DROP, 2589408),
        (FrameRate.SMPTE2997NONDROP, 2592000),
        (FrameRate.SMPTE30, 2592000),
    ])
    def test_frames_per_day(self, rate, frames_per_day):
        """1日あたりのフレーム数"""
        assert rate.frames_per_day == frames_per_day
        assert rate.profile.frames_per_hour * 24 == frames_per_day

    def test_max_frame(self):
        """FFの上限"""
        assert FrameRate.SMPTE2398.profile.max_frame == 23
        assert FrameRate.SMPTE24.profile.max_frame == 23
        assert FrameRate.SMPTE25.profile.max_frame == 24
        for rate in (FrameRate.SMPTE2997DROP, FrameRate.SMPTE2997NONDROP, FrameRate.SMPTE30):
            assert rate.profile.max_frame == 29

    def test_drop_frame_only_for_2997drop(self):
        """ドロップフレームと区切り文字"""
        for rate in FrameRate:
            expected = rate is FrameRate.SMPTE2997DROP
            assert rate.is_drop_frame == expected
            assert rate.profile.separator == (";" if expected else ":")

    def test_exact_fps(self):
        """正確なフレームレート"""
        assert FrameRate.SMPTE2398.profile.fps == Fraction(24000, 1001)
        assert FrameRate.SMPTE2997DROP.profile.fps == Fraction(30000, 1001)
        assert FrameRate.SMPTE25.profile.fps == 25

    def test_timebase_is_max_frame_plus_one(self):
        """1秒あたりのラベル数は timebase のみで表す"""
        for rate in FrameRate:
            profile = rate.profile
            assert profile.timebase == profile.max_frame + 1
            assert not hasattr(profile, "frames_per_second")
            if not profile.drop_frame:
                assert profile.frames_per_minute == profile.timebase * 60

    def test_drop_frame_unit_counts(self):
        """29.97DFの単位フレーム数"""
        profile = FrameRate.SMPTE2997DROP.profile
        assert profile.frames_per_minute == 1798
        assert profile.frames_per_ten_minutes == 17982
        assert profile.frames_per_hour == 107892

    def test_profile_is_immutable(self):
        """記述子は不変"""
        profile = FrameRate.SMPTE30.profile
        assert isinstance(profile, RateProfile)
        with pytest.raises(AttributeError):
            profile.timebase = 60
