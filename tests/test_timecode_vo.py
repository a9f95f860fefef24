#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Timecode値オブジェクトのテスト
"""
import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smpte_timecode.domain import FrameRate, Timecode, UnsupportedRateError


THIRTY_FAMILY = (FrameRate.SMPTE2997DROP, FrameRate.SMPTE2997NONDROP, FrameRate.SMPTE30)


class TestTimecodeCreation:
    """生成と不変性のテスト"""

    def test_fields(self):
        """フィールドの保持"""
        tc = Timecode(1, 2, 3, 4)
        assert (tc.hours, tc.minutes, tc.seconds, tc.frames) == (1, 2, 3, 4)
        assert tc.as_tuple() == (1, 2, 3, 4)

    def test_no_rate_validation_at_construction(self):
        """構築時にはレートの範囲を検証しない"""
        tc = Timecode(25, 99, 99, 99)
        assert tc.as_tuple() == (25, 99, 99, 99)

    def test_negative_rejected(self):
        """負の値は拒否"""
        with pytest.raises(ValueError, match="frames must be non-negative"):
            Timecode(0, 0, 0, -1)

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_non_int_rejected(self, value):
        """整数以外は拒否"""
        with pytest.raises(ValueError, match="must be an int"):
            Timecode(value, 0, 0, 0)

    def test_frozen(self):
        """不変オブジェクト"""
        tc = Timecode(0, 0, 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tc.frames = 1

    def test_equality_and_hash(self):
        """値による等価性"""
        assert Timecode(1, 2, 3, 4) == Timecode(1, 2, 3, 4)
        assert len({Timecode(1, 2, 3, 4), Timecode(1, 2, 3, 4)}) == 1


class TestTimecodeValidity:
    """レート別の妥当性判定"""

    def test_hours_over_23_invalid_for_every_rate(self):
        """25時は全レートで無効"""
        tc = Timecode(25, 0, 0, 0)
        assert not any(tc.is_valid(rate) for rate in FrameRate)

    def test_frame_24_boundary(self):
        """FF=24 は25fpsでのみ有効"""
        tc = Timecode(0, 0, 0, 24)
        assert tc.is_valid(FrameRate.SMPTE25)
        assert not tc.is_valid(FrameRate.SMPTE24)
        assert not tc.is_valid(FrameRate.SMPTE2398)

    def test_frame_23_valid_for_24(self):
        """FF=23 は24fps系の上限"""
        assert Timecode(0, 0, 0, 23).is_valid(FrameRate.SMPTE24)
        assert Timecode(0, 0, 0, 23).is_valid(FrameRate.SMPTE2398)

    @pytest.mark.parametrize("rate", THIRTY_FAMILY)
    def test_frame_29_and_30(self, rate):
        """30fps系はFF=29まで有効、30は無効"""
        assert Timecode(23, 59, 59, 29).is_valid(rate)
        assert not Timecode(0, 0, 0, 30).is_valid(rate)

    @pytest.mark.parametrize("tc", [Timecode(24, 0, 0, 0), Timecode(0, 60, 0, 0), Timecode(0, 0, 60, 0)])
    def test_hms_limits(self, tc):
        """時・分・秒の上限"""
        for rate in FrameRate:
            assert not tc.is_valid(rate)

    def test_rate_by_name(self):
        """レート名での判定"""
        assert Timecode(0, 0, 0, 24).is_valid("SMPTE25")

    def test_unsupported_rate(self):
        """未対応レートは例外"""
        with pytest.raises(UnsupportedRateError):
            Timecode(0, 0, 0, 0).is_valid("SMPTE60")

    def test_dropped_label(self):
        """欠番ラベルの判定"""
        drop = FrameRate.SMPTE2997DROP
        assert Timecode(0, 1, 0, 0).is_dropped_label(drop)
        assert Timecode(0, 1, 0, 1).is_dropped_label(drop)
        assert not Timecode(0, 1, 0, 2).is_dropped_label(drop)
        assert not Timecode(0, 10, 0, 0).is_dropped_label(drop)
        assert not Timecode(0, 1, 1, 0).is_dropped_label(drop)
        assert not Timecode(0, 1, 0, 0).is_dropped_label(FrameRate.SMPTE2997NONDROP)


class TestTimecodeFormatting:
    """文字列表現"""

    def test_to_string(self):
        """2桁ゼロ埋め"""
        assert Timecode(1, 2, 3, 4).to_string(FrameRate.SMPTE25) == "01:02:03:04"
        assert str(Timecode(1, 2, 3, 4)) == "01:02:03:04"

    def test_drop_frame_separator(self):
        """29.97DFはFFの前にセミコロン"""
        assert Timecode(0, 1, 0, 2).to_string(FrameRate.SMPTE2997DROP) == "00:01:00;02"
        assert Timecode(0, 1, 0, 2).to_string(FrameRate.SMPTE2997NONDROP) == "00:01:00:02"

    def test_repr(self):
        assert repr(Timecode(1, 2, 3, 4)) == "Timecode(1, 2, 3, 4)"
