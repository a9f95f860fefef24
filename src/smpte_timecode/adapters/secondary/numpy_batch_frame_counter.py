#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NumPyバッチフレームカウンター

タイムライン全体など、多数のタイムコードを配列でまとめて変換する。
計算規則は SmpteFrameCounter と同一。
"""
from typing import List

import numpy as np

from ...domain.errors import OutOfRangeError
from ...domain.vo.frame_rate import FrameRate
from .smpte_frame_counter import DROPPED_LABELS_PER_MINUTE


class NumpyBatchFrameCounter:
    """
    配列版フレームカウンター

    components は shape (n, 4) の整数配列（列: 時, 分, 秒, フレーム）。
    """

    @staticmethod
    def _as_components(components) -> np.ndarray:
        array = np.asarray(components, dtype=np.int64)
        if array.size == 0:
            return np.empty((0, 4), dtype=np.int64)
        if array.ndim == 1 and array.shape[0] == 4:
            array = array.reshape(1, 4)
        if array.ndim != 2 or array.shape[1] != 4:
            raise ValueError(f"Components must have shape (n, 4), got {array.shape}")
        return array

    def validity_mask(self, components, rate: FrameRate) -> np.ndarray:
        """
        各行が指定レートの範囲内かを判定

        Returns:
            shape (n,) のbool配列
        """
        profile = FrameRate.coerce(rate).profile
        array = self._as_components(components)
        hours, minutes, seconds, frames = array.T
        return (
            (hours >= 0) & (hours <= 23)
            & (minutes >= 0) & (minutes <= 59)
            & (seconds >= 0) & (seconds <= 59)
            & (frames >= 0) & (frames <= profile.max_frame)
        )

    def to_frame_counts(self, components, rate: FrameRate) -> np.ndarray:
        """
        タイムコード配列を通しフレーム番号配列に変換

        Raises:
            OutOfRangeError: 範囲外の行が1つでもある場合
        """
        rate = FrameRate.coerce(rate)
        profile = rate.profile
        array = self._as_components(components)

        valid = self.validity_mask(array, rate)
        if not valid.all():
            first = int(np.flatnonzero(~valid)[0])
            raise OutOfRangeError(
                f"Row {first} {tuple(int(v) for v in array[first])} is out of range for {rate}"
            )

        hours, minutes, seconds, frames = array.T
        tb = profile.timebase

        if not profile.drop_frame:
            return frames + tb * seconds + tb * 60 * minutes + tb * 3600 * hours

        dropped = (minutes % 10 != 0) & (seconds == 0) & (frames < DROPPED_LABELS_PER_MINUTE)
        frames = np.where(dropped, DROPPED_LABELS_PER_MINUTE, frames)
        return (
            frames
            + tb * seconds
            + profile.frames_per_minute * minutes
            + DROPPED_LABELS_PER_MINUTE * (minutes // 10)
            + profile.frames_per_hour * hours
        )

    def to_components(self, frame_counts, rate: FrameRate) -> np.ndarray:
        """
        通しフレーム番号配列を shape (n, 4) のタイムコード配列に変換

        Raises:
            TypeError: 整数以外（浮動小数点数など）を含む場合
            OutOfRangeError: 負のフレーム番号を含む場合
        """
        profile = FrameRate.coerce(rate).profile
        raw = np.asarray(frame_counts)
        # 空配列は既定で float64 になるため、要素がある場合のみ型を検査する
        if raw.size and raw.dtype.kind not in ("i", "u"):
            raise TypeError(f"Frame counts must be integers, got dtype {raw.dtype}")
        counts = raw.astype(np.int64).reshape(-1)
        if (counts < 0).any():
            raise OutOfRangeError("Frame counts must be non-negative")

        counts = counts % profile.frames_per_day
        tb = profile.timebase

        if profile.drop_frame:
            hours, remainder = np.divmod(counts, profile.frames_per_hour)
            blocks, offset = np.divmod(remainder, profile.frames_per_ten_minutes)
            labels = remainder + DROPPED_LABELS_PER_MINUTE * 9 * blocks
            extra = (offset - DROPPED_LABELS_PER_MINUTE) // profile.frames_per_minute
            labels = labels + np.where(
                offset >= DROPPED_LABELS_PER_MINUTE, DROPPED_LABELS_PER_MINUTE * extra, 0
            )
            counts = hours * tb * 3600 + labels

        hours, remainder = np.divmod(counts, tb * 3600)
        minutes, remainder = np.divmod(remainder, tb * 60)
        seconds, frames = np.divmod(remainder, tb)
        return np.stack([hours, minutes, seconds, frames], axis=1)

    def format_frame_counts(self, frame_counts, rate: FrameRate) -> List[str]:
        """通しフレーム番号配列をタイムコード文字列のリストに変換"""
        rate = FrameRate.coerce(rate)
        separator = rate.profile.separator
        return [
            f"{h:02d}:{m:02d}:{s:02d}{separator}{f:02d}"
            for h, m, s, f in self.to_components(frame_counts, rate).tolist()
        ]
