#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
smpte_timecode

SMPTEタイムコード（HH:MM:SS:FF / HH:MM:SS;FF）と通しフレーム番号の相互変換。
23.98 / 24 / 25 / 29.97DF / 29.97NDF / 30 の6レートに対応。
"""

__version__ = "1.0.0"

from .domain import (
    Timecode, FrameRate, RateProfile, UNKNOWN_RATE_NAME,
    TimecodeError, MalformedTimecodeError, OutOfRangeError, UnsupportedRateError,
)
from .api import (
    is_valid_timecode_text,
    parse_timecode,
    frame_rate_name,
    to_frame_count,
    format_frame_count,
    duration_in_frames,
    reset_default_service,
)

__all__ = [
    "__version__",
    # Value Objects
    "Timecode",
    "FrameRate",
    "RateProfile",
    "UNKNOWN_RATE_NAME",
    # Errors
    "TimecodeError",
    "MalformedTimecodeError",
    "OutOfRangeError",
    "UnsupportedRateError",
    # API
    "is_valid_timecode_text",
    "parse_timecode",
    "frame_rate_name",
    "to_frame_count",
    "format_frame_count",
    "duration_in_frames",
    "reset_default_service",
]
