#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ドメイン層

タイムコードの値オブジェクト、例外、ポートを定義する層。
外部ライブラリへの依存を持たない。
"""

# Value Objects
from .vo import Timecode, FrameRate, RateProfile, frame_rate_name, UNKNOWN_RATE_NAME

# Errors
from .errors import (
    TimecodeError, MalformedTimecodeError, OutOfRangeError, UnsupportedRateError
)

# Ports
from .ports import ITimecodeParser, IFrameCounter

__all__ = [
    # Value Objects
    "Timecode",
    "FrameRate",
    "RateProfile",
    "frame_rate_name",
    "UNKNOWN_RATE_NAME",
    # Errors
    "TimecodeError",
    "MalformedTimecodeError",
    "OutOfRangeError",
    "UnsupportedRateError",
    # Ports
    "ITimecodeParser",
    "IFrameCounter",
]
