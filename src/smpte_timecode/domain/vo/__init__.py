#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Value Objects (VO)

不変で検証付きの値オブジェクト。
"""

from .timecode import Timecode
from .frame_rate import FrameRate, RateProfile, frame_rate_name, UNKNOWN_RATE_NAME

__all__ = [
    "Timecode",
    "FrameRate",
    "RateProfile",
    "frame_rate_name",
    "UNKNOWN_RATE_NAME",
]
