#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Secondary Adapters

ドメインポートの具体的な実装。
"""

from .regex_timecode_parser import RegexTimecodeParser, TIMECODE_GRAMMAR, DEFAULT_PATTERN
from .smpte_frame_counter import SmpteFrameCounter
from .numpy_batch_frame_counter import NumpyBatchFrameCounter

__all__ = [
    "RegexTimecodeParser",
    "TIMECODE_GRAMMAR",
    "DEFAULT_PATTERN",
    "SmpteFrameCounter",
    "NumpyBatchFrameCounter",
]
