#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ports (ポート定義)

ドメインが外部実装に要求するインターフェース。
"""

from .timecode_ports import ITimecodeParser, IFrameCounter

__all__ = [
    "ITimecodeParser",
    "IFrameCounter",
]
