#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
アプリケーションサービス
"""

from .timecode_service import TimecodeService

__all__ = [
    "TimecodeService",
]
