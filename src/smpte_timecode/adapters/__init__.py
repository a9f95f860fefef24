#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Adapters (アダプター層)

ポートの具象実装を提供する。
"""

# Secondary Adapters
from .secondary import (
    RegexTimecodeParser,
    SmpteFrameCounter,
    NumpyBatchFrameCounter,
)

__all__ = [
    # Secondary Adapters
    "RegexTimecodeParser",
    "SmpteFrameCounter",
    "NumpyBatchFrameCounter",
]
