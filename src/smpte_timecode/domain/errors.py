#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
タイムコード例外定義

変換処理で発生する例外の階層。
既存のValueError前提の呼び出し側と互換性を保つため、すべてValueErrorを継承する。
"""


class TimecodeError(ValueError):
    """タイムコード処理の基底例外"""


class MalformedTimecodeError(TimecodeError):
    """文法に一致しない、または数値に変換できないタイムコード文字列"""

    def __init__(self, text: str, reason: str = "does not match HH:MM:SS:FF"):
        self.text = text
        super().__init__(f"Malformed timecode {text!r}: {reason}")


class OutOfRangeError(TimecodeError):
    """フレームレートの範囲外の値"""


class UnsupportedRateError(TimecodeError):
    """サポート対象外のフレームレート"""

    def __init__(self, rate: object):
        self.rate = rate
        super().__init__(f"Unsupported frame rate: {rate!r}")
