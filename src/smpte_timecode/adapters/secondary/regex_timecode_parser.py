#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
正規表現タイムコードパーサー

ITimecodeParserの実装。固定文法 HH:MM:SS(:|;|.)FF で文字列を解析する。
"""
import re
from typing import Optional

from ...domain.errors import MalformedTimecodeError
from ...domain.vo.timecode import Timecode


# 各フィールドは1〜2桁。FFの直前の区切りは : ; . のいずれも全レートで許可
TIMECODE_GRAMMAR = r"^(\d{1,2}):(\d{1,2}):(\d{1,2})(:|;|\.)(\d{1,2})$"

# モジュール読み込み時に一度だけコンパイルし、以後は読み取り専用で共有
DEFAULT_PATTERN: re.Pattern = re.compile(TIMECODE_GRAMMAR, re.ASCII)


class RegexTimecodeParser:
    """
    正規表現パーサー

    コンパイル済みパターンを受け取り、状態を持たないためスレッド間で共有できる。
    """

    def __init__(self, pattern: Optional[re.Pattern] = None):
        """
        Args:
            pattern: コンパイル済みパターン（Noneの場合は既定の文法）
        """
        self._pattern = pattern if pattern is not None else DEFAULT_PATTERN

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    def matches(self, text: str) -> bool:
        """文法に一致するか"""
        if not isinstance(text, str):
            return False
        return self._pattern.fullmatch(text) is not None

    def parse(self, text: str) -> Timecode:
        """
        文字列をタイムコードに変換

        Args:
            text: タイムコード文字列（例: "01:23:45:12", "01:23:45;12"）

        Returns:
            Timecode（レートに対する検証は行わない）

        Raises:
            MalformedTimecodeError: 文法に一致しない場合
        """
        if not isinstance(text, str):
            raise MalformedTimecodeError(repr(text), "not a string")

        match = self._pattern.fullmatch(text)
        if match is None:
            raise MalformedTimecodeError(text)

        hours, minutes, seconds, _separator, frames = match.groups()
        try:
            return Timecode(int(hours), int(minutes), int(seconds), int(frames))
        except ValueError as e:
            raise MalformedTimecodeError(text, str(e)) from e
