#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DIコンテナ設定

既定設定・設定ファイル・環境変数からコンテナを構成する。
"""
from typing import Dict, Any, Optional
from pathlib import Path
import copy
import json
import os
import logging

import yaml

from .di_container import DIContainer
from .services.timecode_service import TimecodeService
from ..domain.ports.timecode_ports import ITimecodeParser, IFrameCounter
from ..domain.vo.frame_rate import FrameRate
from ..adapters.secondary.regex_timecode_parser import RegexTimecodeParser, DEFAULT_PATTERN
from ..adapters.secondary.smpte_frame_counter import SmpteFrameCounter
from ..adapters.secondary.numpy_batch_frame_counter import NumpyBatchFrameCounter

logger = logging.getLogger(__name__)

ENV_PREFIX = "SMPTE_TIMECODE_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "timecode": {
        "default_frame_rate": FrameRate.SMPTE30.value,
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}


class ContainerConfigurator:
    """
    DIコンテナ設定クラス

    設定の優先順位は 既定値 < 設定ファイル < 環境変数。
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: 設定ファイルのパス（.yaml / .yml / .json）
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """設定を読み込む"""
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_path is not None:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            self._merge_config(self.config, self._read_config_file(self.config_path))
            logger.debug(f"Loaded config from {self.config_path}")

        self._apply_env_overrides()

        # 既定レートはここで検証し、未対応ならUnsupportedRateErrorを送出
        self.config["timecode"]["default_frame_rate"] = FrameRate.coerce(
            self.config["timecode"]["default_frame_rate"]
        ).value

    @staticmethod
    def _read_config_file(path: Path) -> Dict[str, Any]:
        if path.suffix in ('.yaml', '.yml'):
            with open(path, 'r', encoding='utf-8') as f:
                try:
                    file_config = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML config {path}: {e}") from e
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path}")

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return file_config

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """設定をマージ（再帰的）"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _apply_env_overrides(self) -> None:
        """環境変数による設定の上書き"""
        # 例: SMPTE_TIMECODE_DEFAULT_RATE=SMPTE25
        rate = os.environ.get(f"{ENV_PREFIX}DEFAULT_RATE")
        if rate:
            self.config["timecode"]["default_frame_rate"] = rate

        level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            self.config["logging"]["level"] = level.upper()

    @property
    def default_frame_rate(self) -> FrameRate:
        return FrameRate.coerce(self.config["timecode"]["default_frame_rate"])

    def configure_container(self, container: DIContainer) -> None:
        """
        DIコンテナを設定

        Args:
            container: 設定するDIコンテナ
        """
        for key, value in self.config.items():
            container.set_config(key, value)

        register_services(container)

        logger.debug(
            f"Container configured (default frame rate: {self.default_frame_rate.value})"
        )


def register_services(container: DIContainer) -> None:
    """パーサー・カウンター・サービスをシングルトンとして登録"""
    # コンパイル済み文法はパーサーに注入し、全スレッドで共有する
    container.register_singleton(ITimecodeParser, lambda: RegexTimecodeParser(DEFAULT_PATTERN))
    container.register_singleton(IFrameCounter, SmpteFrameCounter)
    container.register_singleton(NumpyBatchFrameCounter, NumpyBatchFrameCounter)
    container.register_singleton(TimecodeService, TimecodeService)


def create_library_container() -> DIContainer:
    """
    公開API用のコンテナを作成

    設定ファイルや環境変数は読まない。レートは各API呼び出しで明示的に渡される。
    """
    container = DIContainer()
    register_services(container)
    return container


def create_default_container(config_path: Optional[Path] = None) -> DIContainer:
    """
    設定済みのDIコンテナを作成

    Args:
        config_path: 設定ファイルのパス

    Returns:
        設定済みのDIコンテナ
    """
    container = DIContainer()
    ContainerConfigurator(config_path).configure_container(container)
    return container
