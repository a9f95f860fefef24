#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Infrastructure (インフラストラクチャ層)

DIコンテナ、設定管理、アプリケーションサービスを提供。
"""

from .di_container import (
    DIContainer, Lifetime, ServiceDescriptor,
    get_container, set_container
)
from .container_config import (
    ContainerConfigurator, create_default_container, create_library_container,
    register_services, DEFAULT_CONFIG
)
from .services import TimecodeService

__all__ = [
    # DI Container
    "DIContainer",
    "Lifetime",
    "ServiceDescriptor",
    "get_container",
    "set_container",
    # Configuration
    "ContainerConfigurator",
    "create_default_container",
    "create_library_container",
    "register_services",
    "DEFAULT_CONFIG",
    # Services
    "TimecodeService",
]
