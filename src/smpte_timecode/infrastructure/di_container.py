#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
依存性注入コンテナ

パーサー・フレームカウンター・サービスの生成と共有を管理する。
"""
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union
from enum import Enum
import inspect
from threading import RLock


T = TypeVar('T')


class Lifetime(Enum):
    """オブジェクトのライフタイム"""
    SINGLETON = "singleton"  # コンテナ内で1つのインスタンスを共有
    TRANSIENT = "transient"  # 解決のたびに生成


class ServiceDescriptor:
    """登録内容（型・生成関数・ライフタイム）"""

    def __init__(self, service_type: type, factory: Callable[[], Any], lifetime: Lifetime):
        self.service_type = service_type
        self.factory = factory
        self.lifetime = lifetime


class DIContainer:
    """
    依存性注入コンテナ

    クラスを登録した場合はコンストラクタの型ヒントから依存性を解決する。
    シングルトンの生成はロックで保護され、同時に解決しても1回だけ生成される。
    """

    def __init__(self):
        self._services: Dict[type, ServiceDescriptor] = {}
        self._singletons: Dict[type, Any] = {}
        self._config: Dict[str, Any] = {}
        # シングルトン生成中に依存先のシングルトンを解決するため再入可能ロック
        self._lock = RLock()

    def register(
        self,
        interface: Type[T],
        factory: Union[Callable[[], T], Type[T]],
        lifetime: Lifetime = Lifetime.TRANSIENT
    ) -> None:
        """
        サービスを登録

        Args:
            interface: 解決に使うキーとなる型
            factory: 生成関数、またはコンストラクタ注入するクラス
            lifetime: ライフタイム
        """
        if inspect.isclass(factory):
            cls = factory
            factory = lambda: self._create_instance(cls)

        with self._lock:
            self._services[interface] = ServiceDescriptor(interface, factory, lifetime)
            self._singletons.pop(interface, None)

    def register_singleton(self, interface: Type[T], factory: Union[Callable[[], T], Type[T]]) -> None:
        self.register(interface, factory, Lifetime.SINGLETON)

    def register_transient(self, interface: Type[T], factory: Union[Callable[[], T], Type[T]]) -> None:
        self.register(interface, factory, Lifetime.TRANSIENT)

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """生成済みのインスタンスをシングルトンとして登録"""
        with self._lock:
            self._services[interface] = ServiceDescriptor(
                interface, lambda: instance, Lifetime.SINGLETON
            )
            self._singletons[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        """
        サービスを解決

        Raises:
            ValueError: 未登録の場合
        """
        descriptor = self._services.get(interface)
        if descriptor is None:
            raise ValueError(f"Service not registered: {getattr(interface, '__name__', interface)}")

        if descriptor.lifetime is Lifetime.TRANSIENT:
            return descriptor.factory()

        with self._lock:
            if interface not in self._singletons:
                self._singletons[interface] = descriptor.factory()
            return self._singletons[interface]

    def _create_instance(self, cls: Type[T]) -> T:
        """コンストラクタ引数の型ヒントに登録済みサービスを注入して生成"""
        kwargs = {}
        for name, param in inspect.signature(cls.__init__).parameters.items():
            if name == 'self' or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue

            if param.annotation in self._services:
                kwargs[name] = self.resolve(param.annotation)
            elif param.default is not param.empty:
                kwargs[name] = param.default
            else:
                raise ValueError(
                    f"Cannot resolve dependency '{name}' of type {param.annotation} "
                    f"for {cls.__name__}"
                )

        return cls(**kwargs)

    def set_config(self, key: str, value: Any) -> None:
        self._config[key] = value

    def get_config(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def has_service(self, interface: type) -> bool:
        return interface in self._services

    def clear(self) -> None:
        """登録内容と設定をすべて破棄"""
        with self._lock:
            self._services.clear()
            self._singletons.clear()
            self._config.clear()


# プロセス全体で共有するコンテナ（初回利用時に構成、設定・環境変数は読まない）
_global_container: Optional[DIContainer] = None
_container_lock = RLock()


def get_container() -> DIContainer:
    """グローバルコンテナを取得"""
    global _global_container

    with _container_lock:
        if _global_container is None:
            from .container_config import create_library_container
            _global_container = create_library_container()
        return _global_container


def set_container(container: Optional[DIContainer]) -> None:
    """グローバルコンテナを差し替え（Noneで次回利用時に再構成）"""
    global _global_container

    with _container_lock:
        _global_container = container
