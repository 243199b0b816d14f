# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Union[Type, str], Callable[[], Any]] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Union[Type[TypeVarType], str], factory: Callable[[], TypeVarType]) -> None:
        """Register a factory; its result is cached on first use"""
        self.factories[interface] = factory

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            instance = self.factories[interface]()
            self.instances[interface] = instance
            return instance

        raise ValueError(f"No registration found for {interface}")
