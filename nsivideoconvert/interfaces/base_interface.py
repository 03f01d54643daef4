"""
Base interfaces for VideoConvert client components
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class ConversionNode(ABC):
    """Abstract base class for anything that talks to a VideoConvert node"""

    @abstractmethod
    def convert(self, **options: Any) -> Dict[str, Any]:
        """Submit a video for conversion"""
        pass

    @abstractmethod
    def done(self, key: str) -> Dict[str, Any]:
        """Check whether a conversion has finished"""
        pass


class ConfigProvider(ABC):
    """Abstract base class for configuration providers"""

    @abstractmethod
    def get_config(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        pass

    @abstractmethod
    def set_config(self, key: str, value: Any) -> None:
        """Set configuration value"""
        pass
