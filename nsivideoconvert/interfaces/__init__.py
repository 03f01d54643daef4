"""
Abstract interfaces
"""
from .base_interface import ConversionNode, ConfigProvider

__all__ = ['ConversionNode', 'ConfigProvider']
