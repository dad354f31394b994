"""
Source readers that turn host-language declarations into TypeDescriptors.
"""

from .java_reader import JavaSourceReader

__all__ = ["JavaSourceReader"]
