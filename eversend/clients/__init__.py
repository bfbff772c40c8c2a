"""
Client module wrapping the HTTP transport.
"""

from .eversend_client import Eversend, EversendBuilder

__all__ = [
    'Eversend',
    'EversendBuilder',
]
