"""
Exposes the version of geogrids
"""

__all__ = ['__version__']

__version__ = 'v0.1.0'
