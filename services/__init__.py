# services/__init__.py
"""Services package for the FBA profit calculator"""

from . import config_manager

__all__ = ['config_manager']
