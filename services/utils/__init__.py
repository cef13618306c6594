"""Utility functions."""

from .path_utils import get_project_root, get_data_dir

__all__ = ["get_project_root", "get_data_dir"]
