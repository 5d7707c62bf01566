"""
Utility functions for pyTransectAge

This module contains data loading and export functions.
"""

from .data_loader import (
    load_transect_from_csv,
    validate_transect,
    resolve_mask
)

from .export import export_outlier_results_to_csv

__all__ = [
    'load_transect_from_csv',
    'validate_transect',
    'resolve_mask',
    'export_outlier_results_to_csv'
]
