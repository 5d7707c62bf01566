"""
Visualization functions for pyTransectAge

This module contains plotting functions for transects of exposure ages and
their identified outliers.
"""

from .transect_plots import plot_transect_outliers

__all__ = [
    'plot_transect_outliers'
]
