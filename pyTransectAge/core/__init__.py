"""
Core analysis modules for pyTransectAge.

This package contains the core analytical functions for assessing the
stratigraphic consistency of exposure ages, including age relations, position
ranking, the directional sweeps, and outlier classification and reporting.
"""

# Age relations
from .age_relations import (
    classify_age_relation,
    mirror_age_relation,
    calculate_age_overlap_percentage
)

# Stratigraphic ranking
from .position_ranking import resolve_positions, rank_by_position

# Directional sweeps
from .outlier_sweep import sweep_transect

# Outlier classification and reporting
from .outlier_combiner import combine_outlier_flags
from .outlier_report import remove_outlier_ages, format_outlier_report

# Outlier detection
from .outlier_detection import find_outliers_transect, validate_outlier_parameters

__all__ = [
    # Age relations
    'classify_age_relation',
    'mirror_age_relation',
    'calculate_age_overlap_percentage',
    
    # Stratigraphic ranking
    'resolve_positions',
    'rank_by_position',
    
    # Directional sweeps
    'sweep_transect',
    
    # Outlier classification and reporting
    'combine_outlier_flags',
    'remove_outlier_ages',
    'format_outlier_report',
    
    # Outlier detection
    'find_outliers_transect',
    'validate_outlier_parameters'
]
