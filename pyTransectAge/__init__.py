"""
pyTransectAge: Python package for finding stratigraphic outliers in transects of exposure ages.

This package compares the age of each sample in a vertical transect with the
ages of the samples above and below it, flagging likely and distinct outliers,
and provides tools for loading, exporting and plotting the results.
"""

__version__ = "0.1.0"

# Data loading and export
from .utils.data_loader import (
    load_transect_from_csv,
    validate_transect,
    resolve_mask
)
from .utils.export import export_outlier_results_to_csv

# Core analysis functions - Age relations
from .core.age_relations import (
    OLDER,
    CONSISTENT,
    YOUNGER,
    classify_age_relation,
    mirror_age_relation,
    calculate_age_overlap_percentage
)

# Core analysis functions - Ranking and sweeps
from .core.position_ranking import resolve_positions, rank_by_position
from .core.outlier_sweep import sweep_transect

# Core analysis functions - Outlier classification and reporting
from .core.outlier_combiner import (
    NOT_OUTLIER,
    LIKELY_OUTLIER,
    DISTINCT_OUTLIER,
    combine_outlier_flags
)
from .core.outlier_report import remove_outlier_ages, format_outlier_report
from .core.outlier_detection import (
    find_outliers_transect,
    validate_outlier_parameters
)

# Visualization functions
from .visualization.transect_plots import plot_transect_outliers

__all__ = [
    # Version
    '__version__',
    
    # Data operations
    'load_transect_from_csv',
    'validate_transect',
    'resolve_mask',
    'export_outlier_results_to_csv',
    
    # Main analysis function
    'find_outliers_transect',
    'validate_outlier_parameters',
    
    # Age relations
    'OLDER',
    'CONSISTENT',
    'YOUNGER',
    'classify_age_relation',
    'mirror_age_relation',
    'calculate_age_overlap_percentage',
    
    # Ranking and sweeps
    'resolve_positions',
    'rank_by_position',
    'sweep_transect',
    
    # Outlier classification and reporting
    'NOT_OUTLIER',
    'LIKELY_OUTLIER',
    'DISTINCT_OUTLIER',
    'combine_outlier_flags',
    'remove_outlier_ages',
    'format_outlier_report',
    
    # Visualization
    'plot_transect_outliers'
]
