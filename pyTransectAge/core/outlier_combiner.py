"""
Combine the forward and reverse sweeps into outlier classifications.

A sample flagged in both traversal directions is a distinct outlier; a sample
flagged in only one direction is a likely outlier.
"""

import numpy as np

# Outlier classifications
NOT_OUTLIER = 'none'
LIKELY_OUTLIER = 'likely'
DISTINCT_OUTLIER = 'distinct'


def combine_outlier_flags(outlier_forward_log, outlier_reverse_log):
    """
    Identify likely and distinct outliers from the two directional sweeps.
    
    Parameters
    ----------
    outlier_forward_log : array_like of bool
        Flags from the top-down sweep, in rank order
    outlier_reverse_log : array_like of bool
        Flags from the bottom-up sweep, in reversed rank order (as returned by
        sweep_transect with direction='reverse')
    
    Returns
    -------
    numpy.ndarray
        Classification of each sample in rank order: NOT_OUTLIER,
        LIKELY_OUTLIER or DISTINCT_OUTLIER
    """
    forward = np.asarray(outlier_forward_log, dtype=bool)
    reverse = np.asarray(outlier_reverse_log, dtype=bool)[::-1]
    
    if len(forward) != len(reverse):
        raise ValueError(f"Forward and reverse flags differ in length ({len(forward)} vs {len(reverse)})")
    
    outlier_distinct_log = forward & reverse
    outlier_likely_log = (forward | reverse) & ~outlier_distinct_log
    
    classification = np.full(len(forward), NOT_OUTLIER, dtype=object)
    classification[outlier_likely_log] = LIKELY_OUTLIER
    classification[outlier_distinct_log] = DISTINCT_OUTLIER
    
    return classification
