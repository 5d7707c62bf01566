"""
Export of outlier-free ages and the textual outlier listing.

Included Functions:
- remove_outlier_ages: Blank outlier ages and collect (name, mean age) pairs
- format_outlier_report: Human-readable listing of the identified outliers
"""

import numpy as np

from .outlier_combiner import DISTINCT_OUTLIER, LIKELY_OUTLIER


def remove_outlier_ages(sample_names, ages, age_uncertainties, classification):
    """
    Remove likely and distinct outliers from an exposure age series.
    
    Outlier entries are replaced by NaN rather than deleted, so the exported
    series keeps the length and ordering of the input.
    
    Parameters
    ----------
    sample_names : list of str
        Sample names in rank order
    ages : array_like
        Mean ages in rank order
    age_uncertainties : array_like
        Total uncertainties in rank order
    classification : array_like
        Classification of each sample (see combine_outlier_flags)
    
    Returns
    -------
    dict
        Dictionary containing:
        - 'ages', 'age_uncertainties': copies with outliers set to NaN
        - 'outliers_likely': list of (name, mean age) for likely outliers
        - 'outliers_distinct': list of (name, mean age) for distinct outliers
    """
    ages = np.array(ages, dtype=float)
    age_uncertainties = np.array(age_uncertainties, dtype=float)
    classification = np.asarray(classification, dtype=object)
    
    out_likely_idx = np.flatnonzero(classification == LIKELY_OUTLIER)
    out_distinct_idx = np.flatnonzero(classification == DISTINCT_OUTLIER)
    
    outliers_likely = [(sample_names[i], float(ages[i])) for i in out_likely_idx]
    outliers_distinct = [(sample_names[i], float(ages[i])) for i in out_distinct_idx]
    
    removed = np.concatenate([out_likely_idx, out_distinct_idx])
    ages[removed] = np.nan
    age_uncertainties[removed] = np.nan
    
    return {
        'ages': ages,
        'age_uncertainties': age_uncertainties,
        'outliers_likely': outliers_likely,
        'outliers_distinct': outliers_distinct
    }


def format_outlier_report(outliers_distinct, outliers_likely):
    """
    Build the outlier listing, distinct outliers first.
    
    Returns
    -------
    list of str
        Report lines. Empty if there are no outliers.
    
    Example
    -------
    >>> format_outlier_report([('NEG1-07', 12.346)], [])
    ['Distinct outliers (two-direction identification):', 'sample NEG1-07 (mean of 12.35 ka)']
    """
    lines = []
    if outliers_distinct:
        lines.append('Distinct outliers (two-direction identification):')
        for name, age in outliers_distinct:
            lines.append(f'sample {name} (mean of {age:0.2f} ka)')
    if outliers_likely:
        lines.append('Likely outliers (one-direction identification):')
        for name, age in outliers_likely:
            lines.append(f'sample {name} (mean of {age:0.2f} ka)')
    return lines
