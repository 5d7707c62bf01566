"""
Age relation functions for comparing exposure ages.

Included Functions:
- classify_age_relation: Tri-state comparison of two ages with uncertainties
- mirror_age_relation: Swap the sense of an age relation for reversed traversal
- calculate_age_overlap_percentage: Percentage overlap of two age intervals

Two ages are compared through their uncertainty envelopes (mean ± total
uncertainty). An age is only called older or younger than another when the
envelopes are fully separated; any overlap is treated as consistent.
"""

# Age relation outcomes
OLDER = 'older'
CONSISTENT = 'consistent'
YOUNGER = 'younger'

AGE_RELATIONS = (OLDER, CONSISTENT, YOUNGER)


def classify_age_relation(sample1_age, sample2_age):
    """
    Determine the age relationship between two samples.
    
    Parameters
    ----------
    sample1_age : tuple of float
        (mean, total uncertainty) of the first sample
    sample2_age : tuple of float
        (mean, total uncertainty) of the second sample
    
    Returns
    -------
    str
        OLDER if the lower bound of age 1 exceeds the upper bound of age 2,
        YOUNGER if the upper bound of age 1 is below the lower bound of age 2,
        CONSISTENT otherwise (the envelopes overlap or touch).
    
    Example
    -------
    >>> classify_age_relation((20.0, 1.0), (10.0, 1.0))
    'older'
    >>> classify_age_relation((10.0, 1.0), (11.5, 1.0))
    'consistent'
    """
    age1_mean, age1_unc = sample1_age
    age2_mean, age2_unc = sample2_age
    
    age1_low = age1_mean - age1_unc
    age1_upp = age1_mean + age1_unc
    
    age2_low = age2_mean - age2_unc
    age2_upp = age2_mean + age2_unc
    
    if age1_low > age2_upp:
        return OLDER
    elif age1_upp < age2_low:
        return YOUNGER
    else:
        return CONSISTENT


def mirror_age_relation(relation):
    """Swap OLDER and YOUNGER; CONSISTENT is unchanged."""
    if relation == OLDER:
        return YOUNGER
    if relation == YOUNGER:
        return OLDER
    return relation


def calculate_age_overlap_percentage(a_lower_bound, a_upper_bound, b_lower_bound, b_upper_bound):
    """
    Calculate the percentage of overlap between two age intervals.
    
    The overlap is expressed relative to the union of both intervals, so two
    identical envelopes give 100% and separated envelopes give 0%. A point age
    (zero uncertainty) inside the other envelope counts as 100%; two envelopes
    that only touch at a boundary give 0%.
    
    Parameters
    ----------
    a_lower_bound, a_upper_bound : float
        Bounds of the first age interval
    b_lower_bound, b_upper_bound : float
        Bounds of the second age interval
    
    Returns
    -------
    float
        Percentage of overlap relative to the union of both intervals.
    
    Examples
    --------
    >>> overlap_pct = calculate_age_overlap_percentage(10.0, 14.0, 12.0, 16.0)
    >>> print(f"Overlap: {overlap_pct:.1f}%")
    Overlap: 33.3%
    """
    overlap_start = max(a_lower_bound, b_lower_bound)
    overlap_end = min(a_upper_bound, b_upper_bound)
    
    if overlap_end < overlap_start:
        return 0.0
    
    if overlap_end == overlap_start:
        # A point age lying within the other envelope is fully contained
        if a_lower_bound == a_upper_bound or b_lower_bound == b_upper_bound:
            return 100.0
        # Envelopes that only touch share no length
        return 0.0
    
    overlap_length = overlap_end - overlap_start
    union_length = max(a_upper_bound, b_upper_bound) - min(a_lower_bound, b_lower_bound)
    
    return (overlap_length / union_length) * 100.0
