"""
Directional consistency sweep through a ranked transect.

Included Functions:
- sweep_transect: Flag samples that are inconsistent with the samples ahead of
  them in one traversal direction

Each sample is assessed in turn against the next living samples in the
traversal direction. Samples already flagged in the same sweep are removed
from the living sequence, so later comparisons skip over them. The forward
sweep runs top-down; the reverse sweep runs bottom-up with the sense of every
age relation mirrored, which makes "older than the sample below" in the
forward sweep equivalent to "younger than the sample above" in the reverse
sweep.
"""

import numpy as np

from .age_relations import OLDER, YOUNGER, classify_age_relation, mirror_age_relation

SWEEP_DIRECTIONS = ('forward', 'reverse')


def _assess_sample(relation_to, ahead, strat_level, exclude_ends):
    """Apply the lookahead decision tree to a single sample."""
    if len(ahead) == 0:
        # Last living sample: consistency cannot be assessed
        return not exclude_ends
    
    rel_out = relation_to(ahead[0])
    
    if rel_out == OLDER and len(ahead) > 1:
        rel_out2 = relation_to(ahead[1])
        if rel_out2 == YOUNGER and len(ahead) > 2 and strat_level == 3:
            # Still younger at level 3 means an outlier
            return relation_to(ahead[2]) == YOUNGER
        return False
    
    if rel_out == YOUNGER and len(ahead) > 1:
        return relation_to(ahead[1]) == YOUNGER
    
    return False


def sweep_transect(ages, age_uncertainties, strat_level=3, exclude_ends=False, direction='forward'):
    """
    Evaluate each sample of a ranked transect in one traversal direction.
    
    Parameters
    ----------
    ages : array_like
        Mean ages in rank order (top of the transect first)
    age_uncertainties : array_like
        Total uncertainties in rank order
    strat_level : int, default=3
        How many living samples ahead may be consulted (2 or 3)
    exclude_ends : bool, default=False
        If True, a sample with no living sample ahead of it is passed;
        otherwise it is flagged
    direction : str, default='forward'
        'forward' sweeps top-down. 'reverse' sweeps bottom-up and mirrors the
        age relation sense.
    
    Returns
    -------
    numpy.ndarray
        Boolean outlier flag for each sample in traversal order, i.e. rank
        order for 'forward' and reversed rank order for 'reverse'.
    """
    if direction not in SWEEP_DIRECTIONS:
        raise ValueError(f"direction must be one of {SWEEP_DIRECTIONS}, got {direction}")
    
    ages = np.asarray(ages, dtype=float)
    age_uncertainties = np.asarray(age_uncertainties, dtype=float)
    reverse = direction == 'reverse'
    if reverse:
        ages = ages[::-1]
        age_uncertainties = age_uncertainties[::-1]
    
    n_samples = len(ages)
    outlier_log = np.zeros(n_samples, dtype=bool)
    living = np.ones(n_samples, dtype=bool)
    
    for a in range(n_samples):
        this_age = (ages[a], age_uncertainties[a])
        
        def relation_to(b):
            rel = classify_age_relation(this_age, (ages[b], age_uncertainties[b]))
            return mirror_age_relation(rel) if reverse else rel
        
        # Next living samples in the traversal, at most strat_level of them
        ahead = a + 1 + np.flatnonzero(living[a + 1:])[:strat_level]
        
        this_outlier = _assess_sample(relation_to, ahead, strat_level, exclude_ends)
        
        outlier_log[a] = this_outlier
        if this_outlier:
            living[a] = False
    
    return outlier_log
