"""
Stratigraphic ranking of transect samples.

Included Functions:
- resolve_positions: Substitute elevation for any undefined stratigraphic position
- rank_by_position: Order samples from the top of the transect to the bottom

Samples are ranked by descending position (largest value = top of the
transect). Ties keep their original relative order so the ranking is fully
deterministic.
"""

import numpy as np


def resolve_positions(position, elevation):
    """
    Get the ranking value of each sample, falling back to elevation.
    
    Parameters
    ----------
    position : array_like or None
        Stratigraphic position of each sample. NaN (or None) entries are
        undefined. If None, elevation is used for every sample.
    elevation : array_like or None
        Elevation of each sample
    
    Returns
    -------
    numpy.ndarray
        Position of each sample with undefined entries replaced by elevation
    """
    if position is None and elevation is None:
        raise ValueError("Either position or elevation must be provided")
    
    if position is None:
        resolved = np.array(elevation, dtype=float)
    else:
        resolved = np.array(position, dtype=float)
        undefined = np.isnan(resolved)
        if np.any(undefined):
            if elevation is None:
                raise ValueError("Position is undefined for some samples and no elevation was provided")
            elevation = np.array(elevation, dtype=float)
            if len(elevation) != len(resolved):
                raise ValueError(f"elevation has {len(elevation)} entries but position has {len(resolved)}")
            resolved[undefined] = elevation[undefined]
    
    if np.any(np.isnan(resolved)):
        missing = np.where(np.isnan(resolved))[0].tolist()
        raise ValueError(f"Samples at indices {missing} have neither a position nor an elevation")
    
    return resolved


def rank_by_position(position):
    """
    Rank samples by relative position (largest to smallest).
    
    Parameters
    ----------
    position : array_like
        Resolved position of each sample (see resolve_positions)
    
    Returns
    -------
    dict
        Dictionary containing:
        - 'order': indices into the input that sort it top-down
        - 'position': positions in top-down order
        - 'duplicate_positions': boolean per rank slot, True where the
          position is shared with another sample
        - 'reverse_order': indices that sort the input bottom-up
        - 'reverse_position': positions in bottom-up order
        - 'reverse_duplicate_positions': duplicate flags in bottom-up order
    
    Example
    -------
    >>> ranked = rank_by_position([3.0, 5.0, 3.0, 1.0])
    >>> ranked['order'].tolist()
    [1, 0, 2, 3]
    >>> ranked['duplicate_positions'].tolist()
    [False, True, True, False]
    """
    position = np.asarray(position, dtype=float)
    
    # Stable sort on the negated values keeps ties in input order
    order = np.argsort(-position, kind='stable')
    srt_position = position[order]
    
    # Flag every rank slot whose position occurs more than once
    uni_pos, counts = np.unique(srt_position, return_counts=True)
    dup_vals = uni_pos[counts != 1]
    duplicate_positions = np.isin(srt_position, dup_vals)
    
    return {
        'order': order,
        'position': srt_position,
        'duplicate_positions': duplicate_positions,
        'reverse_order': order[::-1].copy(),
        'reverse_position': srt_position[::-1].copy(),
        'reverse_duplicate_positions': duplicate_positions[::-1].copy()
    }
