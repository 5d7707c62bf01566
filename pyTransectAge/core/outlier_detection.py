"""
Stratigraphic outlier detection for transects of exposure ages.

Included Functions:
- validate_outlier_parameters: Check strat_level and exclude_ends
- find_outliers_transect: Find outliers within a transect of exposure ages

The age of each sample (mean and total uncertainty) is compared to that of the
samples stratigraphically above/below it. Each sample is assessed in turn,
running from top-to-bottom and then bottom-to-top within the transect. A
sample is considered a 'likely outlier' if it was relatively too old/young in
one direction, and a 'distinct outlier' if relatively too old/young in both
directions.

Currently set up for Be-10 exposure ages only.
"""

import numpy as np

from .age_relations import calculate_age_overlap_percentage
from .position_ranking import resolve_positions, rank_by_position
from .outlier_sweep import sweep_transect
from .outlier_combiner import combine_outlier_flags
from .outlier_report import remove_outlier_ages, format_outlier_report
from ..utils.data_loader import resolve_mask, validate_transect

VALID_STRAT_LEVELS = (2, 3)
DEFAULT_STRAT_LEVEL = 3
DEFAULT_EXCLUDE_ENDS = False

STATUS_OK = 'ok'
STATUS_NOT_MEASURED = 'not_measured'


def validate_outlier_parameters(strat_level, exclude_ends):
    """
    Check the sweep parameters before any sample is processed.
    
    Returns
    -------
    tuple
        (strat_level as int, exclude_ends as bool)
    """
    if isinstance(strat_level, (bool, np.bool_)) or not isinstance(strat_level, (int, np.integer)):
        raise ValueError(f"strat_level should be 2 or 3, got {strat_level!r}")
    if strat_level not in VALID_STRAT_LEVELS:
        raise ValueError(f"strat_level should be 2 or 3, got {strat_level!r}")
    
    if isinstance(exclude_ends, (bool, np.bool_)):
        exclude_ends = bool(exclude_ends)
    elif isinstance(exclude_ends, (int, np.integer)) and exclude_ends in (0, 1):
        exclude_ends = bool(exclude_ends)
    else:
        raise ValueError(f"exclude_ends should be binary [False/True or 0/1], got {exclude_ends!r}")
    
    return int(strat_level), exclude_ends


def _empty_result(status, strat_level, exclude_ends):
    return {
        'status': status,
        'sample_names': [],
        'position': np.array([], dtype=float),
        'input_index': np.array([], dtype=int),
        'ages': np.array([], dtype=float),
        'age_uncertainties': np.array([], dtype=float),
        'ages_input_order': np.array([], dtype=float),
        'age_uncertainties_input_order': np.array([], dtype=float),
        'duplicate_positions': np.array([], dtype=bool),
        'neighbor_overlap_pct': np.array([], dtype=float),
        'outlier_forward': np.array([], dtype=bool),
        'outlier_reverse': np.array([], dtype=bool),
        'classification': np.array([], dtype=object),
        'outliers_likely': [],
        'outliers_distinct': [],
        'report': [],
        'strat_level': strat_level,
        'exclude_ends': exclude_ends
    }


def find_outliers_transect(transect, mask=None, strat_level=DEFAULT_STRAT_LEVEL,
                           exclude_ends=DEFAULT_EXCLUDE_ENDS, *, mute_mode=False):
    """
    Find outliers within a transect of exposure ages based on stratigraphy.
    
    Parameters
    ----------
    transect : dict
        Transect record with keys 'sample_names', 'ages' (mean, ka),
        'age_uncertainties' (total, ka), 'position' and/or 'elevation', and
        optionally 'measured' (whether Be-10 was measured for the dataset,
        default True). See load_transect_from_csv.
    mask : array_like, optional
        Samples to include, as 0-based indices or a boolean array over the
        input samples. If None, all samples are included. Excluded samples
        never take part in any comparison.
    strat_level : int, default=3
        How many samples above and below each sample to consider (2 or 3)
    exclude_ends : bool, default=False
        Whether samples with no further sample to compare against (e.g. the
        top and bottom samples) are passed (True) or flagged (False)
    mute_mode : bool, default=False
        If True, suppress all printed output
    
    Returns
    -------
    dict
        Dictionary containing the exposure ages with outliers removed (NaN) in
        rank order and in input order, the per-direction flags, the
        classification of each sample, the likely and distinct outliers as
        (name, mean age) pairs, and the report lines. 'status' is
        'not_measured' (with every entry empty) when Be-10 was not measured.
    
    Example
    -------
    >>> transect = {
    ...     'sample_names': ['A', 'B', 'C', 'D', 'E'],
    ...     'ages': [10.0, 10.0, 1.0, 10.0, 10.0],
    ...     'age_uncertainties': [1.0, 1.0, 1.0, 1.0, 1.0],
    ...     'position': [5, 4, 3, 2, 1]
    ... }
    >>> result = find_outliers_transect(transect, exclude_ends=True, mute_mode=True)
    >>> result['outliers_likely']
    [('C', 1.0)]
    """
    strat_level, exclude_ends = validate_outlier_parameters(strat_level, exclude_ends)
    
    if not transect.get('measured', True):
        if not mute_mode:
            print("Be-10 was not measured for this dataset. No outliers assessed.")
        return _empty_result(STATUS_NOT_MEASURED, strat_level, exclude_ends)
    
    validate_transect(transect, mask)
    n_input = len(transect['sample_names'])
    mask_idx = resolve_mask(mask, n_input)
    
    sample_names = [transect['sample_names'][i] for i in mask_idx]
    ages = np.asarray(transect['ages'], dtype=float)[mask_idx]
    age_uncertainties = np.asarray(transect['age_uncertainties'], dtype=float)[mask_idx]
    
    position = transect.get('position')
    elevation = transect.get('elevation')
    position = resolve_positions(
        None if position is None else np.asarray(position, dtype=float)[mask_idx],
        None if elevation is None else np.asarray(elevation, dtype=float)[mask_idx]
    )
    
    result = _empty_result(STATUS_OK, strat_level, exclude_ends)
    if len(mask_idx) == 0:
        if not mute_mode:
            print("Warning: No samples selected by the mask. No outliers assessed.")
        return result
    
    # Rank by relative position (largest to smallest)
    ranked = rank_by_position(position)
    srt_idx = ranked['order']
    srt_ages = ages[srt_idx]
    srt_uncertainties = age_uncertainties[srt_idx]
    srt_names = [sample_names[i] for i in srt_idx]
    
    if np.any(ranked['duplicate_positions']) and not mute_mode:
        dup_names = [srt_names[i] for i in np.flatnonzero(ranked['duplicate_positions'])]
        print(f"Warning: Samples share stratigraphic positions: {', '.join(dup_names)}")
    
    # Each sweep keeps its own living sequence
    outlier_forward_log = sweep_transect(srt_ages, srt_uncertainties, strat_level, exclude_ends,
                                         direction='forward')
    outlier_reverse_log = sweep_transect(srt_ages, srt_uncertainties, strat_level, exclude_ends,
                                         direction='reverse')
    
    classification = combine_outlier_flags(outlier_forward_log, outlier_reverse_log)
    exported = remove_outlier_ages(srt_names, srt_ages, srt_uncertainties, classification)
    report = format_outlier_report(exported['outliers_distinct'], exported['outliers_likely'])
    
    # Agreement of each sample with the one below it (diagnostic)
    neighbor_overlap_pct = np.full(len(srt_ages), np.nan)
    for i in range(len(srt_ages) - 1):
        neighbor_overlap_pct[i] = calculate_age_overlap_percentage(
            srt_ages[i] - srt_uncertainties[i], srt_ages[i] + srt_uncertainties[i],
            srt_ages[i + 1] - srt_uncertainties[i + 1], srt_ages[i + 1] + srt_uncertainties[i + 1]
        )
    
    # Re-align the exported series to the masked input order
    ages_input_order = np.empty(len(srt_idx))
    ages_input_order[srt_idx] = exported['ages']
    age_uncertainties_input_order = np.empty(len(srt_idx))
    age_uncertainties_input_order[srt_idx] = exported['age_uncertainties']
    
    result.update({
        'sample_names': srt_names,
        'position': ranked['position'],
        'input_index': mask_idx[srt_idx],
        'ages': exported['ages'],
        'age_uncertainties': exported['age_uncertainties'],
        'ages_input_order': ages_input_order,
        'age_uncertainties_input_order': age_uncertainties_input_order,
        'duplicate_positions': ranked['duplicate_positions'],
        'neighbor_overlap_pct': neighbor_overlap_pct,
        'outlier_forward': outlier_forward_log,
        'outlier_reverse': outlier_reverse_log[::-1].copy(),
        'classification': classification,
        'outliers_likely': exported['outliers_likely'],
        'outliers_distinct': exported['outliers_distinct'],
        'report': report
    })
    
    if not mute_mode:
        for line in report:
            print(line)
    
    return result
