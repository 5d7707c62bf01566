"""
Data loading functions for pyTransectAge.

Included Functions:
- load_transect_from_csv: Load a transect of exposure ages from a CSV file
- validate_transect: Check a transect record before outlier assessment
- resolve_mask: Convert an inclusion mask to sample indices

A transect record is a dictionary mirroring the iceTEA ages struct: sample
names, Be-10 mean ages and total uncertainties, stratigraphic positions and/or
elevations, and a dataset-level flag saying whether Be-10 was measured.
"""

import os

import numpy as np
import pandas as pd

REQUIRED_TRANSECT_KEYS = ('sample_names', 'ages', 'age_uncertainties')

DEFAULT_DATA_COLUMNS = {
    'name': 'sample_name',
    'age': 'Be10_age_ka',
    'age_uncertainty': 'Be10_total_uncertainty_ka',
    'position': 'position',
    'elevation': 'elevation_m'
}


def load_transect_from_csv(csv_file_path, data_columns=None, measured=True, mute_mode=False):
    """
    Load a transect of exposure ages from a CSV file with configurable column mapping.
    
    Parameters
    ----------
    csv_file_path : str
        Path to the CSV file containing one row per sample
    data_columns : dict, optional
        Dictionary mapping standard column names to actual CSV column names.
        Expected keys: 'name', 'age', 'age_uncertainty', 'position',
        'elevation'. Missing keys fall back to DEFAULT_DATA_COLUMNS.
    measured : bool, default=True
        Whether Be-10 was measured for this dataset
    mute_mode : bool, default=False
        If True, suppress printed warnings
    
    Returns
    -------
    dict
        Transect record with keys 'sample_names', 'ages', 'age_uncertainties',
        'position', 'elevation' and 'measured'. 'position' or 'elevation' is
        None when the corresponding column is absent.
    
    Example
    -------
    >>> data_columns = {
    ...     'name': 'Sample',
    ...     'age': 'Age (ka)',
    ...     'age_uncertainty': 'Total unc (ka)',
    ...     'position': 'Position',
    ...     'elevation': 'Elevation (m asl)'
    ... }
    >>> transect = load_transect_from_csv('NEG1_ages.csv', data_columns)
    """
    columns = dict(DEFAULT_DATA_COLUMNS)
    if data_columns is not None:
        columns.update(data_columns)
    
    if not os.path.exists(csv_file_path):
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")
    
    data = pd.read_csv(csv_file_path)
    
    for standard_col in ('name', 'age', 'age_uncertainty'):
        if columns[standard_col] not in data.columns:
            raise ValueError(f"Required column '{columns[standard_col]}' ({standard_col}) not found in "
                             f"{csv_file_path}. Available columns: {list(data.columns)}")
    
    optional_values = {}
    for standard_col in ('position', 'elevation'):
        csv_col = columns[standard_col]
        if csv_col in data.columns:
            optional_values[standard_col] = pd.to_numeric(data[csv_col], errors='coerce').to_numpy(dtype=float)
        else:
            optional_values[standard_col] = None
            if not mute_mode:
                print(f"Warning: Column '{csv_col}' not found in {csv_file_path}")
    
    if optional_values['position'] is None and optional_values['elevation'] is None:
        raise ValueError(f"Neither a position nor an elevation column was found in {csv_file_path}")
    
    transect = {
        'sample_names': data[columns['name']].astype(str).tolist(),
        'ages': pd.to_numeric(data[columns['age']], errors='coerce').to_numpy(dtype=float),
        'age_uncertainties': pd.to_numeric(data[columns['age_uncertainty']], errors='coerce').to_numpy(dtype=float),
        'position': optional_values['position'],
        'elevation': optional_values['elevation'],
        'measured': bool(measured)
    }
    
    if not mute_mode:
        print(f"Loaded {len(transect['sample_names'])} samples from {csv_file_path}")
    
    return transect


def validate_transect(transect, mask=None):
    """
    Check that a transect record is complete and consistent.
    
    Parameters
    ----------
    transect : dict
        Transect record (see load_transect_from_csv)
    mask : array_like, optional
        Inclusion mask (see resolve_mask). Ages and uncertainties are only
        checked for the included samples, so an excluded row may be blank.
    
    Raises ValueError for missing keys, mismatched lengths, non-finite ages
    or uncertainties, negative uncertainties, or when neither positions nor
    elevations are given.
    """
    missing = [key for key in REQUIRED_TRANSECT_KEYS if key not in transect]
    if missing:
        raise ValueError(f"Transect is missing required keys: {missing}")
    
    n_samples = len(transect['sample_names'])
    for key in ('ages', 'age_uncertainties', 'position', 'elevation'):
        values = transect.get(key)
        if values is not None and len(values) != n_samples:
            raise ValueError(f"Transect '{key}' has {len(values)} entries but there are {n_samples} samples")
    
    if transect.get('position') is None and transect.get('elevation') is None:
        raise ValueError("Transect must provide 'position' or 'elevation'")
    
    mask_idx = resolve_mask(mask, n_samples)
    ages = np.asarray(transect['ages'], dtype=float)[mask_idx]
    age_uncertainties = np.asarray(transect['age_uncertainties'], dtype=float)[mask_idx]
    
    non_finite = ~np.isfinite(ages) | ~np.isfinite(age_uncertainties)
    if np.any(non_finite):
        bad_names = [str(transect['sample_names'][i]) for i in mask_idx[non_finite]]
        raise ValueError(f"Ages and uncertainties must be finite numbers; check samples: {bad_names}")
    
    if np.any(age_uncertainties < 0):
        bad_names = [str(transect['sample_names'][i]) for i in mask_idx[age_uncertainties < 0]]
        raise ValueError(f"Age uncertainties must be non-negative; check samples: {bad_names}")


def resolve_mask(mask, n_samples):
    """
    Get the indices of the samples selected by an inclusion mask.
    
    Parameters
    ----------
    mask : array_like or None
        None to include all samples, a boolean array of length n_samples, or
        a sequence of 0-based sample indices
    n_samples : int
        Number of samples in the transect
    
    Returns
    -------
    numpy.ndarray
        Integer indices of the included samples, in mask order
    """
    if mask is None:
        return np.arange(n_samples)
    
    mask = np.asarray(mask)
    if mask.dtype == bool:
        if len(mask) != n_samples:
            raise ValueError(f"Boolean mask has {len(mask)} entries but there are {n_samples} samples")
        return np.flatnonzero(mask)
    
    if mask.size == 0:
        return np.array([], dtype=int)
    
    if not np.issubdtype(mask.dtype, np.integer):
        raise ValueError("mask must contain integer sample indices or booleans")
    
    mask_idx = mask.astype(int).ravel()
    if np.any(mask_idx < 0) or np.any(mask_idx >= n_samples):
        raise ValueError(f"mask indices must be between 0 and {n_samples - 1}")
    if len(np.unique(mask_idx)) != len(mask_idx):
        raise ValueError("mask contains duplicate sample indices")
    
    return mask_idx
