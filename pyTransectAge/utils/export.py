"""
Export functions for outlier assessment results
"""

import os

import pandas as pd


def export_outlier_results_to_csv(result, output_csv, mute_mode=False):
    """
    Write the outlier assessment of a transect to a CSV file.
    
    One row is written per ranked sample (top of the transect first). Ages of
    outliers are left blank, matching the exported series in the result.
    'overlap_with_next_pct' is the percentage overlap of each sample's age
    envelope with the sample below it (blank for the bottom sample).
    
    Parameters
    ----------
    result : dict
        Output of find_outliers_transect
    output_csv : str
        Path of the CSV file to write. Missing parent directories are created.
    mute_mode : bool, default=False
        If True, suppress printed output
    
    Returns
    -------
    pandas.DataFrame or None
        The exported table, or None if the result is 'not_measured'
    """
    if result['status'] != 'ok':
        if not mute_mode:
            print(f"Warning: Nothing exported for result with status '{result['status']}'")
        return None
    
    df = pd.DataFrame({
        'sample_name': result['sample_names'],
        'position': result['position'],
        'input_index': result['input_index'],
        'age_ka': result['ages'],
        'age_uncertainty_ka': result['age_uncertainties'],
        'outlier_forward': result['outlier_forward'],
        'outlier_reverse': result['outlier_reverse'],
        'classification': list(result['classification']),
        'duplicate_position': result['duplicate_positions'],
        'overlap_with_next_pct': result['neighbor_overlap_pct']
    })
    
    output_dir = os.path.dirname(output_csv)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    
    df.to_csv(output_csv, index=False)
    
    if not mute_mode:
        print(f"Exported outlier assessment for {len(df)} samples to {output_csv}")
    
    return df
