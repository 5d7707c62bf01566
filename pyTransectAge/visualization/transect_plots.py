"""
Plotting functions for transects of exposure ages.

Included Functions:
- plot_transect_outliers: Plot exposure ages against stratigraphic position,
  highlighting the likely and distinct outliers

This module draws each sample as an age with its total uncertainty, so the
stratigraphic relationships used to identify outliers can be inspected.
"""

import os

import numpy as np
import matplotlib.pyplot as plt

from ..core.position_ranking import resolve_positions
from ..core.outlier_combiner import NOT_OUTLIER, LIKELY_OUTLIER, DISTINCT_OUTLIER
from ..utils.data_loader import resolve_mask

VALID_ORIENTATIONS = ('vert', 'horiz')


def plot_transect_outliers(transect, result, orientation='vert', mask=None, figsize=(6, 8),
                           title=None, show_excluded=True, show_plot=False, save_fig=False,
                           output_path=None):
    """
    Plot a transect of exposure ages with the identified outliers.
    
    Parameters
    ----------
    transect : dict
        Transect record passed to find_outliers_transect
    result : dict
        Output of find_outliers_transect
    orientation : str, default='vert'
        'vert' plots age on the x-axis and position on the y-axis (vertical
        transect); 'horiz' swaps the axes.
    mask : array_like, optional
        The inclusion mask used for the assessment. Samples outside it are
        drawn in grey when show_excluded is True.
    figsize : tuple, default=(6, 8)
        Figure size tuple (width, height)
    title : str, optional
        Title for the plot
    show_excluded : bool, default=True
        Whether to draw samples excluded by the mask
    show_plot : bool, default=False
        If True, display the figure with plt.show()
    save_fig : bool, default=False
        If True, save the figure to output_path
    output_path : str, optional
        Path of the image file to write when save_fig is True
    
    Returns
    -------
    fig : matplotlib.figure.Figure
        The created figure object
    ax : matplotlib.axes.Axes
        The plotting axis
    """
    if orientation not in VALID_ORIENTATIONS:
        raise ValueError(f"orientation must be one of {VALID_ORIENTATIONS}, got {orientation}")
    if save_fig and output_path is None:
        raise ValueError("output_path must be provided when save_fig is True")
    
    fig, ax = plt.subplots(figsize=figsize)
    
    def draw(ages, uncertainties, positions, **kwargs):
        if len(ages) == 0:
            return
        if orientation == 'vert':
            ax.errorbar(ages, positions, xerr=uncertainties, capsize=4, **kwargs)
        else:
            ax.errorbar(positions, ages, yerr=uncertainties, capsize=4, **kwargs)
    
    # Samples excluded by the mask
    if show_excluded and mask is not None:
        all_positions = resolve_positions(transect.get('position'), transect.get('elevation'))
        excluded = np.ones(len(transect['sample_names']), dtype=bool)
        excluded[resolve_mask(mask, len(excluded))] = False
        draw(np.asarray(transect['ages'], dtype=float)[excluded],
             np.asarray(transect['age_uncertainties'], dtype=float)[excluded],
             all_positions[excluded],
             fmt='x', color='lightgray', label='Excluded', zorder=2)
    
    if result['status'] == 'ok' and len(result['sample_names']) > 0:
        # Outlier ages are blanked in the result, so take them from the input
        input_index = result['input_index']
        ages = np.asarray(transect['ages'], dtype=float)[input_index]
        uncertainties = np.asarray(transect['age_uncertainties'], dtype=float)[input_index]
        positions = result['position']
        classification = np.asarray(result['classification'], dtype=object)
        
        styles = [
            (NOT_OUTLIER, dict(fmt='o', color='b', label='Retained ages', zorder=3)),
            (LIKELY_OUTLIER, dict(fmt='s', color='orange', markerfacecolor='w',
                                  label='Likely outliers', zorder=4)),
            (DISTINCT_OUTLIER, dict(fmt='D', color='r', markerfacecolor='w',
                                    label='Distinct outliers', zorder=5))
        ]
        for category, style in styles:
            category_mask = classification == category
            draw(ages[category_mask], uncertainties[category_mask], positions[category_mask], **style)
    
    position_label = 'Stratigraphic position'
    if transect.get('position') is None:
        position_label = 'Elevation'
    
    if orientation == 'vert':
        ax.set_xlabel('Exposure age (ka)')
        ax.set_ylabel(position_label)
    else:
        ax.set_xlabel(position_label)
        ax.set_ylabel('Exposure age (ka)')
    
    if title:
        ax.set_title(title)
    
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='best')
    
    plt.tight_layout()
    
    if save_fig:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
    
    if show_plot:
        plt.show()
    
    return fig, ax
