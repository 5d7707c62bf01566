import matplotlib

matplotlib.use("Agg")

import pytest


def make_transect(ages, age_uncertainties, position=None, elevation=None, names=None, measured=True):
    if names is None:
        names = [f"S{i + 1}" for i in range(len(ages))]
    return {
        "sample_names": list(names),
        "ages": list(ages),
        "age_uncertainties": list(age_uncertainties),
        "position": position,
        "elevation": elevation,
        "measured": measured,
    }


@pytest.fixture
def single_outlier_transect():
    """Five samples top-down, the middle one far too young."""
    return make_transect(
        ages=[10.0, 10.0, 1.0, 10.0, 10.0],
        age_uncertainties=[1.0] * 5,
        position=[5, 4, 3, 2, 1],
        names=["A", "B", "C", "D", "E"],
    )


@pytest.fixture
def consistent_transect():
    return make_transect(
        ages=[10.0, 10.2, 10.4, 10.6, 10.8],
        age_uncertainties=[3.0] * 5,
        position=[5, 4, 3, 2, 1],
    )
