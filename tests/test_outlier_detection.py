import numpy as np
import pytest

from pyTransectAge import find_outliers_transect
from pyTransectAge.core.outlier_combiner import DISTINCT_OUTLIER, LIKELY_OUTLIER, NOT_OUTLIER
from pyTransectAge.core.outlier_sweep import sweep_transect

from conftest import make_transect


def test_single_young_outlier_is_likely(single_outlier_transect):
    result = find_outliers_transect(single_outlier_transect, exclude_ends=True, mute_mode=True)

    assert result["status"] == "ok"
    assert result["sample_names"] == ["A", "B", "C", "D", "E"]
    assert list(result["classification"]) == [NOT_OUTLIER, NOT_OUTLIER, LIKELY_OUTLIER, NOT_OUTLIER, NOT_OUTLIER]
    assert result["outliers_likely"] == [("C", 1.0)]
    assert result["outliers_distinct"] == []
    assert np.isnan(result["ages"][2])
    assert np.isnan(result["age_uncertainties"][2])
    assert result["ages"][[0, 1, 3, 4]].tolist() == [10.0, 10.0, 10.0, 10.0]


def test_included_ends_are_flagged_one_way(single_outlier_transect):
    result = find_outliers_transect(single_outlier_transect, exclude_ends=False, mute_mode=True)

    assert result["outlier_forward"].tolist() == [False, False, True, False, True]
    assert result["outlier_reverse"].tolist() == [True, False, False, False, False]
    assert [name for name, _ in result["outliers_likely"]] == ["A", "C", "E"]


def test_young_top_sample_is_distinct():
    transect = make_transect([1.0, 10.0, 10.0], [1.0] * 3, position=[3, 2, 1], names=["top", "mid", "base"])
    result = find_outliers_transect(transect, mute_mode=True)

    assert list(result["classification"]) == [DISTINCT_OUTLIER, NOT_OUTLIER, LIKELY_OUTLIER]
    assert result["outliers_distinct"] == [("top", 1.0)]
    assert result["outliers_likely"] == [("base", 10.0)]


def test_single_sample_end_policy():
    transect = make_transect([12.0], [0.5], position=[1])

    flagged = find_outliers_transect(transect, exclude_ends=False, mute_mode=True)
    assert list(flagged["classification"]) == [DISTINCT_OUTLIER]
    assert flagged["outliers_distinct"] == [("S1", 12.0)]
    assert np.isnan(flagged["ages"][0])

    passed = find_outliers_transect(transect, exclude_ends=True, mute_mode=True)
    assert list(passed["classification"]) == [NOT_OUTLIER]
    assert passed["ages"].tolist() == [12.0]


def test_consistent_transect_has_no_outliers(consistent_transect):
    result = find_outliers_transect(consistent_transect, exclude_ends=True, mute_mode=True)

    assert not result["outlier_forward"].any()
    assert not result["outlier_reverse"].any()
    assert result["ages"].tolist() == consistent_transect["ages"]
    assert result["report"] == []


def test_consistent_transect_flags_ends_when_included(consistent_transect):
    result = find_outliers_transect(consistent_transect, exclude_ends=False, mute_mode=True)
    assert list(result["classification"]) == [LIKELY_OUTLIER, NOT_OUTLIER, NOT_OUTLIER, NOT_OUTLIER, LIKELY_OUTLIER]


def test_lookahead_depth_changes_classification():
    transect = make_transect([20.0, 10.0, 30.0, 40.0], [1.0] * 4, position=[10, 9, 8, 7])

    level3 = find_outliers_transect(transect, strat_level=3, exclude_ends=True, mute_mode=True)
    level2 = find_outliers_transect(transect, strat_level=2, exclude_ends=True, mute_mode=True)

    assert level3["outlier_forward"][0] and not level2["outlier_forward"][0]
    assert level3["classification"][0] == LIKELY_OUTLIER
    assert level2["classification"][0] == NOT_OUTLIER


def test_combined_flags_match_classification(single_outlier_transect):
    for exclude_ends in (False, True):
        result = find_outliers_transect(single_outlier_transect, exclude_ends=exclude_ends, mute_mode=True)
        forward = result["outlier_forward"]
        reverse = result["outlier_reverse"]
        for fwd, rev, category in zip(forward, reverse, result["classification"]):
            if fwd and rev:
                assert category == DISTINCT_OUTLIER
            elif fwd or rev:
                assert category == LIKELY_OUTLIER
            else:
                assert category == NOT_OUTLIER


def test_sweeps_use_independent_living_sequences(single_outlier_transect):
    result = find_outliers_transect(single_outlier_transect, mute_mode=True)
    ages = np.array(single_outlier_transect["ages"])
    uncertainties = np.array(single_outlier_transect["age_uncertainties"])

    forward = sweep_transect(ages, uncertainties, direction="forward")
    reverse = sweep_transect(ages, uncertainties, direction="reverse")

    assert result["outlier_forward"].tolist() == forward.tolist()
    assert result["outlier_reverse"].tolist() == reverse[::-1].tolist()


def test_output_aligned_with_rank_and_input_order():
    # Input order is scrambled relative to position
    transect = make_transect(
        ages=[10.0, 10.0, 1.0, 10.0, 10.0],
        age_uncertainties=[1.0] * 5,
        position=[1, 5, 3, 4, 2],
        names=["e", "a", "c", "b", "d"],
    )
    result = find_outliers_transect(transect, exclude_ends=True, mute_mode=True)

    assert result["sample_names"] == ["a", "b", "c", "d", "e"]
    assert result["input_index"].tolist() == [1, 3, 2, 4, 0]
    assert result["position"].tolist() == [5.0, 4.0, 3.0, 2.0, 1.0]
    assert len(result["ages"]) == len(result["classification"]) == 5
    assert np.isnan(result["ages"][2])
    assert np.isnan(result["ages_input_order"][2])
    assert np.count_nonzero(np.isnan(result["ages_input_order"])) == 1


def test_mask_removes_samples_before_ranking(single_outlier_transect):
    result = find_outliers_transect(single_outlier_transect, mask=[0, 1, 3, 4], exclude_ends=True, mute_mode=True)

    assert result["sample_names"] == ["A", "B", "D", "E"]
    assert result["input_index"].tolist() == [0, 1, 3, 4]
    assert list(result["classification"]) == [NOT_OUTLIER] * 4


def test_boolean_mask(single_outlier_transect):
    mask = [True, True, False, True, True]
    result = find_outliers_transect(single_outlier_transect, mask=mask, exclude_ends=True, mute_mode=True)
    assert result["sample_names"] == ["A", "B", "D", "E"]


def test_empty_mask_gives_empty_result(single_outlier_transect):
    result = find_outliers_transect(single_outlier_transect, mask=[], mute_mode=True)
    assert result["status"] == "ok"
    assert result["sample_names"] == []
    assert len(result["ages"]) == 0
    assert result["outliers_likely"] == [] and result["outliers_distinct"] == []


def test_elevation_fallback_for_missing_positions():
    transect = make_transect(
        ages=[10.0, 10.0, 10.0],
        age_uncertainties=[1.0] * 3,
        position=[np.nan, 50.0, 20.0],
        elevation=[100.0, 0.0, 0.0],
        names=["high", "mid", "low"],
    )
    result = find_outliers_transect(transect, exclude_ends=True, mute_mode=True)
    assert result["sample_names"] == ["high", "mid", "low"]
    assert result["position"].tolist() == [100.0, 50.0, 20.0]


def test_duplicate_positions_are_reported_but_do_not_change_flags(capsys):
    transect = make_transect([10.0, 10.0, 10.0], [1.0] * 3, position=[2, 2, 1])
    result = find_outliers_transect(transect, exclude_ends=True)

    assert result["duplicate_positions"].tolist() == [True, True, False]
    assert list(result["classification"]) == [NOT_OUTLIER] * 3
    assert "share stratigraphic positions" in capsys.readouterr().out


def test_neighbor_overlap_diagnostic(consistent_transect):
    result = find_outliers_transect(consistent_transect, mute_mode=True)
    overlap = result["neighbor_overlap_pct"]
    assert len(overlap) == 5
    assert np.all(overlap[:-1] > 90.0)
    assert np.isnan(overlap[-1])


def test_not_measured_dataset_is_a_tagged_no_op(single_outlier_transect, capsys):
    single_outlier_transect["measured"] = False
    result = find_outliers_transect(single_outlier_transect)

    assert result["status"] == "not_measured"
    assert result["sample_names"] == []
    assert len(result["ages"]) == 0
    assert result["report"] == []
    assert "not measured" in capsys.readouterr().out


def test_report_is_printed_unless_muted(single_outlier_transect, capsys):
    find_outliers_transect(single_outlier_transect, exclude_ends=True)
    out = capsys.readouterr().out
    assert "Likely outliers (one-direction identification):" in out
    assert "sample C (mean of 1.00 ka)" in out

    find_outliers_transect(single_outlier_transect, exclude_ends=True, mute_mode=True)
    assert capsys.readouterr().out == ""


def test_input_transect_is_not_modified(single_outlier_transect):
    ages_before = list(single_outlier_transect["ages"])
    find_outliers_transect(single_outlier_transect, mute_mode=True)
    assert single_outlier_transect["ages"] == ages_before


@pytest.mark.parametrize("strat_level", [0, 1, 4, 2.5, "3", True, None])
def test_invalid_strat_level(single_outlier_transect, strat_level):
    with pytest.raises(ValueError, match="strat_level"):
        find_outliers_transect(single_outlier_transect, strat_level=strat_level, mute_mode=True)


@pytest.mark.parametrize("exclude_ends", [2, -1, "yes", None, 0.5])
def test_invalid_exclude_ends(single_outlier_transect, exclude_ends):
    with pytest.raises(ValueError, match="exclude_ends"):
        find_outliers_transect(single_outlier_transect, exclude_ends=exclude_ends, mute_mode=True)


def test_numeric_parameters_accepted(single_outlier_transect):
    result = find_outliers_transect(single_outlier_transect, None, np.int64(2), 1, mute_mode=True)
    assert result["strat_level"] == 2
    assert result["exclude_ends"] is True


def test_too_many_positional_arguments(single_outlier_transect):
    with pytest.raises(TypeError):
        find_outliers_transect(single_outlier_transect, None, 3, False, True)


def test_invalid_transect_records():
    with pytest.raises(ValueError):
        find_outliers_transect({"sample_names": ["a"], "ages": [1.0]}, mute_mode=True)
    with pytest.raises(ValueError):
        find_outliers_transect(make_transect([1.0, 2.0], [1.0], position=[1, 2]), mute_mode=True)
    with pytest.raises(ValueError):
        find_outliers_transect(make_transect([1.0], [-1.0], position=[1]), mute_mode=True)
    with pytest.raises(ValueError):
        find_outliers_transect(make_transect([1.0], [1.0]), mute_mode=True)


def test_non_finite_age_is_rejected():
    transect = make_transect([10.0, 10.0, 1.0, np.nan, 10.0, 10.0], [1.0] * 6, position=[6, 5, 4, 3, 2, 1])
    with pytest.raises(ValueError, match="S4"):
        find_outliers_transect(transect, exclude_ends=True, mute_mode=True)


def test_non_finite_uncertainty_is_rejected():
    transect = make_transect([10.0, 10.0, 10.0], [1.0, np.inf, 1.0], position=[3, 2, 1])
    with pytest.raises(ValueError, match="S2"):
        find_outliers_transect(transect, mute_mode=True)


def test_excluded_non_finite_row_does_not_hide_outliers():
    transect = make_transect([10.0, 10.0, 1.0, np.nan, 10.0, 10.0], [1.0] * 6, position=[6, 5, 4, 3, 2, 1])
    result = find_outliers_transect(transect, mask=[0, 1, 2, 4, 5], exclude_ends=True, mute_mode=True)

    assert result["outliers_likely"] == [("S3", 1.0)]
    assert result["sample_names"] == ["S1", "S2", "S3", "S5", "S6"]


def test_not_measured_dataset_skips_age_checks():
    transect = make_transect([np.nan, np.nan], [np.nan, np.nan], position=[2, 1], measured=False)
    result = find_outliers_transect(transect, mute_mode=True)
    assert result["status"] == "not_measured"
