import pytest

from app_tabs.overview.filters import (
    FilterState,
    canonical_types,
    clamp_year_range,
    default_filters,
    filter_records,
    normalize_filters,
    search_type_options,
)


def test_default_filters(embedded_dataset):
    f = default_filters(embedded_dataset)
    assert (f.year_min, f.year_max) == (2000, 2023)
    assert f.selected_types == embedded_dataset.cancer_types
    assert f.metric == "ASR (World)"
    assert f.show_projection is False


def test_filter_records_predicates(small_dataset, small_filters):
    out = filter_records(small_dataset.frame, small_filters)
    assert len(out) == 3

    narrowed = small_filters.with_changes(year_max=2022)
    out = filter_records(small_dataset.frame, narrowed)
    assert out["cancer_type"].tolist() == ["Lung"]
    assert out["year"].tolist() == [2020]

    only_breast = small_filters.with_changes(selected_types=("Breast",))
    assert filter_records(small_dataset.frame, only_breast)["cancer_type"].tolist() == ["Breast"]


@pytest.mark.parametrize(
    "year_min,year_max,types",
    [
        (2000, 2023, None),
        (2005, 2010, ("Lung", "Breast", "Thyroid")),
        (2022, 2023, ("Mesothelioma",)),
        (2000, 2001, ()),
    ],
)
def test_filter_records_is_subset(embedded_dataset, year_min, year_max, types):
    base = default_filters(embedded_dataset)
    f = base.with_changes(
        year_min=year_min,
        year_max=year_max,
        selected_types=base.selected_types if types is None else types,
    )
    full = embedded_dataset.frame
    out = filter_records(full, f)
    assert len(out) <= len(full)
    assert set(out.index) <= set(full.index)
    assert out["year"].between(year_min, year_max).all()
    assert out["cancer_type"].isin(f.selected_types).all()
    # Order preserved (years ascending as loaded)
    assert out["year"].is_monotonic_increasing


def test_filter_records_does_not_mutate(small_dataset, small_filters):
    before = small_dataset.frame.copy()
    filter_records(small_dataset.frame, small_filters.with_changes(selected_types=()))
    assert small_dataset.frame.equals(before)


def test_empty_selection_gives_empty_result(small_dataset, small_filters):
    out = filter_records(small_dataset.frame, small_filters.with_changes(selected_types=()))
    assert out.empty


@pytest.mark.parametrize(
    "lo,hi,moved,expected",
    [
        (2005, 2010, "min", (2005, 2010)),
        (2010, 2010, "min", (2010, 2011)),
        (2010, 2010, "max", (2009, 2010)),
        (2012, 2010, "max", (2009, 2010)),
        (2023, 2023, "min", (2022, 2023)),
        (2000, 2000, "max", (2000, 2001)),
        (1990, 2050, "min", (2000, 2023)),
    ],
)
def test_clamp_year_range(lo, hi, moved, expected):
    assert clamp_year_range(lo, hi, (2000, 2023), moved=moved) == expected


def test_clamp_single_year_dataset():
    assert clamp_year_range(2020, 2020, (2020, 2020)) == (2020, 2020)


def test_normalize_filters(embedded_dataset):
    f = normalize_filters(
        {
            "year_min": "2010",
            "year_max": 2015,
            "selected_types": ["Lung", "Unknown", "Breast", None],
            "metric": "Crude rate",
            "show_projection": True,
        },
        embedded_dataset,
    )
    assert f == FilterState(2010, 2015, ("Breast", "Lung"), "Crude rate", True)


def test_normalize_unknown_metric_falls_back(embedded_dataset):
    f = normalize_filters({"metric": "rate"}, embedded_dataset)
    assert f.metric == "ASR (World)"
    assert f.selected_types == embedded_dataset.cancer_types


def test_normalize_roundtrips_store_dict(embedded_dataset):
    f = default_filters(embedded_dataset).with_changes(year_min=2004, show_projection=True)
    assert normalize_filters(f.to_dict(), embedded_dataset) == f


def test_canonical_types_order(embedded_dataset):
    assert canonical_types(embedded_dataset, ["Thyroid", "Bladder"]) == ("Bladder", "Thyroid")


def test_search_type_options():
    types = ["Bladder", "Bowel", "Non-Hodgkin lymphoma"]
    assert search_type_options(types, "bo") == ["Bowel"]
    assert search_type_options(types, "  LYMPH ") == ["Non-Hodgkin lymphoma"]
    assert search_type_options(types, "") == types
    assert search_type_options(types, None) == types
