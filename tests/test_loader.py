import pytest

from data_layer.base import LoadFailure, load_dataset, parse_records
from data_layer.records import UnknownMetricError, metric_column


def test_parses_and_sorts_by_year():
    ds = parse_records(
        "Year,Cancer label,Total,ASR (World)\n"
        "2023,Lung,120,45\n"
        "2020,Lung,100,40\n"
        "2023,Breast,200,30\n"
    )
    assert ds.frame["year"].tolist() == [2020, 2023, 2023]
    # Stable within a year
    assert ds.frame["cancer_type"].tolist() == ["Lung", "Lung", "Breast"]
    assert ds.cancer_types == ("Breast", "Lung")
    assert ds.year_bounds == (2020, 2023)
    assert ds.metrics == ("ASR (World)",)


def test_blank_lines_and_incomplete_rows_dropped():
    ds = parse_records(
        "Year,Cancer label,Total,ASR (World)\n"
        "\n"
        "2020,Lung,100,40\n"
        ",Lung,100,41\n"
        "2021,,100,42\n"
        "\n"
        "2021,Lung,110,43\n"
    )
    assert len(ds.frame) == 2
    assert ds.frame["ASR (World)"].tolist() == [40, 43]


def test_metrics_discovered_in_header_order():
    ds = parse_records(
        "Year,Cancer label,Total,Crude rate,Sex,ASR (World)\n"
        "2020,Lung,100,12.5,Persons,40\n"
    )
    assert ds.metrics == ("Crude rate", "ASR (World)")
    assert "Sex" not in ds.frame.columns


def test_missing_total_defaults_to_zero():
    ds = parse_records("Year,Cancer label,ASR (World)\n2020,Lung,40\n")
    assert ds.frame["total"].tolist() == [0]


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "   \n  ",
        "Cancer label,Total,ASR (World)\nLung,1,2\n",
        "Year,Cancer label,Total\n2020,Lung,100\n",
        "Year,Cancer label,ASR (World)\n,,\n",
    ],
)
def test_load_failures(text):
    with pytest.raises(LoadFailure):
        parse_records(text)


def test_missing_file_is_load_failure(tmp_path):
    with pytest.raises(LoadFailure):
        load_dataset(str(tmp_path / "nope.csv"))


def test_load_from_file(tmp_path):
    p = tmp_path / "data.csv"
    p.write_text("Year,Cancer label,Total,ASR (World)\n2020,Lung,100,40\n", encoding="utf-8")
    ds = load_dataset(str(p))
    assert ds.cancer_types == ("Lung",)


def test_embedded_dataset(embedded_dataset):
    assert embedded_dataset.metrics == ("Crude rate", "ASR (World)", "ASR (Australia)")
    assert len(embedded_dataset.cancer_types) == 20
    assert embedded_dataset.year_bounds == (2000, 2023)
    # Mesothelioma has no 2023 row in the snapshot year
    assert embedded_dataset.find_record("Mesothelioma", 2023) is None
    assert embedded_dataset.find_record("Lung", 2023) is not None


def test_metric_lookup():
    assert metric_column(("ASR (World)",), "ASR (World)") == "ASR (World)"
    with pytest.raises(UnknownMetricError) as err:
        metric_column(("ASR (World)",), "rate")
    assert err.value.available == ("ASR (World)",)
    with pytest.raises(UnknownMetricError):
        metric_column(("ASR (World)",), None)


def test_find_record(small_dataset):
    rec = small_dataset.find_record("Breast", 2023)
    assert rec.total == 200
    assert rec.value("ASR (World)") == 30.0
    assert small_dataset.find_record("Breast", 2020) is None
