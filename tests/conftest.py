import pytest

from app_tabs.overview.filters import FilterState
from data_layer.base import load_dataset, parse_records

SMALL_CSV = """\
Year,Cancer label,Total,ASR (World)
2020,Lung,100,40
2023,Lung,120,45
2023,Breast,200,30
"""


@pytest.fixture
def small_dataset():
    return parse_records(SMALL_CSV)


@pytest.fixture
def small_filters():
    return FilterState(
        year_min=2020,
        year_max=2023,
        selected_types=("Breast", "Lung"),
        metric="ASR (World)",
        show_projection=False,
    )


@pytest.fixture(scope="session")
def embedded_dataset():
    return load_dataset(None)


def _make_dataset(rows, metric="ASR (World)"):
    lines = [f"Year,Cancer label,Total,{metric}"]
    for row in rows:
        year, ctype, value = row[:3]
        total = row[3] if len(row) > 3 else 0
        lines.append(f"{year},{ctype},{total},{value}")
    return parse_records("\n".join(lines))


@pytest.fixture
def make_dataset():
    """Build a dataset from (year, type, value[, total]) tuples."""
    return _make_dataset
