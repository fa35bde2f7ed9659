import app_tabs.overview.figures as figures_module
from app_tabs.overview.figures import build_overview_figures, treemap_figure, trend_figure
from app_tabs.overview.filters import FilterState, default_filters
from app_tabs.overview.series import CHART_IDS, build_series
from utils.colors import color_for


def _filters(**changes):
    f = FilterState(2000, 2023, ("Bowel", "Lung"), "ASR (World)", False)
    return f.with_changes(**changes)


def test_all_charts_render(embedded_dataset):
    f = _filters()
    figs = build_overview_figures(build_series(embedded_dataset, f), f)
    assert set(figs) == set(CHART_IDS)
    assert len(figs["trend"].data) == 2
    assert figs["bar"].data[0].type == "bar"
    assert figs["pie"].data[0].type == "pie"
    assert figs["area"].data[0].stackgroup == "one"
    assert figs["treemap"].data[0].type == "treemap"


def test_trend_projection_traces_and_axis(embedded_dataset):
    f = _filters(show_projection=True)
    fig = trend_figure(build_series(embedded_dataset, f)["trend"], f)
    names = [t.name for t in fig.data]
    assert names == ["Bowel", "Bowel (Proj)", "Lung", "Lung (Proj)"]
    assert fig.data[1].line.dash == "dot"
    assert fig.data[2].line.color == color_for(1)
    assert list(fig.layout.xaxis.range) == [2000, 2028]


def test_treemap_root_and_colorbar(embedded_dataset):
    f = _filters()
    fig = treemap_figure(build_series(embedded_dataset, f)["treemap"], f)
    trace = fig.data[0]
    assert list(trace.labels) == ["Bowel", "Lung", "All Cancers"]
    assert trace.marker.colorbar.title.text == "ASR (World) (2023)"


def test_empty_selection_gives_placeholders(embedded_dataset):
    f = _filters(selected_types=())
    figs = build_overview_figures(build_series(embedded_dataset, f), f)
    for fig in figs.values():
        assert len(fig.data) == 0
        assert fig.layout.annotations


def test_failed_aggregation_only_blanks_that_chart(embedded_dataset):
    f = _filters()
    series = build_series(embedded_dataset, f)
    series["pie"] = None
    figs = build_overview_figures(series, f)
    assert len(figs["pie"].data) == 0
    assert len(figs["bar"].data) == 1


def test_renderer_failure_is_isolated(monkeypatch, embedded_dataset):
    def boom(*_args):
        raise ValueError("bad figure")

    monkeypatch.setitem(figures_module.RENDERERS, "area", boom)
    f = _filters()
    figs = build_overview_figures(build_series(embedded_dataset, f), f)
    assert len(figs["area"].data) == 0
    assert len(figs["trend"].data) == 2


def test_pie_slice_colors_match_legend_when_a_type_is_absent(embedded_dataset):
    # Thyroid has no rows before 2005
    f = default_filters(embedded_dataset).with_changes(year_min=2000, year_max=2004)
    fig = build_overview_figures(build_series(embedded_dataset, f), f)["pie"]
    trace = fig.data[0]
    assert "Thyroid" not in trace.labels
    slice_colors = dict(zip(trace.labels, trace.marker.colors))
    for ctype, color in slice_colors.items():
        assert color == color_for(f.selected_types.index(ctype))
    assert slice_colors["Uterine"] == color_for(f.selected_types.index("Uterine"))
