from services.trend_service import build_trend
from ui.components.trend_chart import trend_figure


def test_figure_has_one_trace_per_series(make_point, frozen_now):
    history = [make_point(days_ago=d, r3=d + 2) for d in (0, 2, 5)]
    chart = build_trend(history, "all", ["r3", "eia"], now=frozen_now)
    fig = trend_figure(chart)
    assert [t.name for t in fig.data] == [s.label for s in chart.series]
    assert list(fig.data[0].x) == [x for x, _ in chart.series[0].points]
    assert fig.data[0].line.color == chart.series[0].color


def test_figure_axes_follow_descriptor(make_point, frozen_now):
    chart = build_trend([make_point(days_ago=1), make_point(days_ago=0)], "all", ["apd"], now=frozen_now)
    fig = trend_figure(chart)
    # screen coordinates: y grows downwards
    assert tuple(fig.layout.yaxis.range) == (chart.height, 0)
    assert tuple(fig.layout.yaxis.ticktext) == ("0", "5", "10")
    assert tuple(fig.layout.xaxis.ticktext) == tuple(lbl for _, lbl in chart.x_labels)
