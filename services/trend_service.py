# services/trend_service.py
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import numpy as np

from core.config import CHART_WIDTH, CHART_HEIGHT, CHART_PADDING, MAX_X_LABELS
from core.models import HistoryPoint
from core.principles import PRINCIPLE_KEYS, PRINCIPLE_LABELS, LINE_COLORS, MAX_SCORE
from core.time_utils import ensure_aware, local_day, utc_now, month_day_label

Y_TICKS = (0, 5, 10)


class TrendWindow(Enum):
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    ALL_TIME = "all"

    @property
    def days(self) -> Optional[int]:
        return {"7d": 7, "30d": 30}.get(self.value)

    @property
    def label(self) -> str:
        return {"7d": "7 Days", "30d": "30 Days", "all": "All Time"}[self.value]


@dataclass
class TrendSeries:
    key: str
    label: str
    color: str
    moments: List[datetime]
    scores: List[int]
    points: List[Tuple[float, float]] = field(default_factory=list)

    @property
    def path(self) -> str:
        """SVG path data for the polyline."""
        return " ".join(f"{'M' if i == 0 else 'L'} {x:.2f} {y:.2f}" for i, (x, y) in enumerate(self.points))


@dataclass
class ChartDescriptor:
    width: int
    height: int
    padding: int
    x_min: datetime
    x_max: datetime
    series: List[TrendSeries]
    x_labels: List[Tuple[float, str]]
    y_ticks: List[Tuple[float, str]]
    y_min: int = 0
    y_max: int = MAX_SCORE

    @property
    def point_count(self) -> int:
        return sum(len(s.points) for s in self.series)


@dataclass(frozen=True)
class InsufficientData:
    window: TrendWindow
    selected: Tuple[str, ...]
    point_count: int

    @property
    def message(self) -> str:
        return "Not enough data to show a trend for selected principles/timeframe. Log more reflections!"


TrendResult = Union[ChartDescriptor, InsufficientData]


def principle_points(history: Sequence[HistoryPoint], key: str, window: TrendWindow,
                     now: datetime) -> List[Tuple[datetime, int]]:
    pts = sorted(
        ((p.moment, p.scores[key]) for p in history if p.scores.get(key) is not None),
        key=lambda t: t[0],
    )
    if window.days is not None:
        cutoff = now - timedelta(days=window.days)
        pts = [t for t in pts if t[0] >= cutoff]
    return pts


def sample_x_labels(moments: Sequence[datetime], max_labels: int = MAX_X_LABELS) -> List[datetime]:
    """Up to ``max_labels`` evenly index-sampled moments, first and last included."""
    n = min(max_labels, len(moments))
    if n == 0:
        return []
    if n == 1:
        return [moments[0]]
    return [moments[(i * (len(moments) - 1)) // (n - 1)] for i in range(n)]


def build_trend(history: Sequence[HistoryPoint], window: Union[TrendWindow, str],
                selected_keys: Iterable[str], now: Optional[datetime] = None,
                width: int = CHART_WIDTH, height: int = CHART_HEIGHT,
                padding: int = CHART_PADDING) -> TrendResult:
    window = TrendWindow(window)
    wanted = set(selected_keys)
    selected = tuple(k for k in PRINCIPLE_KEYS if k in wanted)
    now = ensure_aware(now or utc_now())

    per_key = {k: principle_points(history, k, window, now) for k in selected}
    total = sum(len(v) for v in per_key.values())
    if total < 2:
        return InsufficientData(window=window, selected=selected, point_count=total)

    moments = sorted({m for pts in per_key.values() for m, _ in pts})
    t_min, t_max = moments[0], moments[-1]
    epoch_min, epoch_max = t_min.timestamp(), t_max.timestamp()

    def x_of(ms: Sequence[datetime]) -> List[float]:
        if epoch_max == epoch_min:
            return [width / 2.0] * len(ms)
        return np.interp([m.timestamp() for m in ms], [epoch_min, epoch_max],
                         [padding, width - padding]).tolist()

    def y_of(values: Sequence[float]) -> List[float]:
        return np.interp(values, [0, MAX_SCORE], [height - padding, padding]).tolist()

    series = []
    for key in selected:
        pts = per_key[key]
        if not pts:
            continue
        ms = [m for m, _ in pts]
        scores = [s for _, s in pts]
        series.append(TrendSeries(
            key=key, label=PRINCIPLE_LABELS[key], color=LINE_COLORS[key],
            moments=ms, scores=scores, points=list(zip(x_of(ms), y_of(scores))),
        ))

    # one candidate label per local day, placed at that day's first moment
    first_of_day = {}
    for m in moments:
        first_of_day.setdefault(local_day(m), m)
    label_moments = sample_x_labels(list(first_of_day.values()))
    x_labels = list(zip(x_of(label_moments), [month_day_label(m) for m in label_moments]))
    y_ticks = list(zip(y_of(Y_TICKS), [str(v) for v in Y_TICKS]))

    return ChartDescriptor(
        width=width, height=height, padding=padding,
        x_min=t_min, x_max=t_max, series=series,
        x_labels=x_labels, y_ticks=y_ticks,
    )
