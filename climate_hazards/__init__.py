"""
climate_hazards: 气候灾害事件检测与趋势分析工具包
Climate Hazard Event Detection and Trend Analysis Toolkit

Detects heatwaves, droughts, heavy-rainfall spells and cold waves in a daily
weather record using nearest-rank percentile thresholds, then summarises the
events per calendar year and classifies the frequency trend.

主要功能 / Main Features:
--------------------------
1. 阈值计算 / Threshold Calculation
   - 最近秩百分位数 / Nearest-rank percentile
   - 30 天尾随累计降水 / 30-day trailing precipitation sum

2. 事件检测 / Event Detection
   - heatwave: p95 温度, >= 3 天 / p95 temperature, >= 3 days
   - drought: p10 累计降水, >= 30 天 / p10 rolling precipitation, >= 30 days
   - heavy_rainfall: p95 降水日, >= 1 天 / p95 of wet days, >= 1 day
   - cold_wave: p5 温度, >= 3 天 / p5 temperature, >= 3 days

3. 年度统计与趋势 / Yearly Statistics and Trend
   - 年频次、平均强度、平均持续时间 / Frequency, mean intensity, mean duration
   - 首末年百分比变化 / First-to-last percent change

4. 报告辅助 / Reporting Helpers
   - CSV 导出、文字摘要、图表 / CSV export, text insights, charts

使用示例 / Usage Example:
--------------------------
>>> from climate_hazards import analyze, generate_synthetic_observations, Region
>>> region = Region("Phoenix, AZ", 33.4484, -112.074)
>>> observations = generate_synthetic_observations(region, 1990, 2020)
>>> result = analyze(observations, "heatwave")
>>> print(result.total_events, result.trend_direction, result.trend_magnitude)

安装 / Installation:
--------------------
    pip install -e .
"""

# ============================================================================
# 版本信息 / Version Information
# ============================================================================

__version__ = "0.1.0"
__license__ = "MIT"

# ============================================================================
# 模块导入 / Module Imports
# ============================================================================

from .exceptions import (
    ClimateHazardError,
    EmptyInputError,
    InvalidObservationsError,
)

from .models import (
    Observation,
    HazardEvent,
    YearlyHazardData,
    HazardAnalysis,
    Region,
    Bounds,
)

# 阈值 / Thresholds
from .thresholds import (
    nearest_rank_percentile,
    trailing_rolling_sum,
)

# 事件提取与检测 / Run extraction and detection
from .events import Direction, Run, extract_runs
from .detectors import (
    HazardKind,
    HazardSpec,
    HAZARD_SPECS,
    detect_events,
    resolve_hazard_kind,
)

# 年度统计与趋势 / Yearly aggregation and trend
from .aggregation import aggregate_by_year, round_half_up
from .trends import TrendEstimate, estimate_trend

# 主流程 / Orchestrator
from .analysis import analyze

# 报告辅助 / Reporting helpers
from .io_utils import (
    observations_to_frame,
    frame_to_observations,
    events_to_frame,
    yearly_to_frame,
    export_yearly_csv,
    export_filename,
)
from .insights import (
    analysis_area_km2,
    assess_risk_level,
    compare_recent_to_earlier,
    estimated_elevation_m,
    format_hazard_kind,
    peak_year,
    summarize_insights,
)
from .utils import (
    generate_synthetic_observations,
    preset_regions,
    set_report_style,
    plot_yearly_hazard,
    plot_hazard_events,
)

# ============================================================================
# 公共 API / Public API
# ============================================================================

__all__ = [
    # 异常 / Exceptions
    "ClimateHazardError",
    "EmptyInputError",
    "InvalidObservationsError",

    # 数据结构 / Records
    "Observation",
    "HazardEvent",
    "YearlyHazardData",
    "HazardAnalysis",
    "Region",
    "Bounds",

    # 检测流程 / Pipeline
    "nearest_rank_percentile",
    "trailing_rolling_sum",
    "Direction",
    "Run",
    "extract_runs",
    "HazardKind",
    "HazardSpec",
    "HAZARD_SPECS",
    "detect_events",
    "resolve_hazard_kind",
    "aggregate_by_year",
    "round_half_up",
    "TrendEstimate",
    "estimate_trend",
    "analyze",

    # 报告辅助 / Reporting
    "observations_to_frame",
    "frame_to_observations",
    "events_to_frame",
    "yearly_to_frame",
    "export_yearly_csv",
    "export_filename",
    "assess_risk_level",
    "compare_recent_to_earlier",
    "format_hazard_kind",
    "peak_year",
    "analysis_area_km2",
    "estimated_elevation_m",
    "summarize_insights",
    "generate_synthetic_observations",
    "preset_regions",
    "set_report_style",
    "plot_yearly_hazard",
    "plot_hazard_events",
]
