"""Default parameters for hazard detection and reporting.

全局配置：灾害检测阈值、趋势判定与报告输出的默认参数。
"""

# ============================================================================
# 检测参数 (Detection Parameters)
# ============================================================================

# 百分位阈值 (nearest-rank percentiles, fraction of the sorted sample)
HEATWAVE_PERCENTILE = 0.95
DROUGHT_PERCENTILE = 0.10
HEAVY_RAINFALL_PERCENTILE = 0.95
COLD_WAVE_PERCENTILE = 0.05

# 最小连续天数 (minimum consecutive days)
HEATWAVE_MIN_DURATION = 3
DROUGHT_MIN_DURATION = 30
HEAVY_RAINFALL_MIN_DURATION = 1
COLD_WAVE_MIN_DURATION = 3

# 干旱滑动累计降水窗口 (trailing precipitation window, days)
DROUGHT_ROLLING_WINDOW = 30

# 强度评分范围 (intensity score bounds)
INTENSITY_MIN = 1.0
INTENSITY_MAX = 10.0

# ============================================================================
# 趋势与报告 (Trend and Reporting)
# ============================================================================

# |percent change| at or below this is "stable"
TREND_STABLE_BAND = 5.0

# Risk levels keyed by the lower bound of the average intensity
RISK_LEVELS = (
    (6.0, "Very High"),
    (4.0, "High"),
    (2.0, "Medium"),
)
DEFAULT_RISK_LEVEL = "Low"

# Years compared at each end of the record in the insights summary
COMPARISON_WINDOW_YEARS = 5

YEARLY_COLUMNS = ("Year", "Frequency", "Intensity", "Duration")

OBSERVATION_COLUMNS = (
    "date",
    "temperature",
    "humidity",
    "precipitation",
    "wind_speed",
    "pressure",
)

# Preset regions: name -> (lat, lon, (north, south, east, west))
PRESET_REGIONS = {
    "New York, NY": (40.7128, -74.006, (40.8, 40.6, -73.9, -74.1)),
    "Los Angeles, CA": (34.0522, -118.2437, (34.2, 33.9, -118.1, -118.4)),
    "Phoenix, AZ": (33.4484, -112.074, (33.6, 33.3, -111.9, -112.2)),
    "Miami, FL": (25.7617, -80.1918, (25.9, 25.6, -80.0, -80.3)),
    "Chicago, IL": (41.8781, -87.6298, (42.0, 41.7, -87.5, -87.8)),
}

# Rough kilometres per degree of latitude or longitude for the area estimate
KM_PER_DEGREE = 111.0

# Synthetic generator: warming reference year
SYNTHETIC_REFERENCE_YEAR = 1990
