from typing import Dict, List, Tuple

from nalssi.models import Report

UNKNOWN_WEATHER = ("🌡️", "알 수 없음")

# WMO weather code -> (emoji, label)
WEATHER_ICONS: Dict[int, Tuple[str, str]] = {
	0: ("☀️", "맑음"),
	1: ("☁️", "흐림"), 2: ("☁️", "흐림"), 3: ("☁️", "흐림"),
	45: ("🌫️", "안개"), 48: ("🌫️", "안개"),
	51: ("🌦️", "이슬비"), 53: ("🌦️", "이슬비"), 55: ("🌦️", "이슬비"),
	61: ("🌧️", "비"), 63: ("🌧️", "비"), 65: ("🌧️", "비"),
	71: ("🌨️", "눈"), 73: ("🌨️", "눈"), 75: ("🌨️", "눈"),
	95: ("⛈️", "뇌우"),
}

# US AQI, inclusive upper bounds
AQI_BANDS: List[Tuple[float, str]] = [
	(50, "좋음 😊"),
	(100, "보통 🙂"),
	(150, "나쁨 😷"),  # unhealthy for sensitive groups
	(200, "매우 나쁨 🤢"),
]
AQI_HAZARDOUS = "위험 ☠️"

# Korean public grading, µg/m³, inclusive upper bounds
PM10_BANDS: List[Tuple[float, str]] = [(30, "좋음"), (80, "보통"), (150, "나쁨")]
PM25_BANDS: List[Tuple[float, str]] = [(15, "좋음"), (35, "보통"), (75, "나쁨")]
PM_WORST = "매우 나쁨"


def _band(value: float, bands: List[Tuple[float, str]], fallback: str) -> str:
	for upper, label in bands:
		if value <= upper:
			return label
	return fallback


def icon_for_weather_code(code: int) -> Tuple[str, str]:
	return WEATHER_ICONS.get(code, UNKNOWN_WEATHER)


def aqi_status(aqi: int) -> str:
	return _band(aqi, AQI_BANDS, AQI_HAZARDOUS)


def pm10_grade(value: float) -> str:
	return _band(value, PM10_BANDS, PM_WORST)


def pm25_grade(value: float) -> str:
	return _band(value, PM25_BANDS, PM_WORST)


def render_report(report: Report, show_country: bool = True) -> str:
	"""
	Format a report as the fixed multi-line Korean summary.
	The humidity/wind line is only printed when the upstream returned either value.
	"""
	loc, w, aq = report.location, report.weather, report.air_quality
	place = f"{loc.name}, {loc.country}" if show_country and loc.country else loc.name
	emoji, label = icon_for_weather_code(w.weather_code)

	lines = [
		f"{place} | {report.observed_at.strftime('%m-%d %H:%M')} (KST)",
		f"{emoji}  {label}  {w.temperature_c:.1f}°C (체감 {w.apparent_temperature_c:.1f}°C)  |  강수 {w.precipitation_probability_pct}%",
	]
	extras = []
	if w.humidity_pct is not None:
		extras.append(f"습도 {w.humidity_pct}%")
	if w.wind_speed_ms is not None:
		extras.append(f"바람 {w.wind_speed_ms:.1f}m/s")
	if extras:
		lines.append("  |  ".join(extras))
	lines.append(f"대기질 {aqi_status(aq.us_aqi)} (AQI {aq.us_aqi})")
	lines.append(f"미세먼지(PM10) {pm10_grade(aq.pm10)} | 초미세먼지(PM2.5) {pm25_grade(aq.pm25)}")
	return "\n".join(lines)
