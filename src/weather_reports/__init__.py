"""
Weather Reports

This package scrapes historical sunrise/sunset tables and analyzes stored
rain measurements to compare the chance of rain during the week and the
weekend.
"""

__version__ = "0.1.0"
__description__ = "Sunrise/sunset scraping and week vs weekend rain reports"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "WeatherReportsApp":
        from .main import WeatherReportsApp
        return WeatherReportsApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "WeatherReportsApp",
]
