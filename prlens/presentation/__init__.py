from prlens.presentation.formatter import (
    format_cache_stats,
    format_filter_summary,
    format_rate_limit,
    format_relative_time,
    format_status,
    render,
)

__all__ = [
    "render",
    "format_relative_time",
    "format_status",
    "format_rate_limit",
    "format_cache_stats",
    "format_filter_summary",
]
