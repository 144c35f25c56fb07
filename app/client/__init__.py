"""
Client module - Python counterpart of the web front end.

- CareerTrackerClient: HTTP calls against the API
- load_dashboard / build_dashboard: dashboard summary
- SortableTable / Column: list page table state
- INTERNSHIP_COLUMNS, SKILL_COLUMNS, CERTIFICATION_COLUMNS: per-page columns
"""
from app.client.api_client import ApiError, CareerTrackerClient
from app.client.columns import (
    CERTIFICATION_COLUMNS,
    INTERNSHIP_COLUMNS,
    SKILL_COLUMNS,
    format_date,
    table_for,
)
from app.client.dashboard import Dashboard, DashboardStats, build_dashboard, load_dashboard, render_dashboard
from app.client.table import Column, SortableTable

__all__ = [
    "ApiError",
    "CareerTrackerClient",
    "Dashboard",
    "DashboardStats",
    "build_dashboard",
    "load_dashboard",
    "render_dashboard",
    "INTERNSHIP_COLUMNS",
    "SKILL_COLUMNS",
    "CERTIFICATION_COLUMNS",
    "format_date",
    "table_for",
    "Column",
    "SortableTable",
]
