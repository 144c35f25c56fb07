"""
Column configurations for the three list pages.

Each list is a SortableTable over raw API records; the renderers here turn
stored values into display text (dates, labels, proficiency dots).
Sorting always uses the raw values, never the rendered text.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from app.client.table import Column, SortableTable

MISSING = "—"
SKILL_PREVIEW = 3
MAX_PROFICIENCY = 5


def parse_date(value: Union[str, datetime, None]) -> Optional[datetime]:
    """API dates arrive as ISO 8601 strings; datetimes pass through."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def format_date(value: Union[str, datetime, None], with_day: bool = False) -> str:
    """
    Short English date: "Jan 2024", or "Mar 15, 2024" with `with_day`.
    Empty for a missing date.
    """
    date = parse_date(value)
    if date is None:
        return ""
    if with_day:
        return f"{date:%b} {date.day}, {date.year}"
    return f"{date:%b} {date.year}"


def format_duration(row: dict) -> str:
    """Start to end month; an internship with no end date is still running."""
    end = format_date(row["endDate"]) if row.get("endDate") else "Present"
    return f"{format_date(row.get('startDate'))} - {end}"


def capitalize(value: Any) -> str:
    return str(value).capitalize() if value else ""


# ============================================================
# RENDERERS  (value, row) -> str
# ============================================================

def render_duration(_: Any, row: dict) -> str:
    return format_duration(row)


def render_internship_status(value: Any, row: dict) -> str:
    return "Completed" if value == "completed" else "Ongoing"


def render_skill_list(value: Any, row: dict) -> str:
    skills = list(value or [])
    shown = skills[:SKILL_PREVIEW]
    if len(skills) > SKILL_PREVIEW:
        shown.append(f"+{len(skills) - SKILL_PREVIEW}")
    return ", ".join(shown)


def proficiency_dots(level: int) -> str:
    level = max(0, min(int(level or 0), MAX_PROFICIENCY))
    return "●" * level + "○" * (MAX_PROFICIENCY - level)


def render_proficiency(value: Any, row: dict) -> str:
    return f"{proficiency_dots(value)} {value}/{MAX_PROFICIENCY}"


def render_label(value: Any, row: dict) -> str:
    return capitalize(value)


def render_completion_date(value: Any, row: dict) -> str:
    return format_date(value, with_day=True)


def render_optional(value: Any, row: dict) -> str:
    return str(value) if value else MISSING


def render_link(value: Any, row: dict) -> str:
    return "View" if value else MISSING


# ============================================================
# PAGE COLUMNS
# ============================================================

INTERNSHIP_COLUMNS: List[Column] = [
    Column("company", "Company"),
    Column("role", "Role"),
    Column("startDate", "Duration", render=render_duration),
    Column("status", "Status", render=render_internship_status),
    Column("skills", "Skills", sortable=False, render=render_skill_list),
]

SKILL_COLUMNS: List[Column] = [
    Column("name", "Skill Name"),
    Column("proficiency", "Proficiency", render=render_proficiency),
    Column("category", "Category", render=render_label),
    Column("status", "Status", render=render_label),
]

CERTIFICATION_COLUMNS: List[Column] = [
    Column("name", "Certification"),
    Column("platform", "Platform"),
    Column("completionDate", "Completed", render=render_completion_date),
    Column("credentialId", "Credential ID", render=render_optional),
    Column("certificateLink", "Link", sortable=False, render=render_link),
]

PAGE_COLUMNS = {
    "internships": (INTERNSHIP_COLUMNS, "No internships yet. Click 'Add Internship' to get started."),
    "skills": (SKILL_COLUMNS, "No skills yet. Click 'Add Skill' to get started."),
    "certifications": (CERTIFICATION_COLUMNS, "No certifications yet. Click 'Add Certification' to get started."),
}


def table_for(resource: str, **kwargs) -> SortableTable:
    """A fresh table for one list page (edit/delete callbacks go in kwargs)."""
    if resource not in PAGE_COLUMNS:
        raise ValueError(f"Unknown resource '{resource}'")
    columns, empty_message = PAGE_COLUMNS[resource]
    kwargs.setdefault("empty_message", empty_message)
    return SortableTable(list(columns), **kwargs)
