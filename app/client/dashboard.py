"""
Dashboard summary, computed client-side from the three record lists.

Nothing is stored: the summary is rebuilt from fresh lists on every load.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import httpx

from app.client.api_client import ApiError, CareerTrackerClient
from app.client.columns import format_date, format_duration, proficiency_dots

logger = logging.getLogger(__name__)

RECENT_INTERNSHIPS = 3
RECENT_SKILLS = 5
RECENT_CERTIFICATIONS = 3

ACTIVE_SKILL_STATUSES = {"proficient", "expert"}


@dataclass
class DashboardStats:
    internships: int = 0      # completed internships
    skills: int = 0           # proficient + expert skills
    certifications: int = 0
    learning: int = 0         # skills still being learned


@dataclass
class Dashboard:
    stats: DashboardStats = field(default_factory=DashboardStats)
    internships: List[dict] = field(default_factory=list)
    skills: List[dict] = field(default_factory=list)
    certifications: List[dict] = field(default_factory=list)


def build_dashboard(internships: List[dict], skills: List[dict], certifications: List[dict]) -> Dashboard:
    """Counts plus short previews. Lists are expected newest first, as the API returns them."""
    stats = DashboardStats(
        internships=sum(1 for i in internships if i.get("status") == "completed"),
        skills=sum(1 for s in skills if s.get("status") in ACTIVE_SKILL_STATUSES),
        certifications=len(certifications),
        learning=sum(1 for s in skills if s.get("status") == "learning"),
    )
    return Dashboard(
        stats=stats,
        internships=internships[:RECENT_INTERNSHIPS],
        skills=skills[:RECENT_SKILLS],
        certifications=certifications[:RECENT_CERTIFICATIONS],
    )


def load_dashboard(client: CareerTrackerClient) -> Dashboard:
    """
    Fetch all three lists and summarize them.

    A failed fetch is logged and an empty dashboard is shown instead.
    """
    try:
        internships = client.list("internships")
        skills = client.list("skills")
        certifications = client.list("certifications")
    except (ApiError, httpx.HTTPError) as e:
        logger.error("Error fetching dashboard data: %s", e)
        return Dashboard()
    return build_dashboard(internships, skills, certifications)


def render_dashboard(dashboard: Dashboard) -> str:
    """Plain-text dashboard: stat counts, then the three preview sections."""
    stats = dashboard.stats
    lines = [
        f"Internships Completed: {stats.internships}",
        f"Active Skills: {stats.skills}",
        f"Certifications Earned: {stats.certifications}",
        f"Currently Learning: {stats.learning}",
        "",
        "Recent Internships",
    ]
    if not dashboard.internships:
        lines.append("  No internships yet. Add your first one!")
    for internship in dashboard.internships:
        status = "Completed" if internship.get("status") == "completed" else "Ongoing"
        lines.append(f"  {internship.get('company')} | {internship.get('role')} | "
                     f"{format_duration(internship)} | {status}")

    lines += ["", "Top Skills"]
    if not dashboard.skills:
        lines.append("  No skills added yet.")
    for skill in dashboard.skills:
        lines.append(f"  {skill.get('name')} {proficiency_dots(skill.get('proficiency'))} {skill.get('status')}")

    lines += ["", "Recent Certifications"]
    if not dashboard.certifications:
        lines.append("  No certifications yet.")
    for cert in dashboard.certifications:
        lines.append(f"  {cert.get('name')} ({cert.get('platform')} • {format_date(cert.get('completionDate'))})")
    return "\n".join(lines)
