from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class TaskCategory:
    id: str
    name: str
    ai_savings: float
    description: str


TASK_CATEGORIES: Tuple[TaskCategory, ...] = (
    TaskCategory("email", "Email Management", 0.7, "Reading, writing, and organizing emails"),
    TaskCategory("writing", "Content Writing", 0.6, "Creating documents, reports, and content"),
    TaskCategory("research", "Research & Analysis", 0.8, "Information gathering and analysis"),
    TaskCategory("meetings", "Meetings & Calls", 0.5, "Video calls, meetings, and preparation"),
    TaskCategory("data", "Data Processing", 0.7, "Data entry, analysis, and reporting"),
    TaskCategory("planning", "Planning & Strategy", 0.5, "Project planning and strategic thinking"),
    TaskCategory("creative", "Creative Work", 0.4, "Design, brainstorming, and creative tasks"),
    TaskCategory("admin", "Administrative", 0.8, "Filing, organizing, and routine tasks"),
)

CATEGORIES_BY_ID: Dict[str, TaskCategory] = {category.id: category for category in TASK_CATEGORIES}
