"""
Open source project controllers.

Current controllers:
- ProjectController: list, new, modify, detail and uri check pages
"""

from community.projects.api.projects import ProjectController

__all__ = [
    "ProjectController",
]
