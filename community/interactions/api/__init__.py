"""
Interaction API controllers.

- InteractionsController: likes, favorites and comments on any registered object type
"""

from community.interactions.api.interactions import InteractionsController

__all__ = [
    "InteractionsController",
]
