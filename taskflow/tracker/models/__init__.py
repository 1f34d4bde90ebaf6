# ============================================
# tracker/models/__init__.py
# ============================================
from .project import Project
from .ticket import Ticket
from .comment import Comment

__all__ = [
    'Project',
    'Ticket',
    'Comment',
]
