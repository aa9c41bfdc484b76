"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from collab.db.models.user import UserRow
from collab.db.models.project import ProjectRow
from collab.db.models.vacancy import VacancyRow
from collab.db.models.join_request import JoinRequestRow
from collab.db.models.post import PostRow
from collab.db.models.chat import ChatRow, MessageRow
from collab.db.models.notification import NotificationRow

__all__ = [
    "UserRow",
    "ProjectRow",
    "VacancyRow",
    "JoinRequestRow",
    "PostRow",
    "ChatRow",
    "MessageRow",
    "NotificationRow",
]
