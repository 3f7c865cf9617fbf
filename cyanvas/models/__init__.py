"""ORM Models — SQLAlchemy declarative models for the chart domain.

Invariants:
    - All models inherit from Base (db/base.py)
    - Chart is the aggregate root; resources, likes, tags and co-authors are
      scoped by chart_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from cyanvas.models.user import User  # noqa: F401
from cyanvas.models.chart import Chart  # noqa: F401
from cyanvas.models.co_author import CoAuthor  # noqa: F401
from cyanvas.models.file_resource import FileResource  # noqa: F401
from cyanvas.models.like import Like  # noqa: F401
from cyanvas.models.tag import Tag  # noqa: F401
