"""Table registry and shared response envelopes.

Importing this package registers every ``table=True`` model on
``SQLModel.metadata``. ``app.db.engine.init_db`` and ``app/alembic/env.py``
both import it before they touch the schema.
"""

from app.user.models import User  # noqa: F401
