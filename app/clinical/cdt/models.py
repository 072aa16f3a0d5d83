"""CDT SQLAlchemy models.

The table mirrors the bundled reference CSV so the lookup can be served from the
database when `CDT_SOURCE=database`.
"""

from sqlalchemy import Column, String

from app.core.db import Base


class CdtCode(Base):
    __tablename__ = "cdt_codes"

    code = Column(String(5), primary_key=True, index=True)
    description = Column(String, nullable=False)
    category = Column(String(64), nullable=True, index=True)
