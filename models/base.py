from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import declarative_base, declared_attr

Base = declarative_base()


class VersionedMixin:
    """
    Columns shared by every per-version entity table.

    Rows belong to exactly one FNDDS release and are replaced wholesale
    when that release is loaded again.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)

    @declared_attr
    def version_id(cls):
        return Column(Integer, ForeignKey("fndds_version.id"), nullable=False, index=True)
