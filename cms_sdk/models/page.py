from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String, UniqueConstraint

from cms_sdk.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PageRecord(Base):
    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    slug = Column(String(255), index=True, nullable=False)
    version = Column(String(32), nullable=False, default="1.0.0")
    meta = Column(JSON, nullable=False, default=dict)
    root = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("slug", name="unique_page_slug"),)

    def to_page(self) -> dict:
        return {"version": self.version, "meta": dict(self.meta or {}), "root": self.root}
