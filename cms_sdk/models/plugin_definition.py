from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, String

from cms_sdk.database import Base


class PluginDefinition(Base):
    """Activation record for a render plugin id."""

    __tablename__ = "plugin_definitions"

    id = Column(String(100), primary_key=True)
    active = Column(Boolean, nullable=False, default=True)
    description = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    __table_args__ = (Index("idx_plugin_definitions_active", "active"),)
