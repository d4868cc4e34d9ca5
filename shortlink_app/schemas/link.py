from pydantic import BaseModel, Field, computed_field, ConfigDict
from typing import Optional
from datetime import datetime
from shortlink_app.config import settings


class LinkCreate(BaseModel):
    url: str = Field(..., description="Target URL; https:// is assumed when no scheme is given")
    code: Optional[str] = Field(
        None,
        description="Custom short code, 6-8 letters or digits. Generated when omitted."
    )


class LinkResponse(BaseModel):
    """Response schema that serializes the SQLAlchemy Link model

    - from_attributes=True reads straight from the ORM instance
    - short_url is derived from the configured public origin
    """
    id: int
    code: str
    url: str
    click_count: int
    created_at: datetime
    last_clicked_at: Optional[datetime] = None

    @computed_field
    @property
    def short_url(self) -> str:
        return f"{settings.base_url.rstrip('/')}/{self.code}"

    model_config = ConfigDict(from_attributes=True)


class DeleteResponse(BaseModel):
    ok: bool = True


class HealthResponse(BaseModel):
    ok: bool
    version: str
    uptime: int
    startedAt: datetime
    now: datetime
