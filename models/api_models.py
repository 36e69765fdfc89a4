# models/api_models.py
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.lang_utils import normalize_language_key

TimeOfDay = Literal["night", "morning", "midday", "afternoon", "evening", "late-night"]


class Meta(BaseModel):
    model_config = ConfigDict(extra="allow")

    session_id: str = Field(..., description="kiosk/browser session id", min_length=1)

    language: str = "th"
    browser_language: Optional[str] = None

    # branch code from the QR link, e.g. "BKK0123"
    br: Optional[str] = None
    pos: Optional[str] = None

    # filled by the client's location/weather lookups
    city: Optional[str] = None
    weather: Optional[str] = None
    temp: Optional[float] = None
    time_of_day: Optional[TimeOfDay] = None

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, v):
        return normalize_language_key(v if isinstance(v, str) else None)

    @field_validator("time_of_day", mode="before")
    @classmethod
    def normalize_time_of_day(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or None
        return v


class GroupCard(BaseModel):
    id: str
    name: str
    category: str
    brand: str
    min_price: float
    original_min_price: Optional[float] = None
    image: str = ""
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    variant_count: int = 0


class MenuResponse(BaseModel):
    trace_id: str
    language: str
    store_number: Optional[str] = None
    groups: List[GroupCard]
    highlight_id: Optional[str] = None


class RecommendRequest(BaseModel):
    group_id: str = Field(..., min_length=1)
    meta: Meta


class RecommendationOut(BaseModel):
    type: Optional[str] = None
    size: Optional[str] = None
    sweetness: Optional[str] = None


class KnowledgeOut(BaseModel):
    main_flavor: str
    profile: List[str]
    base: str


class RecommendResponse(BaseModel):
    trace_id: str
    group_id: str
    name: str
    recommendation: RecommendationOut
    knowledge: Optional[KnowledgeOut] = None


class AddonIn(BaseModel):
    name: str = ""
    price: float = 0.0


class CartLineIn(BaseModel):
    group_id: str
    variant_code: str
    size: str = ""
    sweetness: str = ""
    addons: List[AddonIn] = Field(default_factory=list)
    price: float = 0.0
    quantity: int = Field(1, ge=1, le=50)


class FeedbackIn(BaseModel):
    type: Literal["like", "dislike"]
    message: Optional[str] = Field(None, max_length=500)


class EventRequest(BaseModel):
    action: str = Field(..., min_length=1, max_length=60)
    meta: Meta
    ai_followed: Optional[str] = None
    cart_line: Optional[CartLineIn] = None
    durations_ms: Optional[Dict[str, float]] = None
    feedback: Optional[FeedbackIn] = None


class EventResponse(BaseModel):
    trace_id: str
    ok: bool
    reason: Optional[str] = None


class SessionResponse(BaseModel):
    session_id: str
    started_at: str
