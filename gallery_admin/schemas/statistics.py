from pydantic import Field
from typing import Dict, List, Optional
from datetime import datetime
from .common import CamelModel
from ..models.enums import MediaType


class MediaItem(CamelModel):
    id: str
    url: str
    thumbnail_url: Optional[str] = None
    type: MediaType
    caption: Optional[str] = None
    author: Optional[str] = None
    created_at: datetime
    # reaction type -> count
    reactions: Dict[str, int] = Field(default_factory=dict)
    album_ids: List[str] = Field(default_factory=list)
    favorite_count: Optional[int] = None

    @property
    def total_reactions(self) -> int:
        return sum(self.reactions.values())


class GuestbookEntry(CamelModel):
    id: str
    author: str
    text: str
    relation: Optional[str] = None
    created_at: datetime


class UploaderStats(CamelModel):
    name: str
    photo_count: int = 0
    video_count: int = 0
    total_count: int = 0
    total_reactions: int = 0
    percentage: float = 0


class DayUpload(CamelModel):
    date: str
    display_date: str
    count: int = 0
    photos: int = 0
    videos: int = 0


class HourUpload(CamelModel):
    hour: int
    display_hour: str
    count: int = 0


class ReactionStats(CamelModel):
    type: str
    emoji: str
    count: int
    percentage: float


class PhotoVideoRatio(CamelModel):
    photos: int
    videos: int
    photo_percentage: float
    video_percentage: float


class EnhancedStatistics(CamelModel):
    # Basic counts
    total_photos: int
    total_videos: int
    total_media: int
    total_messages: int
    total_favorites: int
    total_reactions: int

    # Storage
    estimated_storage_mb: float = Field(..., alias="estimatedStorageMB")
    estimated_storage_gb: float = Field(..., alias="estimatedStorageGB")

    # User activity
    top_uploaders: List[UploaderStats]
    unique_uploaders: int

    # Timeline
    uploads_by_day: List[DayUpload]
    uploads_by_hour: List[HourUpload]

    # Reactions
    reaction_breakdown: List[ReactionStats]
    most_reacted_photos: List[MediaItem]

    photo_video_ratio: PhotoVideoRatio

    # Peak times
    peak_upload_day: str
    peak_upload_hour: str
    peak_upload_count: int


class EnhancedStatisticsRequest(CamelModel):
    media: List[MediaItem] = Field(default_factory=list)
    messages: List[GuestbookEntry] = Field(default_factory=list)
