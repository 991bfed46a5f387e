from datetime import datetime
from typing import Dict, List, Sequence
from ..models.enums import MediaType
from ..schemas.statistics import (
    DayUpload,
    EnhancedStatistics,
    GuestbookEntry,
    HourUpload,
    MediaItem,
    PhotoVideoRatio,
    ReactionStats,
    UploaderStats,
)
from ..utils.constants import (
    FRENCH_SHORT_MONTHS,
    REACTION_EMOJIS,
    StatisticsConstants,
)
from ..utils.service_helpers import percentage_of, round_half_up


def _local_time(value: datetime) -> datetime:
    """Aware timestamps are bucketed in local time, naive ones as given"""
    if value.tzinfo is not None:
        return value.astimezone()
    return value


def _display_date(value: datetime) -> str:
    return f"{value.day} {FRENCH_SHORT_MONTHS[value.month - 1]}"


def _display_hour(hour: int) -> str:
    return f"{hour:02d}:00"


def calculate_enhanced_statistics(
    media: Sequence[MediaItem], messages: Sequence[GuestbookEntry]
) -> EnhancedStatistics:
    """Derive the dashboard analytics from a wedding's media and guestbook"""

    # Basic counts
    total_photos = sum(1 for m in media if m.type == MediaType.IMAGE)
    total_videos = sum(1 for m in media if m.type == MediaType.VIDEO)
    total_media = len(media)

    total_favorites = sum(m.favorite_count or 0 for m in media)
    total_reactions = sum(m.total_reactions for m in media)

    # Storage estimation
    estimated_storage_mb = (
        total_photos * StatisticsConstants.AVG_PHOTO_SIZE_MB
        + total_videos * StatisticsConstants.AVG_VIDEO_SIZE_MB
    )
    estimated_storage_gb = estimated_storage_mb / 1024

    # Uploaders, days, hours and reaction types in one pass
    uploaders: Dict[str, UploaderStats] = {}
    days: Dict[str, DayUpload] = {}
    hour_counts = [0] * 24
    reaction_counts: Dict[str, int] = {}

    for item in media:
        is_photo = item.type == MediaType.IMAGE
        name = item.author or StatisticsConstants.UNKNOWN_UPLOADER

        uploader = uploaders.setdefault(name, UploaderStats(name=name))
        if is_photo:
            uploader.photo_count += 1
        else:
            uploader.video_count += 1
        uploader.total_count += 1
        uploader.total_reactions += item.total_reactions

        created = _local_time(item.created_at)
        # Keyed by local calendar day, not UTC date
        date_key = created.date().isoformat()
        day = days.setdefault(
            date_key, DayUpload(date=date_key, display_date=_display_date(created))
        )
        day.count += 1
        if is_photo:
            day.photos += 1
        else:
            day.videos += 1

        hour_counts[created.hour] += 1

        for reaction_type, count in item.reactions.items():
            reaction_counts[reaction_type] = reaction_counts.get(reaction_type, 0) + count

    for uploader in uploaders.values():
        uploader.percentage = percentage_of(uploader.total_count, total_media)
    top_uploaders = sorted(
        uploaders.values(), key=lambda u: u.total_count, reverse=True
    )

    uploads_by_day = sorted(days.values(), key=lambda d: d.date)
    uploads_by_hour = [
        HourUpload(hour=hour, display_hour=_display_hour(hour), count=count)
        for hour, count in enumerate(hour_counts)
    ]

    reaction_breakdown = sorted(
        (
            ReactionStats(
                type=reaction_type,
                emoji=REACTION_EMOJIS.get(reaction_type, ""),
                count=count,
                percentage=percentage_of(count, total_reactions),
            )
            for reaction_type, count in reaction_counts.items()
        ),
        key=lambda r: r.count,
        reverse=True,
    )

    # sorted() is stable: equal totals keep their original order
    most_reacted_photos = sorted(media, key=lambda m: m.total_reactions, reverse=True)[
        : StatisticsConstants.MOST_REACTED_LIMIT
    ]

    photo_video_ratio = PhotoVideoRatio(
        photos=total_photos,
        videos=total_videos,
        photo_percentage=percentage_of(total_photos, total_media),
        video_percentage=percentage_of(total_videos, total_media),
    )

    # Peak times; the first bucket wins ties
    peak_day = None
    for day in uploads_by_day:
        if peak_day is None or day.count > peak_day.count:
            peak_day = day

    peak_hour = uploads_by_hour[0]
    for hour in uploads_by_hour:
        if hour.count > peak_hour.count:
            peak_hour = hour

    return EnhancedStatistics(
        total_photos=total_photos,
        total_videos=total_videos,
        total_media=total_media,
        total_messages=len(messages),
        total_favorites=total_favorites,
        total_reactions=total_reactions,
        estimated_storage_mb=round_half_up(estimated_storage_mb, 1),
        estimated_storage_gb=round_half_up(estimated_storage_gb, 2),
        top_uploaders=top_uploaders,
        unique_uploaders=len(uploaders),
        uploads_by_day=uploads_by_day,
        uploads_by_hour=uploads_by_hour,
        reaction_breakdown=reaction_breakdown,
        most_reacted_photos=list(most_reacted_photos),
        photo_video_ratio=photo_video_ratio,
        peak_upload_day=(
            peak_day.display_date if peak_day else StatisticsConstants.NO_PEAK_DAY
        ),
        peak_upload_hour=peak_hour.display_hour,
        peak_upload_count=peak_day.count if peak_day else 0,
    )


def format_storage_size(mb: float) -> str:
    if mb < 1024:
        return f"{round_half_up(mb):.0f} MB"
    return f"{mb / 1024:.2f} GB"


def format_percentage(value: float) -> str:
    return f"{round_half_up(value):.0f}%"
