import pytest
from datetime import datetime

from gallery_admin.schemas.statistics import GuestbookEntry, MediaItem
from gallery_admin.services.statistics_service import (
    calculate_enhanced_statistics,
    format_percentage,
    format_storage_size,
)


def media(id, type="image", author=None, reactions=None, created_at=None, **fields):
    return MediaItem(
        id=id,
        url=f"https://cdn.example.com/{id}.jpg",
        type=type,
        author=author,
        reactions=reactions or {},
        # Naive timestamps are bucketed as given
        created_at=created_at or datetime(2024, 6, 15, 14, 30),
        **fields,
    )


def message(id):
    return GuestbookEntry(
        id=id, author="Tante Marie", text="Bravo !", created_at=datetime(2024, 6, 15)
    )


def test_counts_and_uploaders():
    stats = calculate_enhanced_statistics(
        [
            media("1", author="A", reactions={"heart": 2}),
            media("2", type="video", author="A"),
            media("3", author="B"),
        ],
        [message("m1")],
    )

    assert stats.total_photos == 2
    assert stats.total_videos == 1
    assert stats.total_media == 3
    assert stats.total_messages == 1
    assert stats.total_reactions == 2
    assert stats.unique_uploaders == 2

    a, b = stats.top_uploaders
    assert (a.name, a.total_count, a.photo_count, a.video_count) == ("A", 2, 1, 1)
    assert a.total_reactions == 2
    assert a.percentage == pytest.approx(66.67, abs=0.01)
    assert (b.name, b.total_count) == ("B", 1)
    assert b.percentage == pytest.approx(33.33, abs=0.01)


def test_zero_media():
    stats = calculate_enhanced_statistics([], [])

    assert stats.total_media == 0
    assert stats.photo_video_ratio.photo_percentage == 0
    assert stats.photo_video_ratio.video_percentage == 0
    assert stats.top_uploaders == []
    assert stats.reaction_breakdown == []
    assert stats.most_reacted_photos == []
    assert stats.peak_upload_day == "N/A"
    assert stats.peak_upload_count == 0
    assert stats.peak_upload_hour == "00:00"
    assert len(stats.uploads_by_hour) == 24


def test_storage_estimate():
    items = [media(str(i)) for i in range(3)] + [
        media(f"v{i}", type="video") for i in range(20)
    ]

    stats = calculate_enhanced_statistics(items, [])

    # 3 * 3 MB + 20 * 50 MB
    assert stats.estimated_storage_mb == 1009.0
    assert stats.estimated_storage_gb == 0.99


def test_favorites_are_summed():
    stats = calculate_enhanced_statistics(
        [media("1", favorite_count=3), media("2"), media("3", favorite_count=1)], []
    )

    assert stats.total_favorites == 4


def test_reaction_breakdown():
    stats = calculate_enhanced_statistics(
        [
            media("1", reactions={"heart": 3, "wow": 1}),
            media("2", reactions={"heart": 1, "clap": 2}),
            media("3", reactions={"laugh": 1}),
        ],
        [],
    )

    breakdown = stats.reaction_breakdown
    assert [r.type for r in breakdown][:2] == ["heart", "clap"]
    assert breakdown[0].count == 4
    assert breakdown[0].emoji == "❤️"
    assert sum(r.percentage for r in breakdown) == pytest.approx(100)


def test_most_reacted_is_stable_top_five():
    items = [
        media("low", reactions={"heart": 1}),
        media("tie-1", reactions={"heart": 5}),
        media("none"),
        media("tie-2", reactions={"wow": 5}),
        media("top", reactions={"heart": 9}),
        media("mid", reactions={"clap": 3}),
        media("tie-3", reactions={"love": 2, "laugh": 3}),
    ]

    stats = calculate_enhanced_statistics(items, [])

    assert [m.id for m in stats.most_reacted_photos] == [
        "top",
        "tie-1",
        "tie-2",
        "tie-3",
        "mid",
    ]


def test_anonymous_uploader():
    stats = calculate_enhanced_statistics([media("1"), media("2", author="")], [])

    [uploader] = stats.top_uploaders
    assert uploader.name == "Anonymous"
    assert uploader.total_count == 2


def test_day_and_hour_buckets():
    items = [
        media("1", created_at=datetime(2024, 6, 16, 9, 5)),
        media("2", type="video", created_at=datetime(2024, 6, 15, 21, 0)),
        media("3", created_at=datetime(2024, 6, 15, 21, 45)),
    ]

    stats = calculate_enhanced_statistics(items, [])

    assert [d.date for d in stats.uploads_by_day] == ["2024-06-15", "2024-06-16"]
    first_day = stats.uploads_by_day[0]
    assert (first_day.count, first_day.photos, first_day.videos) == (2, 1, 1)
    assert first_day.display_date == "15 juin"

    assert [h.hour for h in stats.uploads_by_hour] == list(range(24))
    assert stats.uploads_by_hour[21].count == 2
    assert stats.uploads_by_hour[9].display_hour == "09:00"

    assert stats.peak_upload_day == "15 juin"
    assert stats.peak_upload_count == 2
    assert stats.peak_upload_hour == "21:00"


def test_peak_day_ties_keep_earliest():
    items = [
        media("1", created_at=datetime(2024, 6, 16, 10)),
        media("2", created_at=datetime(2024, 6, 15, 18)),
    ]

    stats = calculate_enhanced_statistics(items, [])

    assert stats.peak_upload_day == "15 juin"
    assert stats.peak_upload_hour == "10:00"


def test_inputs_are_not_mutated():
    items = [media("1", author="A", reactions={"heart": 2})]
    snapshot = [item.model_dump() for item in items]

    calculate_enhanced_statistics(items, [])

    assert [item.model_dump() for item in items] == snapshot


def test_storage_aliases_on_the_wire():
    data = calculate_enhanced_statistics([media("1")], []).to_json_dict()

    assert data["estimatedStorageMB"] == 3.0
    assert data["estimatedStorageGB"] == 0.0
    assert data["photoVideoRatio"]["photoPercentage"] == 100


@pytest.mark.parametrize(
    "mb, expected",
    [(0, "0 MB"), (2.5, "3 MB"), (1023.4, "1023 MB"), (1536, "1.50 GB")],
)
def test_format_storage_size(mb, expected):
    assert format_storage_size(mb) == expected


def test_format_percentage():
    assert format_percentage(66.666) == "67%"
    assert format_percentage(12.5) == "13%"


def test_aware_timestamps_are_bucketed_by_local_day():
    created = datetime.fromisoformat("2024-06-15T23:30:00+00:00")

    stats = calculate_enhanced_statistics([media("1", created_at=created)], [])

    local = created.astimezone()
    [day] = stats.uploads_by_day
    assert day.date == local.date().isoformat()
    assert stats.uploads_by_hour[local.hour].count == 1
