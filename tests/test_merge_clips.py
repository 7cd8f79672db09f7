from daylog.merge.clips import merge_clips, merge_sound_clips
from daylog.schemas import DayLog, LogOptions, ProjectContext, SoundClip


def test_each_clip_appears_once_keyed_by_name(day_one, options):
    merged = merge_clips(day_one, options)

    assert list(merged) == ["A001C001", "A001C002"]
    assert all(record["clip"] == name for name, record in merged.items())


def test_all_passes_layer_onto_one_record(day_one, options):
    record = merge_clips(day_one, options)["A001C001"]

    assert record["size"] == 1_000_000_000
    assert record["lens"] == "35mm"
    assert record["proxy"] == {
        "size": 100_000_000,
        "format": "mov",
        "codec": "ProRes Proxy",
        "resolution": "1920x1080",
    }
    assert record["scene"] == "1"
    assert record["take"] == "2"
    assert record["sound"] == ["S001"]


def test_clip_sync_never_creates_records(day_one, options):
    merged = merge_clips(day_one, options)

    assert "Z999" not in merged
    assert "scene" not in merged["A001C002"]


def test_tc_sync_merges_overlapping_rows_without_timecodes(day_one, options):
    merged = merge_clips(day_one, options)

    assert merged["A001C002"]["note"] == "good take"
    assert merged["A001C002"]["tc_start"] == "08:01:00:00"
    assert "note" not in merged["A001C001"]


def test_proxy_only_clip_gets_its_own_record(options):
    log = DayLog.model_validate(
        {
            "id": "D03",
            "day": 3,
            "date": "2025-06-03",
            "proxy": {"clips": [{"clip": "X001", "size": 10}]},
        }
    )

    merged = merge_clips(log, options)

    assert merged == {"X001": {"clip": "X001", "proxy": {"size": 10, "format": None, "codec": None, "resolution": None}}}


def test_duplicate_ocf_name_overwrites_fields(options):
    log = DayLog.model_validate(
        {
            "id": "D04",
            "day": 4,
            "date": "2025-06-04",
            "ocf": {
                "clips": [
                    {"clip": "A001C001", "size": 1, "lens": "35mm"},
                    {"clip": "A001C001", "size": 2},
                ]
            },
        }
    )

    merged = merge_clips(log, options)

    assert len(merged) == 1
    assert merged["A001C001"]["size"] == 2
    assert merged["A001C001"]["lens"] == "35mm"


def test_sound_pass_is_idempotent(day_one, options):
    merged = merge_clips(day_one, options)
    sound = day_one.sound.clips

    assert merge_sound_clips(merged, sound) == 0
    assert merged["A001C001"]["sound"] == ["S001"]


def test_sound_overlap_uses_whole_seconds(options):
    merged = {
        "A": {"clip": "A", "tc_start": "08:00:00:00", "tc_end": "08:00:10:00"},
        "B": {"clip": "B", "tc_start": "08:00:00:00", "tc_end": "08:00:05:00"},
    }
    sound = [
        SoundClip(clip="S1", size=1, tc_start="08:00:05:00", tc_end="08:00:15:00"),
        SoundClip(clip="S2", size=1, tc_start="08:00:06:00", tc_end="08:00:10:00"),
    ]

    assert merge_sound_clips(merged, sound) == 3
    assert merged["A"]["sound"] == ["S1", "S2"]
    assert merged["B"]["sound"] == ["S1"]


def test_match_flags_disable_passes(day_one, project_data):
    project = ProjectContext.model_validate({**project_data, "match_sound": False, "match_schema": False})
    merged = merge_clips(day_one, project.log_options())

    assert "sound" not in merged["A001C001"]
    assert "scene" not in merged["A001C001"]
    assert "note" not in merged["A001C002"]


def test_inactive_schemas_are_skipped(day_one):
    schemas = ProjectContext.model_validate(
        {
            "custom_schemas": [
                {"id": "notes", "order": 1, "sync": "tc", "active": False},
                {"id": "script", "order": 2, "sync": "clip"},
            ]
        }
    ).custom_schemas
    merged = merge_clips(day_one, LogOptions(schemas=tuple(schemas)))

    assert "note" not in merged["A001C002"]
    assert merged["A001C001"]["scene"] == "1"


def test_later_schema_order_wins_field_conflicts(day_one_data):
    day_one_data["custom"] = [
        {"schema": "late", "clips": [{"clip": "A001C001", "status": "late"}]},
        {"schema": "early", "clips": [{"clip": "A001C001", "status": "early"}]},
    ]
    schemas = ProjectContext.model_validate(
        {
            "custom_schemas": [
                {"id": "late", "order": 5, "sync": "clip"},
                {"id": "early", "order": 1, "sync": "clip"},
            ]
        }
    ).custom_schemas
    merged = merge_clips(DayLog.model_validate(day_one_data), LogOptions(schemas=tuple(schemas)))

    assert merged["A001C001"]["status"] == "late"
