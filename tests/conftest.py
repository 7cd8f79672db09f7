from __future__ import annotations

import pytest

from daylog.core.cache import CacheService
from daylog.core.config import get_settings
from daylog.schemas import DayLog, ProjectContext


@pytest.fixture(autouse=True)
def configure_environment(monkeypatch):
    monkeypatch.setenv("DAYLOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("DAYLOG_DEFAULT_FPS", "24")
    monkeypatch.setenv("DAYLOG_ASSEMBLY_WORKERS", "1")
    monkeypatch.setenv("DAYLOG_CACHE_ENABLED", "true")
    monkeypatch.delenv("DAYLOG_FPS", raising=False)
    monkeypatch.delenv("DAYLOG_WORKERS", raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def cache() -> CacheService:
    return CacheService()


@pytest.fixture()
def project_data() -> dict:
    return {
        "project_name": "Night Shoot",
        "unit": "A",
        "custom_schemas": [
            {"id": "script", "order": 1, "sync": "clip"},
            {"id": "notes", "order": 2, "sync": "tc"},
        ],
        "custom_info": [{"director": "J. Doe"}],
    }


@pytest.fixture()
def project(project_data) -> ProjectContext:
    return ProjectContext.model_validate(project_data)


@pytest.fixture()
def day_one_data() -> dict:
    return {
        "id": "D01_250601",
        "day": 1,
        "date": "2025-06-01",
        "unit": "A",
        "ocf": {
            "clips": [
                {
                    "clip": "A001C001",
                    "size": 1_000_000_000,
                    "copies": [{"volume": "SHUTTLE_1"}, {"volume": "RAID", "hash": "abc"}],
                    "tc_start": "08:00:00:00",
                    "tc_end": "08:00:10:00",
                    "duration": "00:00:10:00",
                    "reel": "A001",
                    "fps": 24,
                    "lens": "35mm",
                },
                {
                    "clip": "A001C002",
                    "size": 2_000_000_000,
                    "copies": [{"volume": "SHUTTLE_1"}],
                    "tc_start": "08:01:00:00",
                    "tc_end": "08:01:20:00",
                    "duration": "00:00:20:00",
                    "reel": "A001",
                    "fps": 24,
                },
            ]
        },
        "proxy": {
            "clips": [
                {
                    "clip": "A001C001",
                    "size": 100_000_000,
                    "format": "mov",
                    "codec": "ProRes Proxy",
                    "resolution": "1920x1080",
                }
            ]
        },
        "sound": {
            "clips": [
                {
                    "clip": "S001",
                    "size": 50_000_000,
                    "tc_start": "08:00:05:00",
                    "tc_end": "08:00:15:00",
                }
            ]
        },
        "custom": [
            {
                "schema": "script",
                "clips": [
                    {"clip": "A001C001", "scene": "1", "take": "2"},
                    {"clip": "Z999", "scene": "9"},
                ],
            },
            {
                "schema": "notes",
                "log": {"weather": "sunny"},
                "clips": [
                    {"tc_start": "08:01:05:00", "tc_end": "08:01:06:00", "note": "good take"},
                ],
            },
        ],
    }


@pytest.fixture()
def day_two_data() -> dict:
    return {
        "id": "D02_250601",
        "day": 2,
        "date": "2025-06-02",
        "unit": "A",
        "ocf": {
            "clips": [
                {
                    "clip": "B001C001",
                    "size": 3_000_000_000,
                    "copies": [{"volume": "SHUTTLE_2"}],
                    "tc_start": "09:00:00:00",
                    "tc_end": "09:00:30:00",
                    "duration": "00:00:30:00",
                    "reel": "B001",
                    "fps": 25,
                }
            ]
        },
        "sound": {
            "clips": [
                {
                    "clip": "S010",
                    "size": 10_000_000,
                    "tc_start": "09:00:00:00",
                    "tc_end": "09:00:40:00",
                }
            ]
        },
        "custom": [{"schema": "notes", "log": {"weather": "rain"}}],
    }


@pytest.fixture()
def day_one(day_one_data) -> DayLog:
    return DayLog.model_validate(day_one_data)


@pytest.fixture()
def day_two(day_two_data) -> DayLog:
    return DayLog.model_validate(day_two_data)


@pytest.fixture()
def corpus(day_one, day_two) -> list[DayLog]:
    return [day_one, day_two]


@pytest.fixture()
def options(project):
    return project.log_options(default_fps=24)
