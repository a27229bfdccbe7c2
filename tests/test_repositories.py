"""Tests for the key-value store and record repositories."""

import asyncio
import json

from nutriplan.db import KeyValueStore, StateRepository
from nutriplan.db.engine import DIET_KEY, HISTORY_KEY, LANGUAGE_KEY, PROFILE_KEY
from nutriplan.models.diet import WeeklyDiet
from nutriplan.models.progress import ProgressEntry
from nutriplan.models.user_profile import Language


class TestKeyValueStore:
    def test_set_get_overwrite(self, temp_db_path):
        async def run():
            store = KeyValueStore(temp_db_path)
            assert await store.get("missing") is None
            await store.set("k", "one")
            await store.set("k", "two")
            return await store.get("k"), await store.keys()

        value, keys = asyncio.run(run())
        assert value == "two"
        assert keys == ["k"]

    def test_delete_counts_rows(self, temp_db_path):
        async def run():
            store = KeyValueStore(temp_db_path)
            await store.set("a", "1")
            await store.set("b", "2")
            return await store.delete("a", "b", "c"), await store.keys()

        removed, keys = asyncio.run(run())
        assert removed == 2
        assert keys == []


class TestStateRepository:
    def test_profile_round_trip(self, temp_db_path, sample_profile):
        async def run():
            repo = StateRepository(temp_db_path)
            await repo.profiles.save(sample_profile)
            return await StateRepository(temp_db_path).profiles.get()

        assert asyncio.run(run()) == sample_profile

    def test_diet_round_trip_is_identical(self, temp_db_path, plan_data):
        async def run():
            repo = StateRepository(temp_db_path)
            await repo.diets.save(WeeklyDiet.from_dict(plan_data))
            return await repo.diets.get()

        assert asyncio.run(run()).to_dict() == plan_data

    def test_records_use_versioned_envelope(self, temp_db_path, sample_profile):
        async def run():
            repo = StateRepository(temp_db_path)
            await repo.profiles.save(sample_profile)
            return await repo.store.get(PROFILE_KEY)

        envelope = json.loads(asyncio.run(run()))
        assert envelope["version"] == 1
        assert envelope["data"]["age"] == 42

    def test_history_append(self, temp_db_path):
        async def run():
            repo = StateRepository(temp_db_path)
            await repo.history.append(ProgressEntry("2024-01-01T09:00:00", 80, 90, 26.1))
            await repo.history.append(ProgressEntry("2024-02-01T09:00:00", 78, 88, 25.5))
            return await repo.history.list_all()

        history = asyncio.run(run())
        assert [e.weight for e in history] == [80, 78]

    def test_language_default_and_set(self, temp_db_path):
        async def run():
            repo = StateRepository(temp_db_path)
            before = await repo.settings.get_language(Language.EN)
            await repo.settings.set_language(Language.ES)
            return before, await repo.settings.get_language(Language.EN)

        assert asyncio.run(run()) == (Language.EN, Language.ES)

    def test_malformed_records_load_empty(self, temp_db_path):
        async def run():
            repo = StateRepository(temp_db_path)
            await repo.store.set(PROFILE_KEY, "{not json")
            await repo.store.set(HISTORY_KEY, json.dumps({"version": 99, "data": []}))
            await repo.store.set(DIET_KEY, json.dumps({"version": 1, "data": {"plan": "x"}}))
            await repo.store.set(LANGUAGE_KEY, json.dumps({"version": 1, "data": "fr"}))
            return (
                await repo.profiles.get(),
                await repo.history.list_all(),
                await repo.diets.get(),
                await repo.settings.get_language(),
            )

        assert asyncio.run(run()) == (None, [], None, Language.ES)

    def test_short_stored_plan_is_discarded(self, temp_db_path, plan_data):
        plan_data["plan"] = plan_data["plan"][:3]

        async def run():
            repo = StateRepository(temp_db_path)
            await repo.store.set(DIET_KEY, json.dumps({"version": 1, "data": plan_data}))
            return await repo.diets.get()

        assert asyncio.run(run()) is None

    def test_clear_user_data_keeps_language(self, temp_db_path, sample_profile, plan_data):
        async def run():
            repo = StateRepository(temp_db_path)
            await repo.profiles.save(sample_profile)
            await repo.history.append(ProgressEntry("2024-01-01T09:00:00", 80, 90, 26.1))
            await repo.diets.save(WeeklyDiet.from_dict(plan_data))
            await repo.settings.set_language(Language.EN)
            removed = await repo.clear_user_data()
            return removed, await repo.store.keys()

        removed, keys = asyncio.run(run())
        assert removed == 3
        assert keys == [LANGUAGE_KEY]
