import asyncio

import pytest

from database import GameDatabase, RecordNotFound, RecordStore, StoreUnavailable


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def store():
    store = RecordStore("items", [{"id": 1, "name": "apple", "tags": ["a"]}], latency=0)
    yield store
    store.close()


def test_seeded_records(store):
    records = run(store.get_all())
    assert records == [{"id": 1, "name": "apple", "tags": ["a"]}]


def test_get_by_id(store):
    assert run(store.get_by_id(1))["name"] == "apple"


def test_get_missing_raises(store):
    with pytest.raises(RecordNotFound) as info:
        run(store.get_by_id(42))
    assert info.value.record_id == 42
    assert isinstance(info.value, KeyError)
    assert "items" in str(info.value)


def test_create_assigns_id_and_timestamp(store):
    record = run(store.create({"id": 99, "name": "pear"}))
    assert record["id"] == 2
    assert record["name"] == "pear"
    assert "createdAt" in record
    assert len(run(store.get_all())) == 2


def test_update_merges(store):
    record = run(store.update(1, {"tags": ["a", "b"], "color": "red"}))
    assert record["name"] == "apple"
    assert record["tags"] == ["a", "b"]
    assert record["color"] == "red"
    assert "updatedAt" in record
    assert run(store.get_by_id(1)) == record


def test_update_missing_raises(store):
    with pytest.raises(RecordNotFound):
        run(store.update(7, {"name": "x"}))


def test_delete(store):
    removed = run(store.delete(1))
    assert removed["name"] == "apple"
    assert run(store.get_all()) == []
    with pytest.raises(RecordNotFound):
        run(store.delete(1))


def test_records_are_copies(store):
    record = run(store.get_by_id(1))
    record["tags"].append("mutated")
    assert run(store.get_by_id(1))["tags"] == ["a"]


def test_failures_are_simulated():
    store = RecordStore("flaky", latency=0, failure_rate=1.0)
    with pytest.raises(StoreUnavailable):
        run(store.get_all())
    store.close()


def test_latency_per_operation():
    store = RecordStore("slow", latency={"get_all": 30})

    async def timed():
        loop = asyncio.get_running_loop()
        started = loop.time()
        await store.get_all()
        return loop.time() - started

    assert run(timed()) >= 0.025
    store.close()


def test_game_database_is_seeded():
    database = GameDatabase(latency=0)
    game_states = run(database.game_states.get_all())
    snakes = run(database.snakes.get_all())
    foods = run(database.foods.get_all())
    assert game_states[0]["highScore"] == 0
    assert snakes[0]["segments"] == [{"x": 10, "y": 10}]
    assert foods[0]["type"] == "normal"
    database.close()


def test_databases_are_isolated():
    first = GameDatabase(latency=0)
    second = GameDatabase(latency=0)
    run(first.game_states.create({"score": 5}))
    assert len(run(first.game_states.get_all())) == 2
    assert len(run(second.game_states.get_all())) == 1
    first.close()
    second.close()
