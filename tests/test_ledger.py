import json

from pool_passport import config
from pool_passport.codec import StateCodec
from pool_passport.ledger import VisitLedger
from pool_passport.storage import MemoryStore


def test_claim_creates_and_persists_record(store, codec):
    ledger = VisitLedger(codec, known_ids=["a", "b"])
    record = ledger.claim("a", "02/01/2025")

    assert record.done is True
    assert record.date == "02/01/2025"
    assert ledger.is_visited("a")
    assert not ledger.is_visited("b")
    assert json.loads(store.get(config.VISITED_KEY)) == {"a": {"done": True, "date": "02/01/2025"}}


def test_claim_is_idempotent(store, codec):
    ledger = VisitLedger(codec)
    first = ledger.claim("a", "02/01/2025")
    stored = store.get(config.VISITED_KEY)

    for day in ("03/01/2025", "04/01/2025", "05/01/2025"):
        assert ledger.claim("a", day) == first
    assert store.get(config.VISITED_KEY) == stored
    assert ledger.count() == 1


def test_claim_unknown_id_is_noop(store, codec):
    ledger = VisitLedger(codec, known_ids=["a"])
    assert ledger.claim("zzz", "02/01/2025") is None
    assert ledger.count() == 0
    assert store.get(config.VISITED_KEY) is None


def test_stamps_stay_until_reset(codec):
    ledger = VisitLedger(codec)
    ledger.claim("a", "01/01/2025")
    ledger.claim("b", "02/01/2025")
    ledger.claim("a", "03/01/2025")
    assert ledger.is_visited("a") and ledger.is_visited("b")

    ledger.reset()
    assert ledger.count() == 0
    assert not ledger.is_visited("a")
    assert ledger.records() == {}


def test_reset_persists_empty_ledger(store, codec):
    ledger = VisitLedger(codec)
    ledger.claim("a", "01/01/2025")
    ledger.reset()
    assert json.loads(store.get(config.VISITED_KEY)) == {}


def test_ledger_rehydrates_from_store(store):
    VisitLedger(StateCodec(store)).claim("b", "2025-01-02")
    ledger = VisitLedger(StateCodec(store))
    assert ledger.is_visited("b")
    assert ledger.get("b").date == "2025-01-02"


def test_undone_records_do_not_count():
    store = MemoryStore({config.VISITED_KEY: json.dumps({"a": {"done": False, "date": ""}})})
    ledger = VisitLedger(StateCodec(store))
    assert not ledger.is_visited("a")
    assert ledger.count() == 0
    # An undone record can still be claimed
    assert ledger.claim("a", "01/01/2025").done


def test_completion_reached(codec):
    ledger = VisitLedger(codec)
    assert not ledger.completion_reached(0)
    ledger.claim("a", "01/01/2025")
    ledger.claim("b", "02/01/2025")
    assert not ledger.completion_reached(3)
    ledger.claim("c", "03/01/2025")
    assert ledger.completion_reached(3)
    # Querying again does not change anything
    assert ledger.completion_reached(3)
    ledger.reset()
    assert not ledger.completion_reached(3)
