import json

import httpx

from pool_passport.catalog import load_locations, parse_locations

POOLS = [
    {"id": "woolwich", "name": "Woolwich Baths", "lat": -33.8394, "lng": 151.1711},
    {"id": "balmain", "name": "Dawn Fraser Baths", "lat": -33.8536, "lng": 151.1743, "suburb": "Balmain"},
]


def test_load_from_file(tmp_path):
    path = tmp_path / "pools.json"
    path.write_text(json.dumps(POOLS), encoding="utf-8")
    locations = load_locations(str(path))
    assert [p.id for p in locations] == ["woolwich", "balmain"]
    assert locations[1].suburb == "Balmain"


def test_load_accepts_pools_object(tmp_path):
    path = tmp_path / "pools.json"
    path.write_text(json.dumps({"pools": POOLS}), encoding="utf-8")
    assert len(load_locations(str(path))) == 2


def test_missing_or_broken_catalog_is_empty(tmp_path, capsys):
    assert load_locations(str(tmp_path / "missing.json")) == []
    broken = tmp_path / "broken.json"
    broken.write_text("[{", encoding="utf-8")
    assert load_locations(str(broken)) == []
    assert "Error loading pools" in capsys.readouterr().out


def test_invalid_and_duplicate_entries_skipped():
    data = POOLS + [
        {"id": "woolwich", "name": "Again", "lat": 0, "lng": 0},
        {"id": "nolat", "name": "No Coordinates"},
        "not a pool",
    ]
    assert [p.id for p in parse_locations(data)] == ["woolwich", "balmain"]


def test_load_from_url():
    def handler(request):
        assert request.url.path == "/pools.json"
        return httpx.Response(200, json=POOLS)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    locations = load_locations("https://example.com/pools.json", client=client)
    assert len(locations) == 2


def test_url_failure_is_empty():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(503)))
    assert load_locations("https://example.com/pools.json", client=client) == []
