"""Pool catalog loading."""

import json
from pathlib import Path
from typing import List, Optional

import httpx
from pydantic import ValidationError

from .models import Location


def _fetch_text(source: str, client: Optional[httpx.Client] = None) -> str:
    if source.startswith(("http://", "https://")):
        if client is not None:
            response = client.get(source)
        else:
            with httpx.Client(timeout=30.0, follow_redirects=True) as own_client:
                response = own_client.get(source)
        response.raise_for_status()
        return response.text
    return Path(source).read_text(encoding="utf-8")


def parse_locations(data) -> List[Location]:
    """Build locations from decoded JSON, skipping invalid and duplicate entries."""
    # Handle both a bare list and {"pools": [...]}
    raw_pools = data.get("pools", []) if isinstance(data, dict) else data
    if not isinstance(raw_pools, list):
        raise ValueError("catalog must be a list of pools")

    locations: List[Location] = []
    seen_ids = set()
    for index, item in enumerate(raw_pools):
        try:
            location = Location.model_validate(item)
        except ValidationError as e:
            print(f"Skipping pool #{index}: {e.errors()[0]['msg']}")
            continue
        if location.id in seen_ids:
            print(f"Skipping duplicate pool id '{location.id}'")
            continue
        seen_ids.add(location.id)
        locations.append(location)
    return locations


def load_locations(source: str, client: Optional[httpx.Client] = None) -> List[Location]:
    """Load the catalog from a file path or URL.

    Never raises: on any failure the passport runs against an empty catalog.
    """
    try:
        data = json.loads(_fetch_text(str(source), client))
        locations = parse_locations(data)
    except (OSError, ValueError, httpx.HTTPError) as e:
        print(f"Error loading pools from {source}: {e}")
        return []
    print(f"Loaded {len(locations)} pools from {source}")
    return locations
