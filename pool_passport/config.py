"""Global configuration and defaults for the pool passport."""
from pathlib import Path

# Catalog settings
catalog_source: str = "pools.json"

# Storage settings
state_path: Path = Path.home() / ".pool_passport" / "state.json"

# Persisted keys (one slot per piece of state)
VISITED_KEY: str = "pool_passport.visited"
SELECTION_KEY: str = "pool_passport.selected_index"
STAMPS_PAGE_KEY: str = "pool_passport.stamps_page"

# Stamps view settings
page_size: int = 2

# Clock settings
timezone: str = "Australia/Sydney"
timezone_from_location: bool = False
