from cardsmith.store.seed import DEFAULT_SEED, SeedData
from cardsmith.store.store import Clock, Store, to_base36, utc_now

__all__ = [
    "DEFAULT_SEED",
    "Clock",
    "SeedData",
    "Store",
    "to_base36",
    "utc_now",
]
