from pathlib import Path

from basket.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth).
# Repositories read these attributes at call time so tests can repoint them.
SHOPS_FILE: Path = DATA_DIR / 'shops.json'
PRODUCTS_FILE: Path = DATA_DIR / 'products.json'
OFFERS_FILE: Path = DATA_DIR / 'offers.json'
SHOPPING_LISTS_FILE: Path = DATA_DIR / 'shopping_lists.json'


def use_data_dir(data_dir: Path) -> None:
    """Point every data file at ``data_dir``."""
    global DATA_DIR, SHOPS_FILE, PRODUCTS_FILE, OFFERS_FILE, SHOPPING_LISTS_FILE
    data_dir = Path(data_dir)
    DATA_DIR = data_dir
    SHOPS_FILE = data_dir / 'shops.json'
    PRODUCTS_FILE = data_dir / 'products.json'
    OFFERS_FILE = data_dir / 'offers.json'
    SHOPPING_LISTS_FILE = data_dir / 'shopping_lists.json'


__all__ = ['DATA_DIR', 'SHOPS_FILE', 'PRODUCTS_FILE', 'OFFERS_FILE', 'SHOPPING_LISTS_FILE', 'use_data_dir']
