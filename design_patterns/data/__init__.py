"""Sample data files shipped with the catalog."""

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent
CATS_CSV = DATA_DIR / "cats.csv"
