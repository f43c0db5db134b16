from pathlib import Path

# Repo-root conventional directories/files (overrideable via tagcore.yaml)
CONFIG_DIR = Path("configs")
CORE_CONFIG_FILE = CONFIG_DIR / "tagcore.yaml"

DATA_DIR = Path("data")
SAMPLE_TAXONOMY_FILE = DATA_DIR / "sample-taxonomy.json"
