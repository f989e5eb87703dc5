import os

# everything the explorer writes goes here, set PHONOLOGY_EXPLORER_HOME to move it
STORAGE_DIR = os.environ.get("PHONOLOGY_EXPLORER_HOME", os.path.join(os.path.expanduser("~"), ".phonology_explorer"))
SESSION_DIR = os.path.join(STORAGE_DIR, "Sessions")
DEFAULT_SESSION_PATH = os.path.join(SESSION_DIR, "selection.json")
