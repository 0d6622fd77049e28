import sys, pathlib

# src/ holds top-level packages (catalog, htmlgen, generator) and modules
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
