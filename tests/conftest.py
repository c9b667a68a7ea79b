import sys
from pathlib import Path

# run against the guessmeter sources without an editable install
GUESSMETER_SRC = Path(__file__).resolve().parents[1] / "src"
if str(GUESSMETER_SRC) not in sys.path:
    sys.path.insert(0, str(GUESSMETER_SRC))
