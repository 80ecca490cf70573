import sys
from pathlib import Path

import pytest

# The scripts import each other by bare module name.
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def abbrevs():
    return {"Gen": 1, "Exod": 2, "Ps": 19, "John": 43, "1John": 62}
