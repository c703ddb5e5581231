import pytest
import sys
import os

# Qt must not need a display while testing
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the project directory to the Python path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

@pytest.fixture
def app_instance():
    """Create a PyQt application instance"""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app

@pytest.fixture
def names():
    """A spread of realistic display names used as color seeds"""
    first = ["John", "Jane", "Timo", "Aiko", "Zoë", "Émile", "Priya", "Ola", "Nguyen", "Sam"]
    last = ["Doe", "Zacherl", "Tanaka", "Müller", "Okafor", "Singh", "Nordmann", "Van", "Lee", "Ivanova"]
    return [f"{f} {l}" for f in first for l in last]
