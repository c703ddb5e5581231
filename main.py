# main.py
import sys
import logging
from PyQt6.QtWidgets import QApplication
from gui.preview_window import PreviewWindow
from backend.config import INITIALS_LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=getattr(logging, INITIALS_LOG_LEVEL),
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main():
    try:
        logger.info("Starting Initials Preview...")
        app = QApplication(sys.argv)
        window = PreviewWindow()
        window.show()

        # Start the event loop
        sys.exit(app.exec())

    except Exception as e:
        logger.error(f"Error starting application: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
