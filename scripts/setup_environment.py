#!/usr/bin/env python3
"""
Setup script to create data directories and check that document decoders are available
"""

import importlib
import shutil
import sys
from pathlib import Path
import logging

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)

DECODER_MODULES = ["pdfplumber", "pdfminer", "PyPDF2", "mammoth", "docx"]


def create_directories():
    """Create necessary directories"""
    for directory in (settings.INPUT_DIR, settings.OUTPUT_DIR, settings.ERROR_DIR, settings.LOG_DIR):
        directory.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created directory: {directory}")


def verify_installation() -> bool:
    """Verify document decoders are installed; antiword is optional"""
    ok = True
    for module in DECODER_MODULES:
        try:
            importlib.import_module(module)
            logger.info(f"{module} is available")
        except ImportError as e:
            logger.error(f"{module} is missing: {e}")
            ok = False

    if shutil.which(settings.ANTIWORD_PATH):
        logger.info("antiword is available for legacy .doc files")
    else:
        logger.warning(
            f"antiword not found at {settings.ANTIWORD_PATH}; legacy .doc uploads will be rejected"
        )
    return ok


def main():
    """Main setup function"""
    setup_logging()
    logger.info("Starting environment setup...")

    create_directories()

    if not verify_installation():
        sys.exit(1)

    logger.info("Environment setup completed successfully!")


if __name__ == "__main__":
    main()
