from pydantic_settings import BaseSettings, SettingsConfigDict
import multiprocessing
from pathlib import Path

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Processing
    BATCH_SIZE: int = 500
    NUM_WORKERS: int = max(1, min(4, multiprocessing.cpu_count() - 1))
    MAX_MEMORY_PERCENT: int = 80

    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent
    INPUT_DIR: Path = BASE_DIR / "data" / "input"
    OUTPUT_DIR: Path = BASE_DIR / "data" / "output"
    ERROR_DIR: Path = BASE_DIR / "data" / "errors"
    LOG_DIR: Path = BASE_DIR / "data" / "logs"

    # Logging
    LOG_LEVEL: str = "INFO"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # Document Processing
    MAX_DOCUMENT_SIZE: int = 10 * 1024 * 1024  # 10MB
    SUPPORTED_MEDIA_TYPES: list = [
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ]
    PDF_EXTRACTION_METHODS: list = ["pdfplumber", "pdfminer", "pypdf2"]
    DOCX_EXTRACTION_METHODS: list = ["mammoth", "python-docx"]
    ANTIWORD_PATH: str = "antiword"
    ANTIWORD_TIMEOUT: int = 30

settings = Settings()
