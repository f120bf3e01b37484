#!/usr/bin/env python3
"""
Extract structured data from every resume in a directory
Usage: python scripts/process_resumes.py --input-dir data/input --output-dir data/output
"""

import click
from pathlib import Path
import json
from datetime import datetime
import logging
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.processors.batch_processor import BatchProcessor
from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)

RESUME_EXTENSIONS = ['.pdf', '.docx', '.doc']


def find_resume_files(input_path: Path) -> list:
    """Collect resume files below input_path, sorted for stable output"""
    resume_files = []
    for ext in RESUME_EXTENSIONS:
        resume_files.extend(input_path.glob(f'**/*{ext}'))
    return sorted(str(f) for f in resume_files)


@click.command()
@click.option('--input-dir', default=str(settings.INPUT_DIR), help='Input directory with resumes')
@click.option('--output-dir', default=str(settings.OUTPUT_DIR), help='Output directory for JSON')
@click.option('--batch-size', default=settings.BATCH_SIZE, help='Batch size for processing')
@click.option('--num-workers', default=settings.NUM_WORKERS, help='Number of parallel workers')
@click.option('--log-level', default=settings.LOG_LEVEL, help='Logging level')
def main(input_dir: str,
         output_dir: str,
         batch_size: int,
         num_workers: int,
         log_level: str):
    """Process all resumes in the input directory"""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logging(log_level, log_file=settings.LOG_DIR / f"processing_{timestamp}.log")

    start_time = datetime.now()
    logger.info(f"Starting resume processing at {start_time}")

    input_path = Path(input_dir)
    output_path = Path(output_dir)
    output_path.mkdir(exist_ok=True, parents=True)

    resume_files = find_resume_files(input_path)
    logger.info(f"Found {len(resume_files)} resume files")

    if not resume_files:
        logger.error("No resume files found!")
        sys.exit(1)

    processor = BatchProcessor(
        batch_size=batch_size,
        num_workers=num_workers
    )

    output_file = output_path / f"resumes_{timestamp}.json"
    metrics = processor.process_to_file(resume_files, output_file)

    summary = {
        "processing_time": metrics["processing_time"],
        "total_files": metrics["total_files"],
        "processed": metrics["processed"],
        "failed": metrics["failed"],
        "success_rate": metrics["success_rate"],
        "files_per_second": metrics["files_per_second"],
        "output_file": str(output_file),
        "error_file": metrics.get("error_file"),
        "timestamp": timestamp
    }

    summary_file = output_path / f"processing_summary_{timestamp}.json"
    with open(summary_file, 'w', encoding='utf-8') as f:
        json.dump(summary, f, indent=2)

    logger.info("Processing complete!")


if __name__ == "__main__":
    main()
