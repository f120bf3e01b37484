from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Dict, Generator, Optional
import psutil
import gc
from pathlib import Path
import json
from tqdm import tqdm
import logging
from datetime import datetime

from src.core.exceptions import ResumeParserError
from src.core.resume_parser import ResumeParser
from config.settings import settings

logger = logging.getLogger(__name__)

_parser: Optional[ResumeParser] = None


def _init_worker():
    """Initialize parser in worker process"""
    global _parser
    _parser = ResumeParser()


def _process_single(file_path: str) -> Dict:
    """Process single resume; unreadable documents come back with an "error" key"""
    if _parser is None:
        _init_worker()
    try:
        data = _parser.parse_resume_file(file_path)
    except (ResumeParserError, OSError) as e:
        logger.error(f"Error processing {file_path}: {e}")
        return {"file": str(file_path), "error": str(e)}
    return {"file": str(file_path), "data": data.to_dict()}


class BatchProcessor:
    """Memory-efficient batch processing with monitoring"""

    def __init__(self,
                 batch_size: int = None,
                 num_workers: int = None,
                 max_memory_percent: int = None,
                 error_dir: Optional[Path] = None):
        self.batch_size = batch_size or settings.BATCH_SIZE
        self.num_workers = num_workers or settings.NUM_WORKERS
        self.max_memory_percent = max_memory_percent or settings.MAX_MEMORY_PERCENT
        self.error_dir = Path(error_dir) if error_dir is not None else settings.ERROR_DIR

    def check_memory(self):
        """Monitor and manage memory usage"""
        memory_percent = psutil.virtual_memory().percent

        if memory_percent > self.max_memory_percent:
            logger.warning(f"High memory usage: {memory_percent}%")
            gc.collect()

            # If still high, reduce workers for the next batch
            if memory_percent > 90:
                self.num_workers = max(1, self.num_workers - 1)
                logger.warning(f"Reduced workers to {self.num_workers}")

    def _process_sequential(self, batch: List[str], desc: str) -> Generator[Dict, None, None]:
        for file_path in tqdm(batch, desc=desc):
            yield _process_single(file_path)
            self.check_memory()

    def _process_parallel(self, batch: List[str], desc: str) -> Generator[Dict, None, None]:
        with ProcessPoolExecutor(
            max_workers=self.num_workers,
            initializer=_init_worker
        ) as executor:
            futures = {
                executor.submit(_process_single, fp): fp
                for fp in batch
            }

            # Process results as they complete
            for future in tqdm(as_completed(futures), total=len(futures), desc=desc):
                try:
                    yield future.result()
                except Exception as e:
                    logger.error(f"Worker failed on {futures[future]}: {e}")
                    yield {"file": str(futures[future]), "error": str(e)}

                self.check_memory()

    def process_batch_generator(self,
                                file_paths: List[str]) -> Generator[Dict, None, None]:
        """Process files as a generator to save memory"""
        for i in range(0, len(file_paths), self.batch_size):
            batch = file_paths[i:i + self.batch_size]
            desc = f"Batch {i//self.batch_size + 1}"

            if self.num_workers > 1:
                yield from self._process_parallel(batch, desc)
            else:
                yield from self._process_sequential(batch, desc)

            # Force garbage collection after each batch
            gc.collect()

    def process_to_file(self,
                        file_paths: List[str],
                        output_file: Path) -> Dict:
        """Process files and save results to JSON file"""
        start_time = datetime.now()
        total_files = len(file_paths)
        processed = 0
        failures = []

        # Ensure output file has .json extension
        if not output_file.suffix:
            output_file = output_file.with_suffix('.json')

        # Create output directory if needed
        output_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write('[\n')  # Start JSON array
                first = True

                for result in self.process_batch_generator(file_paths):
                    if "error" in result:
                        failures.append(result)
                    else:
                        # Write to file immediately to save memory
                        if not first:
                            f.write(',\n')
                        json.dump(result, f, indent=2)
                        first = False
                        processed += 1

                    # Log progress
                    done = processed + len(failures)
                    if done % 100 == 0:
                        logger.info(
                            f"Progress: {done}/{total_files} "
                            f"({done/total_files*100:.1f}%)"
                        )

                f.write('\n]')  # End JSON array
        except OSError as e:
            logger.error(f"Error writing to output file {output_file}: {e}")
            raise

        # Calculate metrics
        duration = (datetime.now() - start_time).total_seconds()
        metrics = {
            "total_files": total_files,
            "processed": processed,
            "failed": len(failures),
            "success_rate": processed / total_files * 100 if total_files > 0 else 0,
            "processing_time": duration,
            "files_per_second": total_files / duration if duration > 0 else 0,
            "output_file": str(output_file)
        }

        if failures:
            metrics["error_file"] = str(self.write_failures(failures, output_file.stem))

        logger.info(f"Processing complete: {metrics}")
        return metrics

    def write_failures(self, failures: List[Dict], name: str) -> Path:
        """Record the files that could not be processed under the error directory"""
        self.error_dir.mkdir(parents=True, exist_ok=True)
        error_file = self.error_dir / f"{name}_failed.json"
        with open(error_file, 'w', encoding='utf-8') as f:
            json.dump(failures, f, indent=2)
        logger.warning(f"{len(failures)} files failed, see {error_file}")
        return error_file
