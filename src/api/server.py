from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
import uvicorn
import logging
from typing import List

from src.core.document_reader import sniff_media_type
from src.core.exceptions import DecodeFailure, DocumentTooLarge, ResumeParserError, UnsupportedFormat
from src.core.resume_parser import ResumeParser
from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Parser API")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize parser
parser = ResumeParser()

ERROR_STATUS = {
    UnsupportedFormat: 415,
    DecodeFailure: 422,
    DocumentTooLarge: 413,
}


def _media_type(file: UploadFile, buffer: bytes) -> str:
    """Declared content type without parameters, sniffed when the client sent none"""
    declared = (file.content_type or "").split(";")[0].strip().lower()
    if not declared or declared == "application/octet-stream":
        return sniff_media_type(buffer[:8], file.filename or "")
    return declared


async def _read_upload(file: UploadFile) -> bytes:
    # One byte past the limit is enough to detect an oversize upload
    buffer = await file.read(settings.MAX_DOCUMENT_SIZE + 1)
    if len(buffer) > settings.MAX_DOCUMENT_SIZE:
        raise DocumentTooLarge(len(buffer), settings.MAX_DOCUMENT_SIZE)
    return buffer


async def _parse_upload(file: UploadFile) -> dict:
    buffer = await _read_upload(file)
    media_type = _media_type(file, buffer)
    logger.info(f"Parsing {file.filename} ({media_type}, {len(buffer)} bytes)")
    # Decoding blocks, so it runs in the threadpool rather than on the event loop
    data = await run_in_threadpool(parser.parse_document, buffer, media_type)
    return data.to_dict()


def _status_for(error: ResumeParserError) -> int:
    return ERROR_STATUS.get(type(error), 400)


@app.get("/")
async def root():
    return {"status": "online", "service": "resume-parser"}


@app.post("/parse")
async def parse_resume(file: UploadFile = File(...)):
    try:
        data = await _parse_upload(file)
    except ResumeParserError as e:
        logger.warning(f"Rejected {file.filename}: {e}")
        raise HTTPException(status_code=_status_for(e), detail=str(e))

    return {"success": True, "data": data}


@app.post("/parse-batch")
async def parse_batch(files: List[UploadFile] = File(...)):
    results = []
    failed = 0

    for file in files:
        try:
            results.append({"filename": file.filename, "data": await _parse_upload(file)})
        except ResumeParserError as e:
            failed += 1
            logger.warning(f"Rejected {file.filename}: {e}")
            results.append({
                "filename": file.filename,
                "error": str(e),
                "status_code": _status_for(e),
            })

    return {
        "total_files": len(files),
        "processed": len(files) - failed,
        "failed": failed,
        "results": results
    }


if __name__ == "__main__":
    setup_logging()
    uvicorn.run("src.api.server:app", host=settings.API_HOST, port=settings.API_PORT, reload=True)
