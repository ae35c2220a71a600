"""
FastAPI Backend for Textract debug overlays
"""
from fastapi import Depends, FastAPI, Request, UploadFile, File, HTTPException
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from PIL import UnidentifiedImageError
from botocore.exceptions import BotoCoreError, ClientError
from contextlib import asynccontextmanager
import asyncio
import logging

from config import settings, build_analyzer
from textract_debug.textract import TextractAnalyzer, DocumentReference
from textract_debug.rendering import generate_debug_image
from textract_debug.utils import AnalysisStatistics

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the analyzer for the lifetime of the app"""
    app.state.analyzer = build_analyzer(settings)
    logger.info(f"Textract analyzer ready ({settings.aws_region})")
    yield
    app.state.analyzer = None


app = FastAPI(title="Textract Debug Overlay", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_analyzer(request: Request) -> TextractAnalyzer:
    """Analyzer built by the app lifespan"""
    return request.app.state.analyzer


class S3DocumentRequest(BaseModel):
    """S3 document location"""
    bucket: str
    key: str


def _service_error(e: Exception) -> HTTPException:
    if isinstance(e, ClientError):
        code = e.response.get("Error", {}).get("Code", "Unknown")
        message = e.response.get("Error", {}).get("Message", str(e))
    else:
        code, message = type(e).__name__, str(e)

    logger.error(f"Textract call failed: {code}: {message}")
    return HTTPException(502, {"error": code, "message": message})


@app.get("/health")
async def health_check() -> dict:
    """Health check"""
    return {
        "status": "ok",
        "region": settings.aws_region,
        "feature_types": settings.feature_types,
    }


@app.post("/api/analyze")
async def analyze_upload(
    file: UploadFile = File(...),
    analyzer: TextractAnalyzer = Depends(get_analyzer)
):
    """Analyze an uploaded document image"""
    contents = await file.read()
    logger.info(f"Analyzing upload: {file.filename} ({len(contents)} bytes)")

    try:
        result = await analyzer.analyze(DocumentReference(content=contents))
    except (ClientError, BotoCoreError) as e:
        raise _service_error(e)

    return {
        "filename": file.filename,
        "statistics": AnalysisStatistics(result).to_dict(),
        "analysis": result,
    }


@app.post("/api/analyze-s3")
async def analyze_s3(
    request: S3DocumentRequest,
    analyzer: TextractAnalyzer = Depends(get_analyzer)
):
    """Analyze a document stored on S3"""
    try:
        result = await analyzer.analyze_remote_file(request.bucket, request.key)
    except (ClientError, BotoCoreError) as e:
        raise _service_error(e)

    return {
        "statistics": AnalysisStatistics(result).to_dict(),
        "analysis": result,
    }


@app.post("/api/debug-image")
async def debug_image(
    file: UploadFile = File(...),
    analyzer: TextractAnalyzer = Depends(get_analyzer)
):
    """Analyze an uploaded image and return it with blocks drawn"""
    contents = await file.read()
    logger.info(f"Rendering debug image for: {file.filename}")

    analysis = asyncio.ensure_future(analyzer.analyze(DocumentReference(content=contents)))
    try:
        png = await generate_debug_image(
            contents,
            analysis,
            line_width=settings.debug_line_width
        )
    except (ClientError, BotoCoreError) as e:
        raise _service_error(e)
    except UnidentifiedImageError:
        raise HTTPException(400, "Unsupported image format")

    return Response(content=png, media_type="image/png")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
