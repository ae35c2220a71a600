"""
Debug Pipeline
Submits a document to Textract and renders the geometry overlay
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Dict, Optional, Union
import asyncio
import json
import logging

from .textract import TextractAnalyzer
from .rendering import generate_debug_image
from .rendering.debug_image import DEFAULT_LINE_WIDTH
from .utils import AnalysisStatistics

logger = logging.getLogger(__name__)


@dataclass
class DebugResult:
    """Outcome of one analyze/render request"""
    analysis: Dict[str, Any]
    overlay_png: Optional[bytes] = None
    overlay_path: Optional[Path] = None
    json_path: Optional[Path] = None


class DebugPipeline:
    """Analyze a document and optionally draw its blocks for inspection"""

    def __init__(
        self,
        analyzer: TextractAnalyzer,
        line_width: int = DEFAULT_LINE_WIDTH,
        image_fetch_timeout: float = 30.0
    ):
        """
        Initialize the debug pipeline

        Args:
            analyzer: Configured TextractAnalyzer
            line_width: Stroke width for overlay rectangles
            image_fetch_timeout: Timeout in seconds for remote images
        """
        self.analyzer = analyzer
        self.line_width = line_width
        self.image_fetch_timeout = image_fetch_timeout

    async def process_local(
        self,
        input_path: Union[str, Path],
        output_image: Optional[Path] = None,
        output_json: Optional[Path] = None,
        render: bool = True
    ) -> DebugResult:
        """
        Analyze a local document and draw its blocks on the same file

        Args:
            input_path: Local document image
            output_image: Optional path for the PNG overlay
            output_json: Optional path for the raw response
            render: Whether to render the overlay

        Returns:
            DebugResult
        """
        logger.info(f"Processing local document: {input_path}")

        return await self._run(
            self.analyzer.analyze_local_file(input_path),
            input_path if render else None,
            output_image,
            output_json
        )

    async def process_remote(
        self,
        bucket: str,
        key: str,
        image_source: Optional[Union[str, Path]] = None,
        output_image: Optional[Path] = None,
        output_json: Optional[Path] = None
    ) -> DebugResult:
        """
        Analyze an S3 document and optionally draw its blocks on an image

        Args:
            bucket: S3 bucket name
            key: Object key within the bucket
            image_source: Local path or URL of the same image (optional)
            output_image: Optional path for the PNG overlay
            output_json: Optional path for the raw response

        Returns:
            DebugResult
        """
        logger.info(f"Processing remote document: s3://{bucket}/{key}")

        return await self._run(
            self.analyzer.analyze_remote_file(bucket, key),
            image_source,
            output_image,
            output_json
        )

    async def _run(
        self,
        analysis: Awaitable[Dict[str, Any]],
        image_source: Optional[Union[str, Path]],
        output_image: Optional[Path],
        output_json: Optional[Path]
    ) -> DebugResult:
        task = asyncio.ensure_future(analysis)

        overlay = None
        if image_source is not None:
            overlay = await generate_debug_image(
                image_source,
                task,
                line_width=self.line_width,
                timeout=self.image_fetch_timeout
            )

        result = DebugResult(analysis=await task, overlay_png=overlay)

        stats = AnalysisStatistics(result.analysis)
        logger.info("\n" + stats.generate_report())

        if output_json:
            result.json_path = self._write(
                Path(output_json),
                json.dumps(result.analysis, indent=2, default=str).encode("utf-8")
            )

        if output_image and overlay is not None:
            result.overlay_path = self._write(Path(output_image), overlay)

        return result

    def _write(self, path: Path, data: bytes) -> Path:
        path.parent.mkdir(exist_ok=True, parents=True)
        path.write_bytes(data)
        logger.info(f"Saved {path}")
        return path
