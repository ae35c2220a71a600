"""
Debug Image Renderer
Draws Textract block geometry over the source image, colored by confidence
"""
from pathlib import Path
from typing import Any, Awaitable, Dict, Tuple, Union
from PIL import Image, ImageColor, ImageDraw
import asyncio
import base64
import io
import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH = 4


def confidence_color(confidence: float) -> Tuple[int, int, int]:
    """
    Map a 0-100 confidence onto the red-to-green hue range

    0 is red (hue 0), 100 is green (hue 120), full saturation, 50% lightness.
    """
    hue = (confidence / 100) * 120
    return ImageColor.getrgb(f"hsl({hue:.2f}, 100%, 50%)")


def block_rectangle(
    box: Dict[str, Any], img_width: int, img_height: int
) -> Tuple[int, int, int, int]:
    """
    Convert a fractional bounding box into pixel corners

    Args:
        box: Textract BoundingBox (Left, Top, Width, Height as fractions)
        img_width: Image width in pixels
        img_height: Image height in pixels

    Returns:
        (x1, y1, x2, y2) pixel coordinates
    """
    # Missing fields count as 0 before scaling
    left = box.get("Left") or 0
    top = box.get("Top") or 0
    width = box.get("Width") or 0
    height = box.get("Height") or 0

    x1 = int(left * img_width)
    y1 = int(top * img_height)
    x2 = int((left + width) * img_width)
    y2 = int((top + height) * img_height)

    return x1, y1, x2, y2


def _open_image(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


async def load_image(
    source: Union[str, Path, bytes], timeout: float = 30.0
) -> Image.Image:
    """
    Load an image from raw bytes, a local path, http(s) URL or data URI

    Args:
        source: Encoded image bytes, local path or remote URI
        timeout: Timeout in seconds for remote fetches

    Returns:
        Decoded PIL Image
    """
    if isinstance(source, bytes):
        return await asyncio.to_thread(_open_image, source)

    source = str(source)

    if source.startswith(("http://", "https://")):
        logger.info(f"Fetching image: {source}")
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(source)
            response.raise_for_status()
        return await asyncio.to_thread(_open_image, response.content)

    if source.startswith("data:"):
        _, _, payload = source.partition(",")
        return await asyncio.to_thread(_open_image, base64.b64decode(payload))

    data = await asyncio.to_thread(Path(source).read_bytes)
    return await asyncio.to_thread(_open_image, data)


def draw_blocks(
    image: Image.Image,
    analysis: Dict[str, Any],
    line_width: int = DEFAULT_LINE_WIDTH
) -> Image.Image:
    """
    Draw one rectangle per block with geometry on a copy of the image

    Args:
        image: Source PIL Image
        analysis: Raw AnalyzeDocument response
        line_width: Stroke width in pixels

    Returns:
        New RGBA image with the same dimensions as the source
    """
    img_width, img_height = image.size

    canvas = Image.new("RGBA", (img_width, img_height), (0, 0, 0, 0))
    canvas.paste(image.convert("RGBA"), (0, 0))
    draw = ImageDraw.Draw(canvas)

    blocks_drawn = 0
    for idx, block in enumerate(analysis.get("Blocks") or []):
        geometry = block.get("Geometry")
        if not geometry or not geometry.get("BoundingBox"):
            logger.debug(f"Skipping block {idx} - no geometry")
            continue

        confidence = block.get("Confidence") or 0
        rect = block_rectangle(geometry["BoundingBox"], img_width, img_height)

        logger.debug(f"Drawing block {idx} ({confidence:.1f}%): {rect}")
        draw.rectangle(rect, outline=confidence_color(confidence), width=line_width)
        blocks_drawn += 1

    logger.info(f"Drew {blocks_drawn} bounding boxes on {img_width}x{img_height} image")
    return canvas


async def generate_debug_image(
    image_path: Union[str, Path, bytes],
    analysis: Awaitable[Dict[str, Any]],
    line_width: int = DEFAULT_LINE_WIDTH,
    timeout: float = 30.0
) -> bytes:
    """
    Draw analysis geometry on a local or remote image

    The analysis is awaited before the image is loaded, so a failed analysis
    propagates without touching the image source.

    Args:
        image_path: Encoded image bytes, local path or remote image URI
        analysis: Awaitable resolving to an AnalyzeDocument response
        line_width: Stroke width in pixels
        timeout: Timeout in seconds for remote image fetches

    Returns:
        PNG-encoded image bytes
    """
    analysis_result = await analysis

    image = await load_image(image_path, timeout=timeout)

    canvas = draw_blocks(image, analysis_result, line_width=line_width)

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()
