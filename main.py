#!/usr/bin/env python3
"""
CLI Tool for Textract debug overlays
Analyze a local or S3 document and draw the detected blocks
"""
import sys
import argparse
import asyncio
import logging
from pathlib import Path
from dotenv import load_dotenv

from config import settings, build_analyzer
from textract_debug.pipeline import DebugPipeline, DebugResult
from textract_debug.utils import AnalysisStatistics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler('textract_debug.log')
    ]
)

logger = logging.getLogger(__name__)


def build_pipeline() -> DebugPipeline:
    """Create a pipeline from settings"""
    return DebugPipeline(
        analyzer=build_analyzer(settings),
        line_width=settings.debug_line_width,
        image_fetch_timeout=settings.image_fetch_timeout
    )


def print_summary(result: DebugResult):
    """Print a short summary of the analysis"""
    stats = AnalysisStatistics(result.analysis)

    print(f"\n{'='*60}")
    print("Analysis Complete!")
    print(f"{'='*60}")
    print(f"Blocks found: {len(stats.blocks)}")
    print(f"Overlay output: {result.overlay_path}")
    print(f"JSON output: {result.json_path}")
    print(f"{'='*60}\n")

    for block_type, count in stats.count_by_block_type().items():
        print(f"  {block_type}: {count}")


def process_local(args):
    """Analyze a local document image"""
    input_path = Path(args.input)

    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        sys.exit(1)

    output_path = Path(args.output) if args.output else settings.output_dir / f"{input_path.stem}_debug.png"

    logger.info(f"Input: {input_path}")
    logger.info(f"Output: {output_path}")

    pipeline = build_pipeline()

    try:
        result = asyncio.run(pipeline.process_local(
            input_path,
            output_image=None if args.no_render else output_path,
            output_json=Path(args.json) if args.json else None,
            render=not args.no_render
        ))
        print_summary(result)

    except Exception as e:
        logger.error(f"Processing failed: {e}", exc_info=True)
        sys.exit(1)


def process_s3(args):
    """Analyze a document stored on S3"""
    output_path = None
    if args.image:
        output_path = Path(args.output) if args.output else settings.output_dir / f"{Path(args.key).stem}_debug.png"

    logger.info(f"Input: s3://{args.bucket}/{args.key}")
    logger.info(f"Output: {output_path}")

    pipeline = build_pipeline()

    try:
        result = asyncio.run(pipeline.process_remote(
            args.bucket,
            args.key,
            image_source=args.image,
            output_image=output_path,
            output_json=Path(args.json) if args.json else None
        ))
        print_summary(result)

    except Exception as e:
        logger.error(f"Processing failed: {e}", exc_info=True)
        sys.exit(1)


def main():
    """Main CLI entry point"""
    # Load environment variables
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Textract Debug Overlay Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a local scan and draw its blocks
  python main.py local form.png

  # Also keep the raw response
  python main.py local form.png -o overlay.png --json form.json

  # Analyze an S3 document, drawing on a copy of the image
  python main.py s3 my-bucket scans/form.png --image https://example.com/form.png
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Local command
    local_parser = subparsers.add_parser('local', help='Analyze local document image')
    local_parser.add_argument('input', help='Input image file (PNG, JPG)')
    local_parser.add_argument('-o', '--output', help='Output PNG overlay path')
    local_parser.add_argument('--json', help='Write raw Textract response to this path')
    local_parser.add_argument('--no-render', action='store_true', help='Skip the overlay image')

    # S3 command
    s3_parser = subparsers.add_parser('s3', help='Analyze document stored on S3')
    s3_parser.add_argument('bucket', help='S3 bucket name')
    s3_parser.add_argument('key', help='Object key within the bucket')
    s3_parser.add_argument('--image', help='Local path or URL of the image to draw on')
    s3_parser.add_argument('-o', '--output', help='Output PNG overlay path')
    s3_parser.add_argument('--json', help='Write raw Textract response to this path')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 's3' and args.output and not args.image:
        parser.error("--output needs --image to draw the overlay on")

    # Execute command
    if args.command == 'local':
        process_local(args)
    elif args.command == 's3':
        process_s3(args)


if __name__ == '__main__':
    main()
