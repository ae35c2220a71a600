"""Textract analysis client with confidence-colored debug overlays"""
from .textract import TextractAnalyzer, DocumentReference
from .rendering import generate_debug_image
from .pipeline import DebugPipeline, DebugResult

__all__ = ["TextractAnalyzer", "DocumentReference", "generate_debug_image", "DebugPipeline", "DebugResult"]
