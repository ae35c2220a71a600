"""Debug overlay rendering module"""
from .debug_image import generate_debug_image, draw_blocks, load_image, confidence_color, block_rectangle

__all__ = ["generate_debug_image", "draw_blocks", "load_image", "confidence_color", "block_rectangle"]
