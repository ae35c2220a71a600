"""Textract submission module"""
from .analyzer import TextractAnalyzer, DocumentReference

__all__ = ["TextractAnalyzer", "DocumentReference"]
