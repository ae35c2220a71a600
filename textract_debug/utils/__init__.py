"""Utility modules"""
from .statistics import AnalysisStatistics

__all__ = ["AnalysisStatistics"]
