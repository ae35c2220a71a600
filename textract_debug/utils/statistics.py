"""
Analysis Statistics Module
Summarises block counts and confidence for a Textract response
"""
from typing import Any, Dict, List, Optional
from collections import defaultdict


class AnalysisStatistics:
    """Generate statistics from an AnalyzeDocument response"""

    def __init__(self, result: Dict[str, Any]):
        self.blocks: List[Dict[str, Any]] = result.get("Blocks") or []

    def count_by_block_type(self) -> Dict[str, int]:
        """Count blocks by BlockType"""
        counts = defaultdict(int)
        for block in self.blocks:
            counts[block.get("BlockType", "UNKNOWN")] += 1
        return dict(sorted(counts.items()))

    def count_with_geometry(self) -> int:
        """Count blocks that carry a bounding box"""
        return sum(
            1 for block in self.blocks
            if (block.get("Geometry") or {}).get("BoundingBox")
        )

    def confidence_summary(self) -> Dict[str, Optional[float]]:
        """Min, mean and max confidence over blocks that report one"""
        scores = [b["Confidence"] for b in self.blocks if b.get("Confidence") is not None]
        if not scores:
            return {"min": None, "mean": None, "max": None}

        return {
            "min": min(scores),
            "mean": sum(scores) / len(scores),
            "max": max(scores),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_blocks": len(self.blocks),
            "blocks_with_geometry": self.count_with_geometry(),
            "blocks_by_type": self.count_by_block_type(),
            "confidence": self.confidence_summary(),
        }

    def generate_report(self) -> str:
        """Generate statistics report"""
        report = []
        report.append("=" * 60)
        report.append("TEXTRACT ANALYSIS STATISTICS")
        report.append("=" * 60)
        report.append(f"Total Blocks: {len(self.blocks)}")
        report.append(f"With Geometry: {self.count_with_geometry()}")
        report.append("")

        report.append("Block Type Breakdown:")
        report.append("-" * 40)
        for block_type, count in self.count_by_block_type().items():
            report.append(f"  {block_type:20s}: {count:4d} blocks")

        report.append("")
        report.append("Confidence:")
        report.append("-" * 40)
        summary = self.confidence_summary()
        if summary["mean"] is None:
            report.append("  No confidence scores reported")
        else:
            report.append(f"  Min : {summary['min']:6.2f}")
            report.append(f"  Mean: {summary['mean']:6.2f}")
            report.append(f"  Max : {summary['max']:6.2f}")

        report.append("=" * 60)

        return "\n".join(report)
