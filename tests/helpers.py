def make_block(block_type="LINE", confidence=None, box=None, block_id="b1"):
    """Build a Textract block, optionally with geometry and confidence"""
    block = {"BlockType": block_type, "Id": block_id}
    if confidence is not None:
        block["Confidence"] = confidence
    if box is not None:
        block["Geometry"] = {"BoundingBox": box}
    return block


def make_response(*blocks):
    return {
        "DocumentMetadata": {"Pages": 1},
        "Blocks": list(blocks),
        "AnalyzeDocumentModelVersion": "1.0",
    }


class RecordingClient:
    """Minimal stand-in that records analyze_document calls"""

    def __init__(self, response=None):
        self.calls = []
        self.response = response or make_response()

    def analyze_document(self, **kwargs):
        self.calls.append(kwargs)
        return self.response
