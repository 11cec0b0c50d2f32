"""Output formatting for conversation results."""
import json

from ..messages import NormalizedResult


def format_output(result: NormalizedResult, output_format: str = "text") -> str:
    """
    Format a result for display or for writing to a file.

    ``text`` returns the extracted text blocks; any other format returns the
    raw payload as indented JSON.
    """
    if output_format == "text":
        return result.text
    return json.dumps(result.raw, indent=2, ensure_ascii=False)
