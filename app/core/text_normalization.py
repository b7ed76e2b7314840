"""
Line normalization for raw resume text.

Text arrives as one blob from the DOCX/PDF/TXT extractors. The parser works
line by line, so the only prep step is splitting and trimming.
"""

from typing import List


def normalize_lines(text: str) -> List[str]:
    """
    Split raw text into trimmed, non-empty lines.

    Examples:
      "Jane Doe\\r\\n\\n  jane@x.com  " -> ["Jane Doe", "jane@x.com"]
      "" -> []
    """
    return [line.strip() for line in text.split("\n") if line.strip()]
