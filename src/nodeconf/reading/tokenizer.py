#!/usr/bin/env python3
"""
NODECONF TOKENIZER
------------------
Splits raw configuration text into node descriptor tokens.

Author: NodeConf Team
Date: 2026-10-18
"""

from typing import List


class NodeTokenizer:
    """
    Whitespace tokenizer shared by every reader.
    Runs of spaces, tabs and newlines count as a single delimiter.
    """

    @staticmethod
    def split(text: str) -> List[str]:
        """
        Returns the non-empty whitespace-delimited tokens of text, in order.
        Example: "  a \\t b  " -> ["a", "b"]
        """
        # str.split() without a separator already drops empty fragments
        return text.split()
