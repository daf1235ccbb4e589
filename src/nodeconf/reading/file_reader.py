#!/usr/bin/env python3
"""
NODECONF FILE READER
--------------------
Reads a node configuration from a plain text file. Every non-comment line
holds one or more descriptors:

    # rack A
    node1
    node2 node3   # same switch

Author: NodeConf Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Union

from nodeconf.core.models import NodeConfiguration
from nodeconf.reading.tokenizer import NodeTokenizer

logger = logging.getLogger("nodeconf.reader")


class ConfigFileReader:
    """
    Line-oriented reader. Blank lines and '#' comments are skipped,
    everything else goes through the shared tokenizer.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _strip_comment(self, line: str) -> str:
        """Cuts a '#' comment that starts the line or follows whitespace."""
        for i, char in enumerate(line):
            if char == '#' and (i == 0 or line[i - 1].isspace()):
                return line[:i]
        return line

    def read(self) -> NodeConfiguration:
        # BOM-aware, matching how editors on Windows save these files
        raw_text = self.path.read_text(encoding='utf-8-sig')

        conf = NodeConfiguration()
        for line in raw_text.splitlines():
            for token in NodeTokenizer.split(self._strip_comment(line)):
                conf.add_entry(token)

        logger.debug(f"Read {len(conf)} node entries from {self.path}")
        return conf
