#!/usr/bin/env python3
"""
NODECONF STRING READER
----------------------
Turns a single whitespace-delimited string such as "node1 node2 node3"
into a NodeConfiguration. Each call to read() re-parses the source from
scratch, so a reader can be reused and shared between threads.

Author: NodeConf Team
Date: 2026-10-18
"""

import logging

from nodeconf.core.models import NodeConfiguration
from nodeconf.reading.tokenizer import NodeTokenizer

logger = logging.getLogger("nodeconf.reader")


class ConfigStringReader:
    """
    Reads a node configuration from an in-memory string.
    The source is fixed at construction and never modified.
    """

    def __init__(self, source: str):
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    def read(self) -> NodeConfiguration:
        """
        Builds a fresh NodeConfiguration with one entry per token.

        Errors raised by NodeConfiguration.add_entry propagate unchanged and
        no partial configuration is returned.
        """
        conf = NodeConfiguration()
        for token in NodeTokenizer.split(self._source):
            conf.add_entry(token)

        logger.debug(f"Read {len(conf)} node entries from string source")
        return conf
