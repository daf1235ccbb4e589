#!/usr/bin/env python3
"""
NODECONF ARGUMENT LIST READER
-----------------------------
Builds a node configuration from an already split argument list,
e.g. the values collected by `nodeconf show --nodes a b c`.

Author: NodeConf Team
Date: 2026-10-18
"""

import logging
from typing import Sequence

from nodeconf.core.models import NodeConfiguration

logger = logging.getLogger("nodeconf.reader")


class ConfigArgListReader:
    """Each argument becomes exactly one entry; no further splitting."""

    def __init__(self, args: Sequence[str]):
        self.args = tuple(args)

    def read(self) -> NodeConfiguration:
        conf = NodeConfiguration()
        for arg in self.args:
            conf.add_entry(arg)

        logger.debug(f"Read {len(conf)} node entries from argument list")
        return conf
