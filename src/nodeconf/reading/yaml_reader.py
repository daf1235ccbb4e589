#!/usr/bin/env python3
"""
NODECONF YAML READER
--------------------
Loads a node configuration stored as YAML:

    nodes:
      - node1
      - node2

Author: NodeConf Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Union

from ruamel.yaml import YAML

from nodeconf.core.models import NodeConfiguration, NodeConfigFormatError

logger = logging.getLogger("nodeconf.reader")

NODES_KEY = "nodes"


class ConfigYamlReader:
    """
    Reads the `nodes` sequence of a YAML document into a NodeConfiguration.
    Parse errors from ruamel.yaml are not caught here.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        # Base loader keeps every scalar as the text the user wrote (1.10, true)
        self.yaml = YAML(typ='base')

    def read(self) -> NodeConfiguration:
        raw_text = self.path.read_text(encoding='utf-8-sig')
        doc = self.yaml.load(raw_text)

        conf = NodeConfiguration()
        if doc is None:
            return conf

        if not isinstance(doc, dict):
            raise NodeConfigFormatError(
                f"{self.path}: top level must be a mapping with a '{NODES_KEY}' key"
            )

        nodes = doc.get(NODES_KEY)
        # The base loader gives a bare "nodes:" as an empty string
        if nodes is None or nodes == "":
            logger.warning(f"{self.path}: no '{NODES_KEY}' entries, configuration is empty")
            return conf

        if not isinstance(nodes, list):
            raise NodeConfigFormatError(f"{self.path}: '{NODES_KEY}' must be a sequence")

        for node in nodes:
            if not isinstance(node, str):
                raise NodeConfigFormatError(
                    f"{self.path}: '{NODES_KEY}' items must be scalars, got {node!r}"
                )
            # An empty item ("- ") loads as "" and is rejected by add_entry
            conf.add_entry(node)

        logger.debug(f"Read {len(conf)} node entries from {self.path}")
        return conf
