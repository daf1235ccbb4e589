#!/usr/bin/env python3
"""
NODECONF EXPORTER - Round-Trip Output
-------------------------------------
Serializes a NodeConfiguration back into a form the readers accept:
YAML for ConfigYamlReader, one descriptor per line for ConfigFileReader.

Author: NodeConf Team
Date: 2026-10-18
"""

import io
import logging
import os
from pathlib import Path
from typing import Union

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from nodeconf.core.models import NodeConfiguration
from nodeconf.reading.yaml_reader import NODES_KEY

logger = logging.getLogger("nodeconf.exporter")

FORMATS = ("yaml", "text")


class NodeConfExporter:
    """
    The Reconstructor: converts a NodeConfiguration to YAML or plain text.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        # Sequences indented under their key for readability
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def to_yaml(self, conf: NodeConfiguration) -> str:
        doc = CommentedMap()
        doc[NODES_KEY] = CommentedSeq(conf.descriptors())

        stream = io.StringIO()
        self.yaml.dump(doc, stream)
        return stream.getvalue()

    def to_text(self, conf: NodeConfiguration) -> str:
        """
        One descriptor per line. A descriptor starting with '#' would read
        back as a comment, so the text format refuses it.
        """
        for entry in conf:
            if entry.descriptor.startswith('#'):
                raise ValueError(
                    f"Descriptor '{entry.descriptor}' starts with '#' and cannot be "
                    "exported as text, use the yaml format"
                )
        if not len(conf):
            return ""
        return "\n".join(conf.descriptors()) + "\n"

    def export(self, conf: NodeConfiguration, fmt: str = "yaml") -> str:
        if fmt == "yaml":
            return self.to_yaml(conf)
        if fmt == "text":
            return self.to_text(conf)
        raise ValueError(f"Unknown export format '{fmt}', expected one of {FORMATS}")

    def write(self, conf: NodeConfiguration, target_path: Union[str, Path], fmt: str = "yaml"):
        """Writes atomically through a temp file next to the target."""
        target_path = Path(target_path)
        content = self.export(conf, fmt)

        temp_file = target_path.with_name(target_path.name + '.nodeconf.tmp')
        try:
            temp_file.write_text(content, encoding='utf-8')
            os.replace(temp_file, target_path)
        except OSError:
            if temp_file.exists():
                temp_file.unlink()
            raise

        logger.info(f"Wrote {len(conf)} node entries to {target_path} ({fmt})")
