#!/usr/bin/env python3
"""
NODECONF CORE MODELS
--------------------
Defines the fundamental data structures used across the NodeConf readers.
A NodeConfiguration is the ordered list of node descriptors that the
connection layer later turns into peers.

Author: NodeConf Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import Iterator, List


class InvalidDescriptorError(ValueError):
    """Raised by NodeConfiguration.add_entry for an unusable descriptor."""


class NodeConfigFormatError(ValueError):
    """Raised when a structured source (YAML) has the wrong shape."""


@dataclass(frozen=True)
class NodeEntry:
    """
    The atomic unit of a node configuration.

    A NodeEntry is one raw descriptor together with its position in the
    configuration. The descriptor is opaque: no address parsing happens here.
    """
    index: int              # Zero-based position in the configuration
    descriptor: str         # The raw token (hostname, address, identifier)


@dataclass
class NodeConfiguration:
    """
    Ordered collection of node entries, built incrementally.

    Insertion order is preserved and duplicates are kept as separate entries.
    """
    entries: List[NodeEntry] = field(default_factory=list)

    def add_entry(self, descriptor: str) -> NodeEntry:
        """
        Appends a raw descriptor as the next entry.

        Only tokenization-level checks are made: the descriptor must be a
        non-empty string without whitespace.
        """
        if not isinstance(descriptor, str):
            raise InvalidDescriptorError(
                f"Descriptor must be a string, got {type(descriptor).__name__}"
            )
        if not descriptor:
            raise InvalidDescriptorError("Descriptor must not be empty")
        if any(char.isspace() for char in descriptor):
            raise InvalidDescriptorError(
                f"Descriptor '{descriptor}' contains whitespace"
            )

        entry = NodeEntry(index=len(self.entries), descriptor=descriptor)
        self.entries.append(entry)
        return entry

    def descriptors(self) -> List[str]:
        """Raw descriptors in entry order."""
        return [entry.descriptor for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[NodeEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> NodeEntry:
        return self.entries[index]

    def __str__(self) -> str:
        noun = "entry" if len(self.entries) == 1 else "entries"
        lines = [f"Node configuration ({len(self.entries)} {noun}):"]
        for entry in self.entries:
            lines.append(f"  [{entry.index}] {entry.descriptor}")
        return "\n".join(lines)
