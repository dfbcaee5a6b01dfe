"""Console output capture: channels, shim, sink, and rendering."""

from .capture import CaptureShim
from .channels import CHANNEL_KINDS, CHANNEL_NAMES, ConsoleChannels
from .formatting import format_call, stringify
from .highlight import highlight, render_entries
from .sink import OutputEntry, OutputKind, OutputSink

__all__ = [
    "CHANNEL_KINDS",
    "CHANNEL_NAMES",
    "CaptureShim",
    "ConsoleChannels",
    "OutputEntry",
    "OutputKind",
    "OutputSink",
    "format_call",
    "highlight",
    "render_entries",
    "stringify",
]
