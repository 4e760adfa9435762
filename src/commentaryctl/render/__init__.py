from .exporter import PlainTextExporter, export_plain_text
from .renderer import RenderedBlock, prefix_line, render, strip_title

__all__ = ["PlainTextExporter", "RenderedBlock", "export_plain_text", "prefix_line", "render", "strip_title"]
