"""Renderer module - export code and live preview from render units."""

from skeletonne.renderer.code_generator import CodeGenerator, block_classes, generate_code
from skeletonne.renderer.preview import PreviewLayout, build_preview, render_preview_html

__all__ = [
    "CodeGenerator",
    "block_classes",
    "generate_code",
    "PreviewLayout",
    "build_preview",
    "render_preview_html",
]
