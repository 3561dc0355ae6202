"""
preview.py — Live preview model for the editor.

The preview shows dimensions exactly as typed (inline styles) instead of
scale tokens, so an unmapped value still previews correctly. Grouping comes
from ``group_elements``, the same call the code generator uses.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Iterable, List, Optional, Union

from skeletonne.dsl.schema import Row, SkeletonElement, Standalone
from skeletonne.engine.grouping import group_elements
from skeletonne.engine.tokens import background_class, radius_class

PREVIEW_STACK_CLASSES = "space-y-4"
PREVIEW_ROW_CLASSES = "flex items-start gap-1 w-full"
PREVIEW_ROW_MEMBER_CLASS = "flex-shrink-0"


@dataclass
class PreviewBlock:
    """One block as the preview paints it."""
    id: str
    classes: str
    style: dict[str, str] = field(default_factory=dict)

    def style_attribute(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.style.items())


@dataclass
class PreviewUnit:
    """A standalone block or a row container."""
    kind: str                              # "standalone" or "row"
    key: str                               # element id or row key
    blocks: List[PreviewBlock]
    classes: Optional[str] = None          # row container classes


@dataclass
class PreviewLayout:
    """Everything the preview pane needs, in render order."""
    units: List[PreviewUnit]
    source_units: List[Union[Standalone, Row]] = field(default_factory=list, repr=False)

    @property
    def block_count(self) -> int:
        return sum(len(u.blocks) for u in self.units)


def _preview_block(element: SkeletonElement, in_row: bool) -> PreviewBlock:
    parts = ["animate-pulse"]
    if in_row:
        parts.append(PREVIEW_ROW_MEMBER_CLASS)
    parts.append(radius_class(element.border_radius))
    bg = background_class(element.color)
    if bg:
        parts.append(bg)

    style = {"width": element.width, "height": element.height}
    if element.color:
        style["background-color"] = element.color

    return PreviewBlock(id=element.id, classes=" ".join(parts), style=style)


def build_preview(elements: Iterable[SkeletonElement]) -> PreviewLayout:
    """Build the preview model for an element list."""
    units = group_elements(elements)
    preview_units: List[PreviewUnit] = []

    for unit in units:
        if isinstance(unit, Standalone):
            preview_units.append(
                PreviewUnit(
                    kind=unit.type,
                    key=unit.element.id,
                    blocks=[_preview_block(unit.element, in_row=False)],
                )
            )
        elif isinstance(unit, Row):
            preview_units.append(
                PreviewUnit(
                    kind=unit.type,
                    key=unit.key,
                    blocks=[_preview_block(e, in_row=True) for e in unit.elements],
                    classes=PREVIEW_ROW_CLASSES,
                )
            )

    return PreviewLayout(units=preview_units, source_units=units)


def render_preview_html(elements: Iterable[SkeletonElement]) -> str:
    """Render the preview as an HTML fragment with inline styles."""
    layout = build_preview(elements)
    lines = [f'<div class="{PREVIEW_STACK_CLASSES}">']

    for unit in layout.units:
        indent = "  "
        if unit.kind == "row":
            lines.append(f'  <div class="{unit.classes}" data-row="{escape(unit.key)}">')
            indent = "    "
        for block in unit.blocks:
            lines.append(
                f'{indent}<div class="{escape(block.classes)}" '
                f'style="{escape(block.style_attribute())}"></div>'
            )
        if unit.kind == "row":
            lines.append("  </div>")

    lines.append("</div>")
    return "\n".join(lines)
