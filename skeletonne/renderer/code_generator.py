"""
code_generator.py — Export a skeleton design as markup.

This generator consumes render units from ``group_elements`` and produces
source text. It NEVER groups elements itself; the live preview and the export
share one grouping so they cannot disagree.

Targets:
1. TSX — a ``SkeletonLoader`` React component built from Skeleton/Card
2. HTML — the same tree as plain ``<div>`` elements
"""

from html import escape
from typing import Iterable, Optional, Union

from skeletonne.dsl.schema import (
    Axis,
    ExportFormat,
    Row,
    SkeletonElement,
    Standalone,
)
from skeletonne.engine.grouping import group_elements
from skeletonne.engine.tokens import (
    background_class,
    radius_class,
    to_tailwind_class,
)


# =============================================================================
# CONSTANTS
# =============================================================================

PULSE_CLASS = "animate-pulse"
ROW_MEMBER_CLASSES = "flex-1 min-w-0"
STACK_CLASSES = "space-y-4"
ROW_CLASSES = "flex items-start gap-4 w-full"
CARD_PADDING_CLASS = "p-6"

INDENT = "  "

TSX_HEADER = (
    'import { Skeleton } from "@/components/ui/skeleton";\n'
    'import { Card, CardContent } from "@/components/ui/card";\n'
    "\n"
    "export const SkeletonLoader = () => {\n"
    "  return (\n"
    "    <Card>\n"
    f'      <CardContent className="{CARD_PADDING_CLASS}">'
)
TSX_FOOTER = "      </CardContent>\n" "    </Card>\n" "  );\n" "};"


# =============================================================================
# CLASS HELPERS
# =============================================================================


def block_classes(element: SkeletonElement, in_row: bool = False) -> str:
    """Utility classes for one skeleton block."""
    parts: list[Optional[str]] = [PULSE_CLASS]
    if in_row:
        parts.append(ROW_MEMBER_CLASSES)
    parts.append(radius_class(element.border_radius))
    parts.append(background_class(element.color))
    parts.append(to_tailwind_class(element.width, Axis.WIDTH))
    parts.append(to_tailwind_class(element.height, Axis.HEIGHT))
    return " ".join(p for p in parts if p)


# =============================================================================
# CODE GENERATOR
# =============================================================================


class CodeGenerator:
    """
    Renders a skeleton element list to export text.

    The generator is stateless — each generate() call builds new text from the
    element list alone.
    """

    def __init__(self, export_format: Union[ExportFormat, str] = ExportFormat.TSX):
        self.export_format = ExportFormat(export_format)

    def render_units(self, elements: Iterable[SkeletonElement]) -> list[Union[Standalone, Row]]:
        """Render units used for export (identical to the preview's)."""
        return group_elements(elements)

    def generate(self, elements: Iterable[SkeletonElement]) -> str:
        """
        Generate export code.

        Args:
            elements: Master element list in rendering order

        Returns:
            Source text for the configured format
        """
        units = self.render_units(elements)
        if self.export_format == ExportFormat.HTML:
            return self._render_html(units)
        return self._render_tsx(units)

    # -------------------------------------------------------------------------
    # TSX
    # -------------------------------------------------------------------------

    def _render_tsx(self, units: list[Union[Standalone, Row]]) -> str:
        lines = [TSX_HEADER, f'{INDENT * 4}<div className="{STACK_CLASSES}">']
        for unit in units:
            lines.extend(self._tsx_unit(unit, depth=5))
        lines.append(f"{INDENT * 4}</div>")
        lines.append(TSX_FOOTER)
        return "\n".join(lines)

    def _tsx_unit(self, unit: Union[Standalone, Row], depth: int) -> list[str]:
        if isinstance(unit, Standalone):
            return [self._tsx_block(unit.element, depth)]

        lines = [f'{INDENT * depth}<div className="{ROW_CLASSES}">']
        for element in unit.elements:
            lines.append(self._tsx_block(element, depth + 1, in_row=True))
        lines.append(f"{INDENT * depth}</div>")
        return lines

    def _tsx_block(self, element: SkeletonElement, depth: int, in_row: bool = False) -> str:
        classes = escape(block_classes(element, in_row), quote=True)
        return f'{INDENT * depth}<Skeleton className="{classes}" />'

    # -------------------------------------------------------------------------
    # HTML
    # -------------------------------------------------------------------------

    def _render_html(self, units: list[Union[Standalone, Row]]) -> str:
        lines = [
            f'<div class="{CARD_PADDING_CLASS}">',
            f'{INDENT}<div class="{STACK_CLASSES}">',
        ]
        for unit in units:
            lines.extend(self._html_unit(unit, depth=2))
        lines.append(f"{INDENT}</div>")
        lines.append("</div>")
        return "\n".join(lines)

    def _html_unit(self, unit: Union[Standalone, Row], depth: int) -> list[str]:
        if isinstance(unit, Standalone):
            return [self._html_block(unit.element, depth)]

        lines = [f'{INDENT * depth}<div class="{ROW_CLASSES}">']
        for element in unit.elements:
            lines.append(self._html_block(element, depth + 1, in_row=True))
        lines.append(f"{INDENT * depth}</div>")
        return lines

    def _html_block(self, element: SkeletonElement, depth: int, in_row: bool = False) -> str:
        classes = escape(block_classes(element, in_row), quote=True)
        return f'{INDENT * depth}<div class="{classes}"></div>'


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def generate_code(
    elements: Iterable[SkeletonElement],
    export_format: Union[ExportFormat, str] = ExportFormat.TSX,
) -> str:
    """
    Convenience function to export an element list.

    Args:
        elements: Master element list
        export_format: ``tsx`` or ``html``

    Returns:
        Export text
    """
    return CodeGenerator(export_format).generate(elements)
