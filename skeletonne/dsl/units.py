"""
units.py — Spacing-scale tables and layout constants.

This is the foundation module. All token lookups go through these tables.
Never hardcode scale steps anywhere else in the codebase.

The scale follows the Tailwind spacing vocabulary: step N = N * 4px.
"""

# =============================================================================
# PERCENTAGE BREAKPOINTS (both axes)
# =============================================================================

PERCENT_FRACTIONS: dict[int, str] = {
    100: "full",
    75: "3/4",
    66: "2/3",
    60: "3/5",
    50: "1/2",
    40: "2/5",
    33: "1/3",
    25: "1/4",
    20: "1/5",
    16: "1/6",
}

# =============================================================================
# PIXEL SCALES
# =============================================================================

# 4px-aligned through 64px, then sparse
HEIGHT_PX_STEPS: dict[int, str] = {
    4: "1",
    8: "2",
    12: "3",
    16: "4",
    20: "5",
    24: "6",
    28: "7",
    32: "8",
    36: "9",
    40: "10",
    44: "11",
    48: "12",
    56: "14",
    64: "16",
    80: "20",
    96: "24",
    112: "28",
    128: "32",
}

# Wider table: starts at 16px, sparse past 128px up to 384px
WIDTH_PX_STEPS: dict[int, str] = {
    16: "4",
    20: "5",
    24: "6",
    32: "8",
    40: "10",
    48: "12",
    56: "14",
    64: "16",
    80: "20",
    96: "24",
    112: "28",
    128: "32",
    144: "36",
    160: "40",
    176: "44",
    192: "48",
    208: "52",
    224: "56",
    240: "60",
    256: "64",
    288: "72",
    320: "80",
    384: "96",
}

# =============================================================================
# CLASS PREFIXES
# =============================================================================

WIDTH_PREFIX = "w-"
HEIGHT_PREFIX = "h-"

PERCENT_SUFFIX = "%"
PIXEL_SUFFIX = "px"

# =============================================================================
# ROW WIDTHS
# =============================================================================

FULL_WIDTH_PERCENT = 100.0
SHARE_DECIMALS = 4  # "33.3333%"


def format_share(count: int) -> str:
    """Equal share of a row's width for one of ``count`` members."""
    return f"{FULL_WIDTH_PERCENT / count:.{SHARE_DECIMALS}f}{PERCENT_SUFFIX}"


def parse_percent(value: str) -> float | None:
    """Numeric value of a ``"NN%"`` string, or None if it is not one."""
    if not value.endswith(PERCENT_SUFFIX):
        return None
    try:
        return float(value[: -len(PERCENT_SUFFIX)])
    except ValueError:
        return None
