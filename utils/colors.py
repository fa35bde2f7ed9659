# Categorical palette for cancer types (30 distinct hues).
# Teal/rose lead so the first few selections read as the dashboard's accent colors.
PALETTE = [
    "#0d9488",  # Teal 600
    "#f43f5e",  # Rose 500
    "#3b82f6",  # Blue 500
    "#eab308",  # Yellow 500
    "#8b5cf6",  # Violet 500
    "#f97316",  # Orange 500
    "#06b6d4",  # Cyan 500
    "#ec4899",  # Pink 500
    "#10b981",  # Emerald 500
    "#6366f1",  # Indigo 500
    "#d946ef",  # Fuchsia 500
    "#f59e0b",  # Amber 500
    "#14b8a6",  # Teal 500
    "#0ea5e9",  # Sky 500
    "#84cc16",  # Lime 500
    "#ef4444",  # Red 500
    "#064e3b",  # Emerald 900
    "#4338ca",  # Indigo 700
    "#be185d",  # Pink 700
    "#a21caf",  # Fuchsia 700
    "#1e40af",  # Blue 800
    "#15803d",  # Green 700
    "#b45309",  # Amber 700
    "#7c3aed",  # Violet 600
    "#db2777",  # Pink 600
    "#0891b2",  # Cyan 600
    "#059669",  # Emerald 600
    "#78350f",  # Amber 900
    "#4c1d95",  # Violet 900
    "#9f1239",  # Rose 800
]

# Chart chrome
LIGHT_GRID = "#e2e8f0"
LIGHT_TEXT = "#64748b"
DARK_TEXT = "#0f172a"

# Treemap severity scale (white -> dark red, highest rate darkest)
SEVERITY_SCALE = "Reds"


def color_for(index: int, palette=PALETTE) -> str:
    """Stable color for the i-th selected cancer type."""
    return palette[index % len(palette)]

