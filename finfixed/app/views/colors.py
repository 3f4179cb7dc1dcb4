# Define a static color class for consistent use across the app


class Colors:
    # Primary (Emerald, the FinFixed brand color)
    emerald = "#10b981"  # Emerald 500

    # Secondary (Teal, used for profitability)
    teal = "#14b8a6"  # Teal 500

    # Neutral
    gray = "#6b7280"  # Axis lines
    dark_gray = "#1f2937"  # Hover label background


# Chart colors per dataset
VALUATION_COLOR = Colors.emerald
PROFITABILITY_COLOR = Colors.teal
