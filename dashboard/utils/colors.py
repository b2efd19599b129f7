"""Centralised color scheme for the dashboard.

All status badges and accents should use colors from this module to ensure consistency.
"""

# Primary status colors
COLOR_GOOD = "#28a745"  # Green - good/success
COLOR_CRITICAL = "#dc3545"  # Red - critical/bad

# Neutral colors
COLOR_TEXT_SECONDARY = "#6c757d"  # Secondary text (location, captions)

# Discrete color mappings
COLOR_MAP_STATUS = {
    True: COLOR_GOOD,
    False: COLOR_CRITICAL,
}
