"""System-wide constants"""

# Utilization bands (percent of shelf width)
UNDERUTILIZED_THRESHOLD = 70.0
OPTIMAL_THRESHOLD = 85.0
OVERUTILIZED_THRESHOLD = 100.0

# Gap sizing (cm)
MIN_SIGNIFICANT_GAP_WIDTH = 2.0
MAJOR_GAP_WIDTH = 20.0

# Fallback per-facing width when a slot omits one (cm)
DEFAULT_PRODUCT_WIDTH = 10.0

# Policy flags
STRICT_MODE = True
ALLOW_OVERLAP = False

# Advisory texts attached to warnings and actions
SUGGESTION_LARGE_GAP = "Consider redistributing products to reduce this empty space"
SUGGESTION_UNDERUTILIZED = "Consider adding more products or increasing facings"
SUGGESTION_EYE_LEVEL = "Eye level is a premium position - maximize its use"
SUGGESTION_TIGHT_FIT = "Little room left for restocking or new products"
REASON_REMOVE_GAP = "Remove unnecessary gap"
REASON_INCREASE_FACINGS = "Increase facings for better use of shelf space"
