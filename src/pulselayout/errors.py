"""Layout errors"""


class LayoutConfigError(ValueError):
    """Invalid layout configuration (caller mistake).

    Raised for a Ratio with a zero denominator at split time, and for
    dashboard layout data that fails validation.
    """
