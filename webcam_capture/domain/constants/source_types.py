"""Camera source type tags"""


class SourceTypes:
    """Values of Camera.source_type understood by the capture pipeline"""
    # Direct image endpoint
    ROUNDSHOT = "roundshot"
    # Embed page that has to be rendered to a screenshot first
    VERKADA = "verkada"
