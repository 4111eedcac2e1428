"""PDF generation infrastructure."""

from src.infrastructure.pdf.daily_snapshot_renderer import Fpdf2DailySnapshotRenderer

__all__ = [
    "Fpdf2DailySnapshotRenderer",
]
