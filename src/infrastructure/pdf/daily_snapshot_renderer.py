"""
Daily snapshot PDF renderer using fpdf2.

Prints the day's transactions as a bordered table with shaded rows,
followed by per payment method totals and the day summary. Output is
byte-for-byte stable for a given document: the PDF creation date and the
footer both carry the snapshot date instead of the wall clock.
"""

from datetime import datetime, time, timezone
from decimal import Decimal

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config.settings import PdfSettings, get_settings
from src.core.entities.report import DailySnapshotDocument
from src.core.services.print_formatter import IDailySnapshotRenderer

CURRENCY = "Rs."


def _latin1(text: str) -> str:
    """Replace characters the core PDF fonts cannot encode with '?'."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _money(amount: Decimal) -> str:
    return f"{CURRENCY} {amount:,.2f}"


# ---------------------------------------------------------------------------
# Custom FPDF subclass with page-number footer
# ---------------------------------------------------------------------------


class _SnapshotPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings, snapshot_label: str) -> None:
        super().__init__()
        self._pdf_settings = pdf_settings
        self._snapshot_label = snapshot_label

    def footer(self) -> None:
        """Render footer text, page numbers and the snapshot date."""
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _latin1(self._pdf_settings.footer_text), align="L")
        self.set_x(-60)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._snapshot_label}",
            align="R",
        )


# ---------------------------------------------------------------------------
# Concrete renderer
# ---------------------------------------------------------------------------


class Fpdf2DailySnapshotRenderer(IDailySnapshotRenderer):
    """Renders the printable daily report with fpdf2."""

    COLUMNS = (
        ("Time", 18, "C"),
        ("Payment", 20, "C"),
        ("Description", 62, "L"),
        ("Qty", 12, "R"),
        ("Cost", 26, "R"),
        ("Discount", 26, "R"),
        ("Final", 26, "R"),
    )

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._settings = pdf_settings

    def render(self, document: DailySnapshotDocument) -> bytes:
        """Render a DailySnapshotDocument into PDF bytes."""
        pdf = _SnapshotPdf(self._settings, document.snapshot_date.isoformat())
        pdf.set_creation_date(
            datetime.combine(document.snapshot_date, time(), tzinfo=timezone.utc)
        )
        pdf.set_title(_latin1(document.title))
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        self._render_header(pdf, document)
        self._render_table(pdf, document)
        self._render_totals(pdf, document)

        return bytes(pdf.output())

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _render_header(self, pdf: FPDF, document: DailySnapshotDocument) -> None:
        """Shop name, contact line and report title."""
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(
            0, 9, _latin1(document.shop_name), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

        contact = " | ".join(
            part for part in (
                self._settings.shop_address,
                f"Tel: {self._settings.shop_phone}" if self._settings.shop_phone else "",
            ) if part
        )
        if contact:
            pdf.set_font("Helvetica", "", 9)
            pdf.cell(
                0, 5, _latin1(contact), align="C",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )

        pdf.ln(3)
        pdf.set_font("Helvetica", "B", 13)
        pdf.cell(
            0, 8, _latin1(document.title), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

        y = pdf.get_y() + 1
        pdf.set_draw_color(100, 100, 100)
        pdf.line(10, y, 200, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(5)

    def _render_table(self, pdf: FPDF, document: DailySnapshotDocument) -> None:
        """Transaction rows with alternating shading."""
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for title, width, _ in self.COLUMNS:
            pdf.cell(width, 7, title, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        pdf.set_font("Helvetica", "", 8)
        if not document.rows:
            pdf.cell(
                sum(w for _, w, _ in self.COLUMNS), 7,
                "No transactions recorded", border=1, align="C",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )
            pdf.ln(3)
            return

        for idx, row in enumerate(document.rows, 1):
            fill = idx % 2 == 0
            if fill:
                pdf.set_fill_color(240, 240, 240)

            description = row.description
            if row.customer:
                description = f"{description} [{row.customer}]"

            values = (
                row.time.strftime("%H:%M"),
                row.payment_method,
                _latin1(description[:48]),
                str(row.quantity),
                f"{row.cost:,.2f}",
                f"{row.discount:,.2f}",
                f"{row.final_cost:,.2f}",
            )
            for (_, width, align), value in zip(self.COLUMNS, values):
                pdf.cell(width, 6, value, border=1, align=align, fill=fill)
            pdf.ln()

        pdf.ln(3)

    @staticmethod
    def _render_totals(pdf: FPDF, document: DailySnapshotDocument) -> None:
        """Per payment method totals, quantity and the day summary."""
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(0, 7, "Summary", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 10)

        for method, amount in document.by_payment_method.items():
            pdf.cell(120, 6, f"{method}:", align="R")
            pdf.cell(0, 6, _money(amount), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.cell(120, 6, "Transactions:", align="R")
        pdf.cell(
            0, 6, str(document.summary.transaction_count),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.cell(120, 6, "Items / pages:", align="R")
        pdf.cell(
            0, 6, str(document.total_quantity),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.cell(120, 6, "Average sale:", align="R")
        pdf.cell(
            0, 6, _money(document.summary.average_transaction),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(120, 8, "Total Revenue:", align="R")
        pdf.cell(
            0, 8, _money(document.summary.total_revenue),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
