"""Tests for the daily snapshot PDF renderer."""

import zlib
from datetime import date, time
from decimal import Decimal

import pytest

from src.config.settings import PdfSettings
from src.core.entities.report import (
    DailySnapshotDocument,
    DailySnapshotRow,
    ReportSummary,
)
from src.infrastructure.pdf import Fpdf2DailySnapshotRenderer


def _extract_pdf_text(pdf_bytes: bytes) -> str:
    """Decompress FlateDecode streams in *pdf_bytes* and return all text."""
    texts = [pdf_bytes.decode("latin-1")]
    start_marker = b"stream\n"
    end_marker = b"\nendstream"
    idx = 0
    while True:
        s = pdf_bytes.find(start_marker, idx)
        if s == -1:
            break
        s += len(start_marker)
        e = pdf_bytes.find(end_marker, s)
        if e == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[s:e]).decode("latin-1", errors="replace"))
        except zlib.error:
            pass
        idx = e + len(end_marker)
    return "\n".join(texts)


@pytest.fixture
def pdf_settings() -> PdfSettings:
    return PdfSettings(
        shop_name="Test Shop",
        shop_address="12 MG Road",
        shop_phone="080-1234",
        footer_text="Test Footer",
    )


@pytest.fixture
def document() -> DailySnapshotDocument:
    return DailySnapshotDocument(
        title="Daily Report - 10 Mar 2024",
        shop_name="Test Shop",
        snapshot_date=date(2024, 3, 10),
        rows=[
            DailySnapshotRow(
                time=time(9, 30),
                payment_method="PhonePe",
                description="Multi-service: Black (10x), Lamination (1x)",
                quantity=11,
                cost=Decimal("40"),
                discount=Decimal("0"),
                final_cost=Decimal("40"),
            ),
            DailySnapshotRow(
                time=time(14, 5),
                payment_method="Cash",
                description="Xerox",
                quantity=10,
                cost=Decimal("20"),
                discount=Decimal("5"),
                final_cost=Decimal("15"),
                customer="Ravi (98450)",
            ),
        ],
        summary=ReportSummary(
            total_revenue=Decimal("55"),
            transaction_count=2,
            average_transaction=Decimal("27.50"),
        ),
        by_payment_method={"Cash": Decimal("15"), "PhonePe": Decimal("40")},
        total_quantity=21,
    )


class TestFpdf2DailySnapshotRenderer:
    """Tests for Fpdf2DailySnapshotRenderer."""

    def test_renders_pdf_bytes(self, pdf_settings, document):
        pdf = Fpdf2DailySnapshotRenderer(pdf_settings).render(document)

        assert isinstance(pdf, bytes)
        assert pdf.startswith(b"%PDF")

    def test_contains_report_text(self, pdf_settings, document):
        text = _extract_pdf_text(Fpdf2DailySnapshotRenderer(pdf_settings).render(document))

        assert "Test Shop" in text
        assert "Daily Report - 10 Mar 2024" in text
        assert "Total Revenue" in text
        assert "Rs. 55.00" in text
        assert "Test Footer" in text

    def test_output_is_deterministic(self, pdf_settings, document):
        renderer = Fpdf2DailySnapshotRenderer(pdf_settings)
        assert renderer.render(document) == renderer.render(document)

    def test_empty_day(self, pdf_settings):
        doc = DailySnapshotDocument(
            title="Daily Report - 11 Mar 2024",
            shop_name="Test Shop",
            snapshot_date=date(2024, 3, 11),
            summary=ReportSummary(),
        )
        text = _extract_pdf_text(Fpdf2DailySnapshotRenderer(pdf_settings).render(doc))
        assert "No transactions recorded" in text

    def test_non_latin_text_does_not_fail(self, pdf_settings, document):
        document.rows[1].customer = "Ravi ₹ रवि"
        pdf = Fpdf2DailySnapshotRenderer(pdf_settings).render(document)
        assert pdf.startswith(b"%PDF")

    def test_many_rows_paginate(self, pdf_settings, document):
        document.rows = document.rows * 60
        text = _extract_pdf_text(Fpdf2DailySnapshotRenderer(pdf_settings).render(document))
        assert "Page 2 of" in text
