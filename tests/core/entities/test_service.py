"""Unit tests for service catalog entities."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.entities.service import (
    ColorType,
    PaperOrientation,
    Service,
    ServiceType,
)


class TestServiceType:
    """Tests for ServiceType enum."""

    def test_all_categories_present(self):
        values = {t.value for t in ServiceType}
        assert values == {
            "xerox",
            "scanning",
            "net_printing",
            "spiral_binding",
            "lamination",
            "rubber_stamps",
        }

    def test_labels(self):
        assert ServiceType.XEROX.label == "Xerox"
        assert ServiceType.NET_PRINTING.label == "Net Printing"
        assert ServiceType.RUBBER_STAMPS.label == "Rubber Stamps"


class TestService:
    """Tests for Service entity."""

    def test_minimal_service(self):
        service = Service(
            id="scanning-a4",
            service_type=ServiceType.SCANNING,
            name="Scanning",
            price=Decimal("5"),
        )
        assert service.color_type is None
        assert service.paper_orientation is None
        assert service.created_at is not None

    def test_price_accepts_string(self):
        service = Service(
            id="s", service_type=ServiceType.SCANNING, name="Scan", price="7.50"
        )
        assert service.price == Decimal("7.50")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Service(id="s", service_type=ServiceType.SCANNING, name="Scan", price=-1)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Service(id="s", service_type=ServiceType.SCANNING, name="", price=1)

    def test_color_type_allowed_for_xerox_and_net_printing(self):
        xerox = Service(
            id="x",
            service_type=ServiceType.XEROX,
            name="Color",
            price=10,
            color_type=ColorType.COLOR,
            paper_orientation=PaperOrientation.BOTH_SIDES,
        )
        net = Service(
            id="n",
            service_type=ServiceType.NET_PRINTING,
            name="Net",
            price=5,
            color_type=ColorType.BLACK_WHITE,
        )
        assert xerox.color_type == ColorType.COLOR
        assert net.color_type == ColorType.BLACK_WHITE

    def test_color_type_rejected_for_lamination(self):
        with pytest.raises(ValidationError, match="color_type"):
            Service(
                id="l",
                service_type=ServiceType.LAMINATION,
                name="Lamination",
                price=20,
                color_type=ColorType.COLOR,
            )

    def test_orientation_rejected_outside_xerox(self):
        with pytest.raises(ValidationError, match="paper_orientation"):
            Service(
                id="n",
                service_type=ServiceType.NET_PRINTING,
                name="Net",
                price=5,
                paper_orientation=PaperOrientation.SINGLE_SIDE,
            )

    def test_display_name_appends_paper_size(self, xerox_a4):
        assert xerox_a4.display_name == "Black (A4)"

    def test_display_name_without_size(self, spiral_binding):
        assert spiral_binding.display_name == "Spiral Binding"

    def test_display_name_does_not_repeat_size(self):
        service = Service(
            id="l", service_type=ServiceType.LAMINATION,
            name="Lamination A4", price=20, paper_size="A4",
        )
        assert service.display_name == "Lamination A4"
