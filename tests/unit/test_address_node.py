"""Unit tests for AddressNode."""
from src.nodes.address import AddressNode


def _state(block):
    return {
        "blocks": [None, None, block, None],
        "fields": {},
        "missing_fields": [],
        "trajectory": [],
    }


class TestAddressNodeHappyPath:
    def test_plain_address(self):
        result = AddressNode()(_state("Av. Principal 123, esquina Calle Secundaria"))
        assert result["fields"] == {"recipient_address": "Av. Principal 123, esquina Calle Secundaria"}
        assert result["missing_fields"] == []

    def test_gps_url_removed_from_address(self):
        result = AddressNode()(_state("Av. Principal 123 https://maps.google.com/xyz"))
        assert result["fields"]["recipient_address"] == "Av. Principal 123"
        assert result["fields"]["gps_url"] == "https://maps.google.com/xyz"

    def test_any_label_before_colon_dropped(self):
        result = AddressNode()(_state("Dirección exacta: Av. Principal 123"))
        assert result["fields"]["recipient_address"] == "Av. Principal 123"

    def test_unknown_label_dropped(self):
        result = AddressNode()(_state("Ubicación de la casa: Calle 5"))
        assert result["fields"]["recipient_address"] == "Calle 5"

    def test_label_and_gps(self):
        result = AddressNode()(_state("Dirección: Calle 5 y Olmedo\nhttps://goo.gl/maps/abc\ncasa azul"))
        assert result["fields"]["gps_url"] == "https://goo.gl/maps/abc"
        assert result["fields"]["recipient_address"] == "Calle 5 y Olmedo casa azul"

    def test_newlines_collapsed(self):
        result = AddressNode()(_state("Av. Principal 123\n  esquina\tCalle 2"))
        assert result["fields"]["recipient_address"] == "Av. Principal 123 esquina Calle 2"


class TestAddressNodeMissing:
    def test_only_gps_flags_address_missing(self):
        result = AddressNode()(_state("https://maps.app.goo.gl/xyz"))
        assert result["fields"] == {"gps_url": "https://maps.app.goo.gl/xyz"}
        assert result["missing_fields"] == ["recipient_address"]

    def test_label_only_flags_missing(self):
        result = AddressNode()(_state("Dirección: \n"))
        assert result["fields"] == {}
        assert result["missing_fields"] == ["recipient_address"]

    def test_missing_block(self):
        result = AddressNode()({"blocks": [None, None], "trajectory": []})
        assert result["missing_fields"] == ["recipient_address"]

    def test_trajectory_updated(self):
        result = AddressNode()(_state("Calle 5"))
        assert result["trajectory"] == ["address"]
