import pytest

from services.booking.domain.value_object import Pnr


class TestPnr:
    """Pnr のテスト"""

    @pytest.mark.parametrize("length", [6, 8])
    def test_generate_supported_lengths(self, length):
        pnr = Pnr.generate(length)
        assert len(pnr.value) == length
        assert Pnr.PATTERN.match(pnr.value)

    def test_unsupported_length_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported PNR length: 7"):
            Pnr.generate(7)

    def test_lowercase_is_normalized(self):
        assert Pnr("abc123").value == "ABC123"

    @pytest.mark.parametrize("value", ["ABC12", "ABC1234", "ABC-12"])
    def test_invalid_format_raises_error(self, value):
        with pytest.raises(ValueError, match="Invalid PNR format"):
            Pnr(value)
