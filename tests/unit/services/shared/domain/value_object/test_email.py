import pytest

from services.shared.domain import Email


class TestEmail:
    """Email のテスト"""

    def test_matches_ignores_case(self):
        """大文字小文字を無視して一致判定する"""
        email = Email("A@X.com")
        assert email.matches("a@x.COM")
        assert not email.matches("b@x.com")

    def test_value_is_kept_as_entered(self):
        email = Email("  A@X.com ")
        assert email.value == "A@X.com"
        assert email.normalized == "a@x.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a b@x.com"])
    def test_invalid_email_raises_error(self, value):
        with pytest.raises(ValueError, match="Invalid email address"):
            Email(value)
