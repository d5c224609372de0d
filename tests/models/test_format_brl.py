from pixcheckout.models import format_brl, only_digits


class TestFormatBrl:
    def test_zero(self):
        assert format_brl(0) == "R$ 0,00"

    def test_checkout_price(self):
        assert format_brl(990) == "R$ 9,90"

    def test_thousands(self):
        assert format_brl(285000) == "R$ 2.850,00"


class TestOnlyDigits:
    def test_phone(self):
        assert only_digits("(11) 99999-9999") == "11999999999"

    def test_cpf(self):
        assert only_digits("123.456.789-01") == "12345678901"

    def test_empty(self):
        assert only_digits("") == ""
