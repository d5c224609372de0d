from pixcheckout.models.billing import Billing, BillingStatus


class TestBilling:
    def test_defaults(self):
        billing = Billing(customer_id="c1", amount=990)
        assert billing.status == "PENDING"
        assert billing.payment_method == "PIX"
        assert billing.external_payment_id is None
        assert billing.is_paid is False

    def test_is_paid(self):
        assert Billing(customer_id="c1", status=BillingStatus.PAID.value).is_paid is True

    def test_provider_status_kept_verbatim(self):
        billing = Billing(customer_id="c1", status="UNDER_REVIEW")
        assert billing.status == "UNDER_REVIEW"
        assert billing.is_paid is False

    def test_dumps_camel_case(self):
        billing = Billing(id="b1", customer_id="c1", amount=990, pix_code="000201", qr_code_url="data:")
        data = billing.model_dump(mode="json", by_alias=True)
        assert data["customerId"] == "c1"
        assert data["pixCode"] == "000201"
        assert data["qrCodeUrl"] == "data:"
        assert data["paymentMethod"] == "PIX"
