from zoneinfo import ZoneInfo

SP_TZ = ZoneInfo("America/Sao_Paulo")

PAYMENT_METHOD_PIX = "PIX"

# Single product sold through the checkout.
CHECKOUT_AMOUNT = 990  # centavos
CHECKOUT_DESCRIPTION = "Confeitaria Lucrativa - Curso Completo"
PIX_EXPIRES_IN = 86400  # 24 hours in seconds
