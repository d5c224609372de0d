import logging

from pixcheckout.gateway.base import PaymentGateway
from pixcheckout.settings import Settings, settings

logger = logging.getLogger(__name__)


def get_gateway(config: Settings | None = None) -> PaymentGateway:
    from pixcheckout.gateway.abacatepay import AbacatePayGateway

    config = config or settings
    if config.gateway_configured:
        logger.info("Using payment gateway: abacatepay url=%s", config.abacatepay_base_url)
    else:
        logger.warning(
            "PIXCHECKOUT_ABACATEPAY_API_KEY not set; payment features are disabled. "
            "Set it in your environment or .env file."
        )
    return AbacatePayGateway(
        api_key=config.abacatepay_api_key,
        base_url=config.abacatepay_base_url,
        timeout=config.abacatepay_timeout,
    )
