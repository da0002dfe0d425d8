"""AI gateway capability used for resume parsing, ranking, chat and offer letters."""

from talentai.gateway.base import AIGateway, GatewayError

__all__ = ["AIGateway", "GatewayError"]
