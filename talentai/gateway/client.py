"""Builds the AI gateway from environment configuration."""

import os

from dotenv import load_dotenv
from groq import AsyncGroq

from talentai.gateway.groq_gateway import GroqGateway

load_dotenv()

DEFAULT_PARSE_MODEL = "llama-3.1-8b-instant"
DEFAULT_RANK_MODEL = "llama-3.3-70b-versatile"
DEFAULT_CHAT_MODEL = "llama-3.1-8b-instant"


def create_gateway() -> GroqGateway:
    """Create a GroqGateway from environment variables.

    Without GROQ_API_KEY the gateway is still returned, but every call raises
    GatewayError so callers fall back to their degraded values.
    """
    api_key = os.environ.get("GROQ_API_KEY")
    client = AsyncGroq(api_key=api_key) if api_key else None

    return GroqGateway(
        client=client,
        parse_model=os.environ.get("GROQ_PARSE_MODEL", DEFAULT_PARSE_MODEL),
        rank_model=os.environ.get("GROQ_RANK_MODEL", DEFAULT_RANK_MODEL),
        chat_model=os.environ.get("GROQ_CHAT_MODEL", DEFAULT_CHAT_MODEL)
    )


gateway = create_gateway()
