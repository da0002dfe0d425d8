"""AI gateway backed by the Groq chat completions API."""

import json
import logging
from typing import Any, Dict, List, Optional

from groq import AsyncGroq
from pydantic import ValidationError

from talentai.constants import COMPANY_NAME, RESUME_TEXT_LIMIT
from talentai.gateway.base import GatewayError
from talentai.gateway.prompts import (
    CHAT_CONTEXT_SUFFIX,
    CHAT_NO_CONTEXT_SUFFIX,
    CHAT_SYSTEM_PROMPT,
    OFFER_LETTER_PROMPT,
    PARSE_RESUME_PROMPT,
    RANK_CANDIDATE_PROMPT
)
from talentai.models.job import Job
from talentai.models.screening import CandidateRanking, ChatMessage, ChatRole, ParsedResume

logger = logging.getLogger(__name__)


class GroqGateway:
    """Implements the AI gateway on top of an AsyncGroq client.

    Every failure (no client configured, API error, malformed JSON, schema
    mismatch) surfaces as GatewayError.

    Attributes:
        client: AsyncGroq client, or None when no API key is configured.
        parse_model: Model used for resume extraction.
        rank_model: Model used for candidate scoring.
        chat_model: Model used for chat and offer letters.
    """

    def __init__(
        self,
        client: Optional[AsyncGroq],
        parse_model: str,
        rank_model: str,
        chat_model: str
    ):
        self.client = client
        self.parse_model = parse_model
        self.rank_model = rank_model
        self.chat_model = chat_model

    async def parse_resume(self, text: str) -> ParsedResume:
        """Extract structured candidate fields from resume text.

        Args:
            text: Raw resume text; truncated before sending.

        Returns:
            ParsedResume with the extracted fields.

        Raises:
            GatewayError: If the model call fails or returns unusable JSON.
        """
        prompt = PARSE_RESUME_PROMPT.format(resume_text=text[:RESUME_TEXT_LIMIT])
        data = await self._complete_json(self.parse_model, prompt)

        try:
            return ParsedResume.model_validate(data)
        except ValidationError as error:
            raise GatewayError(f"Resume response did not match schema: {error}")

    async def rank_candidate(self, resume: ParsedResume, job: Job) -> CandidateRanking:
        """Score a parsed resume against a job.

        Raises:
            GatewayError: If the model call fails or returns unusable JSON.
        """
        prompt = RANK_CANDIDATE_PROMPT.format(
            title=job.title,
            requirements=", ".join(job.requirements),
            description=job.description,
            skills=", ".join(resume.skills),
            experience_years=resume.experience_years,
            summary=resume.summary
        )
        data = await self._complete_json(self.rank_model, prompt)

        try:
            score = min(max(int(round(float(data.get("score", 0)))), 0), 100)
            return CandidateRanking(score=score, reasoning=str(data.get("reasoning", "")))
        except (TypeError, ValueError) as error:
            raise GatewayError(f"Ranking response did not match schema: {error}")

    async def chat(self, history: List[ChatMessage], message: str, context: Optional[str] = None) -> str:
        """Answer an HR assistant chat message.

        Args:
            history: Previous turns, oldest first.
            message: New user message.
            context: Optional text describing the job or candidate in focus.

        Returns:
            The assistant's reply text.

        Raises:
            GatewayError: If the model call fails.
        """
        system_prompt = CHAT_SYSTEM_PROMPT.format(company=COMPANY_NAME)
        if context:
            system_prompt += CHAT_CONTEXT_SUFFIX.format(context=context)
        else:
            system_prompt += CHAT_NO_CONTEXT_SUFFIX

        messages = [{"role": "system", "content": system_prompt}]
        for turn in history:
            role = "assistant" if turn.role == ChatRole.MODEL else "user"
            messages.append({"role": role, "content": turn.text})
        messages.append({"role": "user", "content": message})

        return await self._complete(self.chat_model, messages)

    async def generate_offer_letter(self, candidate_name: str, job_title: str, offer_date: str) -> str:
        """Draft an offer letter as plain text.

        Raises:
            GatewayError: If the model call fails or returns no text.
        """
        prompt = OFFER_LETTER_PROMPT.format(
            candidate_name=candidate_name,
            job_title=job_title,
            offer_date=offer_date
        )
        return await self._complete(self.chat_model, [{"role": "user", "content": prompt}])

    async def _complete(self, model: str, messages: List[Dict[str, str]], **kwargs) -> str:
        if self.client is None:
            raise GatewayError("GROQ_API_KEY is not set in the environment.")

        try:
            response = await self.client.chat.completions.create(
                messages=messages,
                model=model,
                **kwargs
            )
        except Exception as error:
            logger.error(f"Groq API call failed for model {model}: {error}")
            raise GatewayError(f"Groq API call failed: {error}") from error

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GatewayError("No response from AI")
        return content

    async def _complete_json(self, model: str, prompt: str) -> Dict[str, Any]:
        content = await self._complete(
            model,
            [{"role": "user", "content": prompt}],
            response_format={"type": "json_object"}
        )

        try:
            data = json.loads(content)
        except json.JSONDecodeError as error:
            logger.warning(f"Failed to parse Groq response: {content}")
            raise GatewayError(f"Invalid JSON from AI: {error}") from error

        if not isinstance(data, dict):
            raise GatewayError("AI response is not a JSON object")
        return data
