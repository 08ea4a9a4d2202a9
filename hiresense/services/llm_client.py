"""
DeepSeek API Client

DeepSeek uses OpenAI-compatible API, so we use the openai library.
Any other OpenAI-compatible endpoint works by changing DEEPSEEK_BASE_URL
and DEEPSEEK_MODEL.

Requests ask for a JSON object response; the expected shape is spelled
out in the system prompt of each caller.
"""
import json
from typing import Any, Optional

from openai import OpenAI

from hiresense.core.config import get_settings
from hiresense.core.log import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Thin wrapper for chat completions returning JSON.
    """

    def __init__(self, client: Optional[OpenAI] = None, model: Optional[str] = None):
        settings = get_settings()
        self.client = client or OpenAI(
            api_key=settings.deepseek_api_key or "missing-key",
            base_url=settings.deepseek_base_url
        )
        self.model = model or settings.deepseek_model

    def _call_api(self, system_prompt: str, user_content: str, max_tokens: int = 1000) -> str:
        """
        Internal method to call the chat API.
        Returns raw text response.
        """
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content}
            ],
            max_tokens=max_tokens,
            temperature=0.1,  # Low temp for consistent structured output
            response_format={"type": "json_object"}
        )
        content = response.choices[0].message.content
        if not content:
            raise ValueError("No response from AI")
        return content

    def _extract_json(self, text: str) -> Any:
        """
        Extract JSON from API response.
        Handles cases where model wraps JSON in markdown code blocks.
        """
        # Remove markdown code blocks if present
        text = text.strip()
        if text.startswith("```json"):
            text = text[7:]
        if text.startswith("```"):
            text = text[3:]
        if text.endswith("```"):
            text = text[:-3]

        return json.loads(text.strip())

    def complete_json(self, system_prompt: str, user_content: str, max_tokens: int = 1000) -> Any:
        return self._extract_json(self._call_api(system_prompt, user_content, max_tokens=max_tokens))

    def test_connection(self) -> bool:
        """Test if the API is reachable"""
        try:
            result = self.complete_json(
                'You are a test assistant. Reply with exactly this JSON: {"status": "OK"}',
                "ping",
                max_tokens=20
            )
            return isinstance(result, dict) and str(result.get("status", "")).upper() == "OK"
        except Exception as e:
            logger.warning("DeepSeek connection failed: %s", e)
            return False


# Singleton instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get or create the LLM client (singleton pattern)"""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client
