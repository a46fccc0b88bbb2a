"""LLM client for making API calls to Google Gemini."""

import json
import re
from typing import Optional, Dict, Any
from google import genai
from google.genai import types
from loguru import logger

from src.config import config


class LLMError(Exception):
    """Raised when the Gemini API call fails."""


class LLMNotConfiguredError(LLMError):
    """Raised when no Gemini API key is configured."""


_CODE_FENCE = re.compile(r"```(?:json)?\s*")


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences the model sometimes wraps JSON in."""
    return _CODE_FENCE.sub('', text or '').strip()


def parse_json_response(text: str) -> Dict[str, Any]:
    """Best-effort JSON parse; falls back to {'raw_text': text}."""
    cleaned = strip_code_fences(text)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        logger.warning("Gemini response was not valid JSON, returning raw text")
        return {'raw_text': cleaned}

    if not isinstance(parsed, dict):
        return {'raw_text': cleaned}
    return parsed


class LLMClient:
    """Client for interacting with Google Gemini API."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize the Gemini client.

        Raises:
            LLMNotConfiguredError: no API key available
        """
        api_key = api_key or config.gemini.api_key
        if not api_key:
            raise LLMNotConfiguredError("AI service not configured")

        self.client = genai.Client(api_key=api_key)
        self.model = model or config.gemini.model
        self.temperature = config.gemini.temperature
        self.last_error: Optional[str] = None

    def generate_text(self, prompt: str, temperature: Optional[float] = None) -> str:
        """Send a prompt to Gemini once and return the response text.

        Args:
            prompt: Full prompt text
            temperature: Optional override of the configured temperature

        Returns:
            Response text

        Raises:
            LLMError: the API call failed or returned no text
        """
        self.last_error = None
        logger.info(f"Sending request to Gemini ({self.model}), prompt length {len(prompt)}")

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature if temperature is None else temperature,
                )
            )
        except Exception as e:
            self.last_error = str(e)
            logger.error(f"Error calling Gemini API: {e}")
            raise LLMError(f"Gemini request failed: {e}") from e

        content = response.text
        if not content:
            self.last_error = "Empty response"
            logger.error("Gemini returned an empty response")
            raise LLMError("Gemini returned an empty response")

        logger.debug(f"Raw Gemini response: {content}")
        return content

    def generate_json(self, prompt: str) -> Dict[str, Any]:
        """Send a prompt that asks for JSON and parse the reply.

        Returns:
            Parsed dictionary, or {'raw_text': ...} when the reply is not JSON
        """
        return parse_json_response(self.generate_text(prompt))
