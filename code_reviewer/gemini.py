"""
Gemini adapter: sends a prompt to the model under a fixed system instruction.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from google import genai
from google.genai.errors import APIError

from code_reviewer.config import Settings
from code_reviewer.errors import ConfigurationError


def load_system_instruction(path: Path) -> str:
    """
    Read the reviewer persona from a text asset.

    Raises:
        ConfigurationError: If the file is missing, unreadable or empty.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read system instruction at {path}: {e}") from e

    if not text.strip():
        raise ConfigurationError(f"System instruction at {path} is empty")

    return text


def build_safety_settings(thresholds: Dict[str, str]) -> List[genai.types.SafetySetting]:
    # Unknown enum values are only warned about by the SDK
    for category, threshold in thresholds.items():
        if category not in genai.types.HarmCategory.__members__:
            raise ValueError(f"Unknown harm category: {category}")
        if threshold not in genai.types.HarmBlockThreshold.__members__:
            raise ValueError(f"Unknown block threshold: {threshold}")

    return [
        genai.types.SafetySetting(category=category, threshold=threshold)
        for category, threshold in thresholds.items()
    ]


class GeminiReviewer:
    """Generates code reviews with a pre-configured Gemini model."""

    def __init__(
        self,
        client: genai.Client,
        model: str,
        system_instruction: str,
        temperature: float,
        max_output_tokens: int,
        safety_settings: Dict[str, str],
    ):
        self._client = client
        self.model = model
        self.config = genai.types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            safety_settings=build_safety_settings(safety_settings),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiReviewer":
        """
        Build the reviewer and its client from process configuration.

        Raises:
            ConfigurationError: If GEMINI_API_KEY is not set, the client
                cannot be created or the generation settings are invalid.
        """
        if not settings.GEMINI_API_KEY:
            raise ConfigurationError("GEMINI_API_KEY is not set")

        try:
            client = genai.Client(api_key=settings.GEMINI_API_KEY)
        except Exception as e:
            raise ConfigurationError(f"Failed to initialize Gemini client: {e}") from e

        system_instruction = load_system_instruction(settings.SYSTEM_INSTRUCTION_PATH)

        try:
            return cls(
                client=client,
                model=settings.GEMINI_MODEL,
                system_instruction=system_instruction,
                temperature=settings.TEMPERATURE,
                max_output_tokens=settings.MAX_OUTPUT_TOKENS,
                safety_settings=settings.SAFETY_SETTINGS,
            )
        except Exception as e:
            raise ConfigurationError(f"Invalid generation configuration: {e}") from e

    async def generate_content(self, prompt: str) -> Optional[str]:
        """
        Ask the model to review the given code.

        Returns:
            The generated review text, or None if the prompt is blank or the
            model call fails or yields nothing.
        """
        if not isinstance(prompt, str) or not prompt.strip():
            logging.error("Invalid prompt provided. Prompt must be a non-empty string.")
            return None

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self.config,
            )
            text = response.text
        except APIError as e:
            logging.error(f"Gemini API Error: {e}")
            return None
        except Exception as e:
            logging.error(f"Error generating content: {e}")
            return None

        if not text:
            logging.warning("Gemini returned a response without text.")
            return None

        logging.info("Content generated successfully.")
        return text
