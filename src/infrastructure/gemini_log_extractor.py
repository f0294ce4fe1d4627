"""Gemini-backed extraction of financial records from weekly farm logs.

Uses the google-genai SDK with a JSON response schema so the model answers
with exactly the eight numeric fields of a weekly record.
"""

import json

from google import genai
from google.genai import types

from src.application.ports.log_extractor import LogExtractorPort
from src.domain.errors import ExtractionError
from src.domain.models.farm import FarmFinancials
from src.domain.services.records import (
    SECTIONS,
    record_from_payload,
)
from src.infrastructure.logging.logger import get_app_logger


PROMPT_TEMPLATE = """Role: Professional Farm Data Analyst.
Task: Extract financial data from the provided weekly farm log into a structured JSON format.

Categorization Rules:
- Revenue:
    - morningMilk: Revenue from milk sold in the morning.
    - eveningMilk: Revenue from milk sold in the evening.
    - miscSales: Revenue from Eggs, Livestock (Chickens, Pigs, etc.), Produce, or other sources.
- Expenses:
    - feed: Total cost for all animal feed (Cow, Pig, Cattle, Chicken feed).
    - healthcare: Total cost for Vet visits, Medicine, and Healthcare.
    - operations: Total cost for Diesel, Electricity, Tools, and Fuel.
- Credit:
    - owed: Total credit extended to customers (money pending/owed to farm).
    - collected: Total credit collected from previous outstanding balances.

Use 0 for any category not mentioned in the log.

Log content: "{raw_text}\""""


def build_prompt(raw_text: str) -> str:
    """Return the extraction prompt for a weekly log."""
    return PROMPT_TEMPLATE.format(raw_text=raw_text)


def build_response_schema() -> types.Schema:
    """Return the response schema requiring every record field."""
    properties = {}
    for section_name, _, fields in SECTIONS:
        keys = [key for key, _ in fields]
        properties[section_name] = types.Schema(
            type=types.Type.OBJECT,
            properties={
                key: types.Schema(type=types.Type.NUMBER) for key in keys
            },
            required=keys,
        )
    return types.Schema(
        type=types.Type.OBJECT,
        properties=properties,
        required=[section_name for section_name, _, _ in SECTIONS],
    )


class GeminiLogExtractor(LogExtractorPort):
    """LogExtractorPort implementation calling the Gemini API once per log."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        client=None,
        logger=None,
    ) -> None:
        """Initialize the extractor.

        Args:
            api_key: Gemini API key.
            model: Gemini model name.
            client: Optional pre-built ``genai.Client``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._model = model
        self._client = client or genai.Client(api_key=api_key)
        self._logger = logger or get_app_logger()
        self._config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=build_response_schema(),
        )

    def extract(self, raw_text: str) -> FarmFinancials:
        """Return the financial record described by ``raw_text``.

        Args:
            raw_text: Weekly farm log in free text.

        Returns:
            FarmFinancials: Record with all eight fields populated.

        Raises:
            ExtractionError: On service errors or non-conforming output.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=build_prompt(raw_text),
                config=self._config,
            )
        except Exception as exc:
            self._logger.error(f"Gemini request failed: {exc}")
            raise ExtractionError() from exc

        output_text = (getattr(response, "text", None) or "").strip()
        if not output_text:
            self._logger.error("Gemini returned an empty response")
            raise ExtractionError()
        try:
            payload = json.loads(output_text)
            record = record_from_payload(payload, strict=True)
        except ValueError as exc:
            self._logger.error(f"Failed to parse Gemini response: {exc}")
            raise ExtractionError() from exc

        self._logger.info(f"Extracted weekly record with model {self._model}")
        return record


__all__ = [
    "GeminiLogExtractor",
    "build_prompt",
    "build_response_schema",
]
