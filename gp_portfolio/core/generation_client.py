"""Client layer for the external generation endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

from gp_portfolio.config import settings
from gp_portfolio.core.errors import GenerationError, NetworkError
from gp_portfolio.utils.logger import logger
from gp_portfolio.utils.state import CaseInput, ReviewContent

GENERIC_FAILURE = "Failed to generate review"
INVALID_RESPONSE = "The generation service returned an unexpected response"
UNREACHABLE = "Could not reach the generation service"


class GenerationRequest(BaseModel):
    """Request body, serialised with the endpoint's camelCase names."""

    model_config = ConfigDict(populate_by_name=True)

    case_description: str = Field(alias="caseDescription")
    capabilities: List[str]

    @classmethod
    def from_case(cls, case: CaseInput) -> "GenerationRequest":
        return cls(case_description=case.description, capabilities=list(case.capabilities))


class GenerationResponse(BaseModel):
    """Success body of the endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    brief_description: str = Field(alias="briefDescription")
    reflection: str
    learning_needs: str = Field(alias="learningNeeds")
    capabilities: Dict[str, str]

    def to_review(self) -> ReviewContent:
        return ReviewContent(
            brief_description=self.brief_description,
            reflection=self.reflection,
            learning_needs=self.learning_needs,
            capabilities=dict(self.capabilities),
        )


def error_message_from_body(body: Any) -> str:
    """Use the server's ``error`` string verbatim when there is one."""
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message:
            return message
    return GENERIC_FAILURE


class GenerationClient:
    """Interface for everything that can turn a case into review content."""

    def generate(self, case: CaseInput) -> ReviewContent:  # pragma: no cover - interface
        raise NotImplementedError


class HttpGenerationClient(GenerationClient):
    """POSTs the case to the generation endpoint. One request, no retries."""

    def __init__(self, endpoint_url: Optional[str] = None, timeout: Optional[float] = None):
        cfg = settings.generation
        self.endpoint_url = endpoint_url or cfg.endpoint_url
        self.timeout = timeout if timeout is not None else cfg.request_timeout
        self.headers = {"Content-Type": "application/json"}
        logger.info("Initialized generation client for {}", self.endpoint_url)

    def generate(self, case: CaseInput) -> ReviewContent:
        payload = GenerationRequest.from_case(case).model_dump(by_alias=True)
        logger.info("Requesting review for {} capabilities", len(case.capabilities))
        try:
            response = requests.post(
                self.endpoint_url,
                json=payload,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.error("Generation request failed: {}", exc)
            raise NetworkError(UNREACHABLE) from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            message = error_message_from_body(body)
            logger.warning("Generation endpoint answered {}: {}", response.status_code, message)
            raise GenerationError(message, status_code=response.status_code)

        if body is None:
            raise GenerationError(INVALID_RESPONSE, status_code=response.status_code)
        try:
            parsed = GenerationResponse.model_validate(body)
        except SchemaError as exc:
            logger.error("Malformed generation response: {}", exc)
            raise GenerationError(INVALID_RESPONSE, status_code=response.status_code) from exc

        unexpected = [name for name in parsed.capabilities if name not in case.capabilities]
        if unexpected:
            logger.warning("Response contains capabilities that were not requested: {}", unexpected)
        return parsed.to_review()


@dataclass
class MockGenerationClient(GenerationClient):
    """Offline stand-in that echoes the request as placeholder text."""

    placeholder: str = "Generated text will appear here once an endpoint is configured."

    def generate(self, case: CaseInput) -> ReviewContent:
        summary = case.description.strip().splitlines()[0] if case.description.strip() else ""
        return ReviewContent(
            brief_description=summary[:200],
            reflection=self.placeholder,
            learning_needs=self.placeholder,
            capabilities={name: self.placeholder for name in case.capabilities},
        )


def create_client() -> GenerationClient:
    """Build the client selected by ``settings.generation.provider``."""
    if settings.generation.provider == "mock":
        logger.info("Using mock generation client")
        return MockGenerationClient()
    return HttpGenerationClient()


__all__ = [
    "GENERIC_FAILURE",
    "INVALID_RESPONSE",
    "UNREACHABLE",
    "GenerationRequest",
    "GenerationResponse",
    "GenerationClient",
    "HttpGenerationClient",
    "MockGenerationClient",
    "create_client",
    "error_message_from_body",
]
