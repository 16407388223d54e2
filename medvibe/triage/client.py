"""
HTTP client for the text-completion service (Ollama ``/api/generate``).
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..config import Settings
from ..exceptions import UpstreamException

logger = logging.getLogger(__name__)

NO_ANSWER = "Não foi possível gerar uma resposta."


@dataclass(frozen=True)
class InferenceConfig:
    """
    Connection parameters for the inference service.

    Attributes:
        host: Base URL of the service
        model: Model identifier
        api_key: Optional bearer credential
        temperature: Sampling temperature
    """
    host: str
    model: str
    api_key: Optional[str] = None
    temperature: float = 0.7

    @classmethod
    def from_settings(cls, settings: Settings) -> "InferenceConfig":
        return cls(
            host=settings.ollama_host.rstrip("/"),
            model=settings.ollama_model,
            api_key=settings.ollama_api_key,
            temperature=settings.ollama_temperature,
        )


class InferenceClient:
    """
    Sends one prompt per call and returns the generated text.

    There is no timeout and no retry: a slow service holds only the request
    that is waiting on it.
    """

    def __init__(self, config: InferenceConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    @property
    def model(self) -> str:
        return self.config.model

    @property
    def host(self) -> str:
        return self.config.host

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    async def generate(self, prompt: str) -> str:
        """
        Request a completion constrained to JSON output.

        Args:
            prompt: Full instruction text

        Returns:
            str: Generated text, stripped

        Raises:
            UpstreamException: If the service answers with a non-success status
            httpx.HTTPError: If the service cannot be reached
            ValueError: If the response envelope is not JSON
        """
        body = {
            "model": self.config.model,
            "prompt": prompt,
            "stream": False,
            "format": "json",
            "options": {"temperature": self.config.temperature},
        }
        async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
            logger.info(f"🤖 Requesting triage from {self.config.model} at {self.config.host}")
            response = await client.post(
                f"{self.config.host}/api/generate",
                headers=self._headers(),
                json=body,
            )

        if not response.is_success:
            logger.error(f"Inference service error {response.status_code}: {response.text}")
            raise UpstreamException(response.status_code, response.text)

        data = response.json()
        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            return NO_ANSWER
        return text.strip()
