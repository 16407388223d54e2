"""
Dependency providers for the triage routes.
"""
from fastapi import Request

from .client import InferenceClient


def get_inference_client(request: Request) -> InferenceClient:
    """Return the inference client built at startup."""
    return request.app.state.inference_client
