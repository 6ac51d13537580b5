"""
Completion service for the DeepSeek-compatible chat completions endpoint.
"""

from dataclasses import dataclass
from typing import Any, Optional

import requests
from flask import current_app

from app.utils.logging_utils import get_logger, mask_key

logger = get_logger(__name__)


class CompletionAPIError(Exception):
    """The completion endpoint could not be called or answered with a non-2xx status."""


@dataclass
class ChatMessage:
    role: Optional[str] = None
    content: Optional[str] = None


@dataclass
class ChatChoice:
    message: Optional[ChatMessage] = None


@dataclass
class ChatCompletion:
    choices: Optional[list[ChatChoice]] = None

    @classmethod
    def from_json(cls, data: Any) -> "ChatCompletion":
        """Builds the structure from a decoded body, dropping anything mis-shaped."""
        if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
            return cls()

        choices = []
        for raw_choice in data["choices"]:
            raw_message = raw_choice.get("message") if isinstance(raw_choice, dict) else None
            if isinstance(raw_message, dict):
                content = raw_message.get("content")
                message = ChatMessage(
                    role=raw_message.get("role"),
                    content=content if isinstance(content, str) else None,
                )
            else:
                message = None
            choices.append(ChatChoice(message=message))
        return cls(choices=choices)

    def first_content(self, default: str = "") -> str:
        if not self.choices:
            return default
        message = self.choices[0].message
        if message is None or message.content is None:
            return default
        return message.content.strip()


def init_ai_service(app):
    """Log the completion settings; a missing key only fails when a call is made."""
    api_key = app.config.get('DEEPSEEK_API_KEY')
    if not api_key:
        logger.warning("DEEPSEEK_API_KEY not configured - completion calls will fail")
    else:
        logger.info(f"DEEPSEEK_API_KEY configured: {mask_key(api_key)}")
    logger.info(
        f"Completion endpoint: {app.config.get('COMPLETION_API_URL')} "
        f"model={app.config.get('MODEL_NAME')}"
    )


def build_completion_payload(prompt: str) -> dict:
    return {
        "model": current_app.config.get('MODEL_NAME', 'deepseek-reasoner'),
        "messages": [{"role": "user", "content": prompt}],
        "temperature": current_app.config.get('TEMPERATURE', 0.2),
        "max_tokens": current_app.config.get('MAX_TOKENS', 1000),
    }


def send_prompt_to_completion_api(prompt: str) -> str:
    """
    Sends one prompt to the completion endpoint and returns the first
    choice's text, stripped. Non-2xx answers raise CompletionAPIError carrying
    the raw response body; a 2xx body without usable choices yields "".
    """
    api_key = current_app.config.get('DEEPSEEK_API_KEY')
    if not api_key:
        raise CompletionAPIError("DEEPSEEK_API_KEY not configured")

    url = current_app.config['COMPLETION_API_URL']
    timeout = current_app.config.get('COMPLETION_TIMEOUT')

    logger.info(f"Sending prompt to {url} ({len(prompt)} chars, key {mask_key(api_key)})")
    response = requests.post(
        url,
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        json=build_completion_payload(prompt),
        timeout=timeout,
    )

    if not response.ok:
        logger.error(f"Completion endpoint answered {response.status_code}")
        raise CompletionAPIError(response.text)

    completion = ChatCompletion.from_json(response.json())
    result = completion.first_content()
    if not result:
        logger.warning("Completion response carried no message content")
    return result
