import logging
from typing import List, Optional

from mistralai import Mistral

from curagennie.application.ports import LLMPort
from curagennie.infrastructure.config import Settings


logger = logging.getLogger(__name__)


def _message_text(content) -> str:
    # The SDK returns either a plain string or a list of content chunks
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return "".join(getattr(chunk, "text", "") or "" for chunk in content)


class MistralLLMAdapter(LLMPort):
    def __init__(self, settings: Settings | None = None, client=None):
        self.settings = settings or Settings()
        self._model = self.settings.mistral_model
        self._vision_model = self.settings.mistral_vision_model
        self._client = client
        if self._client is None:
            self._init_client()

    def _init_client(self):
        api_key = self.settings.mistral_api_key
        if not api_key:
            logger.info("Mistral API key is missing; AI analysis disabled.")
            self._client = None
            return
        try:
            self._client = Mistral(api_key=api_key)
        except Exception as e:
            logger.exception("Failed to initialize Mistral client: %s", e)
            self._client = None

    def is_configured(self) -> bool:
        return self._client is not None

    def generate(self, prompt: str, system: Optional[str] = None) -> str:
        if not self._client:
            raise RuntimeError("Mistral client not initialized (missing API key)")
        messages: List[dict] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        try:
            response = self._client.chat.complete(
                model=self._model,
                messages=messages,
                response_format={"type": "json_object"},
            )
            return _message_text(response.choices[0].message.content)
        except Exception as e:
            logger.exception("Mistral chat call failed: %s", e)
            raise

    def identify_image(self, image_base64: str, instruction: str) -> str:
        if not self._client:
            raise RuntimeError("Mistral client not initialized (missing API key)")
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": instruction},
                    {"type": "image_url", "image_url": f"data:image/jpeg;base64,{image_base64}"},
                ],
            }
        ]
        try:
            response = self._client.chat.complete(
                model=self._vision_model,
                messages=messages,
                max_tokens=500,
            )
            return _message_text(response.choices[0].message.content)
        except Exception as e:
            logger.exception("Mistral vision call failed: %s", e)
            raise
