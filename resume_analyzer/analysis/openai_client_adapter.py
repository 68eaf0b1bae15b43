import httpx
import openai

from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.processor.exceptions import ModelUnavailableError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "resume_analysis",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelUnavailableError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelUnavailableError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ModelUnavailableError("AI returned empty response")
        return content
