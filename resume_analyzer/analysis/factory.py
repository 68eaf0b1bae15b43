from typing import ClassVar

from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.base import BaseAnalyzer
from resume_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from resume_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from resume_analyzer.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured resume analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ResumeAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                recovery_mode=settings.json_recovery_mode,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, settings, "api_key"),
            timeout_seconds=cls._provider_setting(provider, settings, "timeout_seconds"),
            base_url=base_url,
        )
        return ResumeAnalyzer(
            client=client,
            model=cls._provider_setting(provider, settings, "model_name"),
            temperature=settings.analysis_temperature,
            recovery_mode=settings.json_recovery_mode,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown analysis provider '{provider}'. Choose from: {supported}")

    @staticmethod
    def _provider_setting(provider: str, settings: Settings, name: str):  # type: ignore[no-untyped-def]
        return getattr(settings, f"analysis_{provider}_{name}")
