import sys
import unittest
from pathlib import Path
from types import SimpleNamespace

import httpx
import openai

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.ai.errors import ConfigError, EmptyResponseError, UpstreamError  # noqa: E402
from resume_optimizer.ai.fallback import complete_with_fallback  # noqa: E402
from resume_optimizer.ai.providers.openai_provider import OpenAIProvider  # noqa: E402
from resume_optimizer.ai.types import ChatMessage  # noqa: E402

MESSAGES = [
    ChatMessage(role="system", content="Return JSON."),
    ChatMessage(role="user", content="Score this resume."),
]
ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _fake_client(create):
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


class OpenAIProviderTests(unittest.TestCase):
    def test_missing_key_raises_config_error(self):
        provider = OpenAIProvider(api_key=None)
        self.assertFalse(provider.configured)
        with self.assertRaises(ConfigError) as ctx:
            provider.complete("llama-3.3-70b-versatile", MESSAGES)
        self.assertIn("GROQ_API_KEY", str(ctx.exception))

    def test_request_carries_model_messages_and_sampling(self):
        captured = {}

        def create(**kwargs):
            captured.update(kwargs)
            return _completion('{"score": 70}')

        provider = OpenAIProvider(api_key="test-key", client=_fake_client(create))
        content = provider.complete("model-a", MESSAGES, temperature=0.2, max_tokens=1800)

        self.assertEqual(content, '{"score": 70}')
        self.assertEqual(captured["model"], "model-a")
        self.assertEqual(captured["temperature"], 0.2)
        self.assertEqual(captured["max_tokens"], 1800)
        self.assertEqual(captured["messages"][0], {"role": "system", "content": "Return JSON."})
        self.assertNotIn("response_format", captured)

    def test_json_mode_requests_json_object(self):
        captured = {}

        def create(**kwargs):
            captured.update(kwargs)
            return _completion("{}")

        provider = OpenAIProvider(api_key="test-key", json_mode=True, client=_fake_client(create))
        provider.complete("model-a", MESSAGES)
        self.assertEqual(captured["response_format"], {"type": "json_object"})

        captured.clear()
        provider.complete("model-a", MESSAGES, json_mode=False)
        self.assertNotIn("response_format", captured)

    def test_status_error_surfaces_status_and_body(self):
        def create(**kwargs):
            response = httpx.Response(
                503,
                request=httpx.Request("POST", ENDPOINT),
                text='{"error": "model overloaded"}',
            )
            raise openai.APIStatusError("Service Unavailable", response=response, body=None)

        provider = OpenAIProvider(api_key="test-key", client=_fake_client(create))
        with self.assertRaises(UpstreamError) as ctx:
            provider.complete("model-a", MESSAGES)
        self.assertEqual(ctx.exception.status, 503)
        self.assertIn("model overloaded", ctx.exception.body)
        self.assertIn("503", str(ctx.exception))

    def test_connection_error_is_upstream_error(self):
        def create(**kwargs):
            raise openai.APIConnectionError(request=httpx.Request("POST", ENDPOINT))

        provider = OpenAIProvider(api_key="test-key", client=_fake_client(create))
        with self.assertRaises(UpstreamError) as ctx:
            provider.complete("model-a", MESSAGES)
        self.assertIsNone(ctx.exception.status)

    def test_empty_content_is_upstream_error(self):
        for response in (_completion(""), _completion("   "), _completion(None), SimpleNamespace(choices=[])):
            provider = OpenAIProvider(api_key="test-key", client=_fake_client(lambda **kwargs: response))
            with self.assertRaises(EmptyResponseError):
                provider.complete("model-a", MESSAGES)


class StubProvider:
    def __init__(self, outcomes):
        self.outcomes = dict(outcomes)
        self.calls = []

    def complete(self, model, messages, *, temperature=0.5, max_tokens=2200, json_mode=None):
        self.calls.append(model)
        outcome = self.outcomes[model]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FallbackTests(unittest.TestCase):
    def test_first_success_wins_in_priority_order(self):
        provider = StubProvider({"primary": "ok-1", "secondary": "ok-2"})
        result = complete_with_fallback(provider, ["primary", "secondary"], MESSAGES)
        self.assertEqual(result, "ok-1")
        self.assertEqual(provider.calls, ["primary"])

    def test_upstream_error_moves_to_next_model(self):
        provider = StubProvider(
            {
                "primary": UpstreamError("Provider API error (429): rate limited", status=429),
                "secondary": '{"score": 60}',
            }
        )
        result = complete_with_fallback(provider, ["primary", "secondary"], MESSAGES)
        self.assertEqual(result, '{"score": 60}')
        self.assertEqual(provider.calls, ["primary", "secondary"])

    def test_empty_response_also_falls_back(self):
        provider = StubProvider({"primary": EmptyResponseError(), "secondary": "text"})
        self.assertEqual(complete_with_fallback(provider, ["primary", "secondary"], MESSAGES), "text")

    def test_last_error_is_raised_when_all_models_fail(self):
        last = UpstreamError("Provider API error (500): boom", status=500)
        provider = StubProvider({"primary": UpstreamError("first", status=503), "secondary": last})
        with self.assertRaises(UpstreamError) as ctx:
            complete_with_fallback(provider, ["primary", "secondary"], MESSAGES)
        self.assertIs(ctx.exception, last)

    def test_config_error_is_not_retried(self):
        provider = StubProvider({"primary": ConfigError("GROQ_API_KEY is missing"), "secondary": "never"})
        with self.assertRaises(ConfigError):
            complete_with_fallback(provider, ["primary", "secondary"], MESSAGES)
        self.assertEqual(provider.calls, ["primary"])

    def test_empty_model_list_is_rejected(self):
        with self.assertRaises(ValueError):
            complete_with_fallback(StubProvider({}), [], MESSAGES)


if __name__ == "__main__":
    unittest.main()
