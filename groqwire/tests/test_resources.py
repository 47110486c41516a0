"""Resource wrappers: routes, payloads and return types over a mock transport."""
from __future__ import annotations

import json

import httpx
import pytest

from groqwire import CancellationToken, FileUpload, Groq, GroqError, Opt, StreamState
from groqwire.types.batches import BatchListParams
from groqwire.types.chat import ChatCompletionCreateParams
from groqwire.types.enums import FinishReason, ModelID, Role

_COMPLETION = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1,
    "model": "llama-3.3-70b-versatile",
    "choices": [
        {"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": "Hi!"}}
    ],
    "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
    "x_groq": {"id": "req_1"},
}

_SSE = (
    b'data: {"id": "c", "choices": [{"index": 0, "delta": {"role": "assistant", "content": "He"}}]}\n\n'
    b'data: {"id": "c", "choices": [{"index": 0, "delta": {"content": "y"}, "finish_reason": "stop"}],'
    b' "x_groq": {"usage": {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}}}\n\n'
    b"data: [DONE]\n\n"
)

_BATCH = {"id": "batch_1", "object": "batch", "endpoint": "/v1/chat/completions", "status": "validating"}


class _Router:
    """Answers by ``(method, path)`` and records every request."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes[(request.method, request.url.path)]()

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _json(payload, status=200):
    return lambda: httpx.Response(status, json=payload)


def _params(**extra):
    return {
        "model": ModelID.LLAMA_3_3_70B_VERSATILE.value,
        "messages": [{"role": Role.USER.value, "content": "hello"}],
        **extra,
    }


def test_chat_completion_create(make_client):
    router = _Router({("POST", "/openai/v1/chat/completions"): _json(_COMPLETION)})
    client = make_client(router)
    completion = client.chat.completions.create(_params(temperature=0.2))

    assert completion.choices[0].message.content == "Hi!"  # nosec B101 - asserts are appropriate in unit tests
    assert completion.usage.total_tokens == 5 and completion.x_groq.id == "req_1"  # nosec B101 - asserts are appropriate in unit tests
    assert FinishReason(completion.choices[0].finish_reason) is FinishReason.STOP  # nosec B101 - asserts are appropriate in unit tests
    body = json.loads(router.last.content)
    assert body == {  # nosec B101 - unset optional fields are omitted
        "model": "llama-3.3-70b-versatile",
        "messages": [{"role": "user", "content": "hello"}],
        "temperature": 0.2,
    }


def test_chat_create_rejects_stream_flag(make_client):
    client = make_client(_Router({}))
    with pytest.raises(ValueError):
        client.chat.completions.create(_params(stream=True))


def test_chat_create_sends_explicit_null(make_client):
    router = _Router({("POST", "/openai/v1/chat/completions"): _json(_COMPLETION)})
    client = make_client(router)
    params = ChatCompletionCreateParams(**_params(), user=Opt.null())
    client.chat.completions.create(params)
    assert json.loads(router.last.content)["user"] is None  # nosec B101 - asserts are appropriate in unit tests


def test_chat_create_stream_yields_typed_chunks(make_client):
    router = _Router(
        {
            ("POST", "/openai/v1/chat/completions"): lambda: httpx.Response(
                200, headers={"content-type": "text/event-stream"}, content=_SSE
            )
        }
    )
    client = make_client(router, strict_validation=True)
    with client.chat.completions.create_stream(_params()) as stream:
        chunks = list(stream)

    assert "".join(c.choices[0].delta.content for c in chunks) == "Hey"  # nosec B101 - asserts are appropriate in unit tests
    assert chunks[-1].x_groq.usage.total_tokens == 3  # nosec B101 - asserts are appropriate in unit tests
    assert stream.state is StreamState.DONE  # nosec B101 - asserts are appropriate in unit tests
    assert json.loads(router.last.content)["stream"] is True  # nosec B101 - asserts are appropriate in unit tests
    assert router.last.headers["accept"] == "application/json"  # nosec B101 - asserts are appropriate in unit tests


def test_chat_stream_uses_default_token(make_client):
    router = _Router(
        {
            ("POST", "/openai/v1/chat/completions"): lambda: httpx.Response(
                200, headers={"content-type": "text/event-stream"}, content=_SSE
            )
        }
    )
    client = make_client(router)
    token = CancellationToken()
    stream = client.chat.completions.create_stream(_params(), token=token)
    next(stream)
    token.cancel()
    with pytest.raises(GroqError):
        next(stream)
    stream.close()


def test_embeddings_create(make_client):
    payload = {"object": "list", "data": [{"index": 0, "object": "embedding", "embedding": [0.1, 0.2]}], "model": "e"}
    router = _Router({("POST", "/openai/v1/embeddings"): _json(payload)})
    result = make_client(router).embeddings.create({"model": "e", "input": ["a", "b"]})

    assert result.data[0].embedding == [0.1, 0.2]  # nosec B101 - asserts are appropriate in unit tests
    assert json.loads(router.last.content) == {"model": "e", "input": ["a", "b"]}  # nosec B101 - asserts are appropriate in unit tests


def test_speech_returns_open_binary_response(make_client):
    router = _Router(
        {("POST", "/openai/v1/audio/speech"): lambda: httpx.Response(200, headers={"content-type": "audio/wav"}, content=b"RIFF..")}
    )
    client = make_client(router, strict_validation=True)
    response = client.audio.speech.create({"model": "playai-tts", "input": "hi", "voice": "Fritz-PlayAI"})
    try:
        assert response.read() == b"RIFF.."  # nosec B101 - asserts are appropriate in unit tests
    finally:
        response.close()


def test_transcription_uploads_multipart(make_client):
    router = _Router({("POST", "/openai/v1/audio/transcriptions"): _json({"text": "hello world"})})
    client = make_client(router)
    result = client.audio.transcriptions.create(
        {"model": "whisper-large-v3", "file": FileUpload("a.mp3", b"ID3"), "language": "en"}
    )

    assert result.text == "hello world"  # nosec B101 - asserts are appropriate in unit tests
    request = router.last
    assert request.headers["content-type"].startswith("multipart/form-data")  # nosec B101 - asserts are appropriate in unit tests
    assert b'filename="a.mp3"' in request.content and b"whisper-large-v3" in request.content  # nosec B101 - asserts are appropriate in unit tests


def test_transcription_requires_file_or_url(make_client):
    client = make_client(_Router({}))
    with pytest.raises(ValueError):
        client.audio.transcriptions.create({"model": "whisper-large-v3"})
    with pytest.raises(ValueError):
        client.audio.translations.create({"model": "whisper-large-v3"})


def test_batches_lifecycle_routes(make_client):
    router = _Router(
        {
            ("POST", "/openai/v1/batches"): _json(_BATCH),
            ("GET", "/openai/v1/batches/batch_1"): _json(_BATCH),
            ("POST", "/openai/v1/batches/batch_1/cancel"): _json({**_BATCH, "status": "cancelling"}),
            ("GET", "/openai/v1/batches"): _json({"object": "list", "data": [_BATCH]}),
        }
    )
    client = make_client(router)

    created = client.batches.create(
        {"input_file_id": "file_1", "endpoint": "/v1/chat/completions", "completion_window": "24h"}
    )
    assert created.id == "batch_1"  # nosec B101 - asserts are appropriate in unit tests
    assert client.batches.retrieve("batch_1").status == "validating"  # nosec B101 - asserts are appropriate in unit tests
    assert client.batches.cancel("batch_1").status == "cancelling"  # nosec B101 - asserts are appropriate in unit tests
    assert router.last.content == b""  # nosec B101 - cancel sends no body

    listed = client.batches.list(BatchListParams(limit=2, after=Opt.absent()))
    assert [b.id for b in listed.data] == ["batch_1"]  # nosec B101 - asserts are appropriate in unit tests
    assert str(router.last.url).endswith("/openai/v1/batches?limit=2")  # nosec B101 - asserts are appropriate in unit tests


def test_files_routes(make_client):
    file_obj = {"id": "file_1", "object": "file", "bytes": 3, "filename": "in.jsonl", "purpose": "batch"}
    router = _Router(
        {
            ("POST", "/openai/v1/files"): _json(file_obj),
            ("GET", "/openai/v1/files"): _json({"object": "list", "data": [file_obj]}),
            ("GET", "/openai/v1/files/file_1"): _json(file_obj),
            ("DELETE", "/openai/v1/files/file_1"): _json({"id": "file_1", "object": "file", "deleted": True}),
            ("GET", "/openai/v1/files/file_1/content"): lambda: httpx.Response(
                200, headers={"content-type": "application/octet-stream"}, content=b'{"a":1}\n'
            ),
        }
    )
    client = make_client(router, strict_validation=True)

    assert client.files.create({"file": b"{}\n", "purpose": "batch"}).id == "file_1"  # nosec B101 - asserts are appropriate in unit tests
    assert b'name="purpose"' in router.last.content  # nosec B101 - asserts are appropriate in unit tests
    assert client.files.list().data[0].filename == "in.jsonl"  # nosec B101 - asserts are appropriate in unit tests
    assert client.files.retrieve("file_1").bytes == 3  # nosec B101 - asserts are appropriate in unit tests
    assert client.files.delete("file_1").deleted is True  # nosec B101 - asserts are appropriate in unit tests
    content = client.files.content("file_1")
    try:
        assert content.read() == b'{"a":1}\n'  # nosec B101 - asserts are appropriate in unit tests
    finally:
        content.close()


def test_models_routes(make_client):
    model = {"id": "llama-3.3-70b-versatile", "object": "model", "owned_by": "Meta", "context_window": 131072}
    router = _Router(
        {
            ("GET", "/openai/v1/models"): _json({"object": "list", "data": [model]}),
            ("GET", "/openai/v1/models/llama-3.3-70b-versatile"): _json(model),
            ("DELETE", "/openai/v1/models/ft-1"): _json({"id": "ft-1", "object": "model", "deleted": True}),
        }
    )
    client = make_client(router)

    assert client.models.list().data[0].context_window == 131072  # nosec B101 - asserts are appropriate in unit tests
    assert client.models.retrieve("llama-3.3-70b-versatile").owned_by == "Meta"  # nosec B101 - asserts are appropriate in unit tests
    assert client.models.delete("ft-1").deleted is True  # nosec B101 - asserts are appropriate in unit tests


def test_client_requires_api_key():
    with pytest.raises(GroqError):
        Groq()


def test_client_uses_shared_pool_by_default():
    first = Groq(api_key="k", base_url="https://api.test")
    second = Groq(api_key="k2", base_url="https://api.test")
    assert first.transport._http is second.transport._http  # nosec B101 - asserts are appropriate in unit tests
    assert "k2" not in repr(second)  # nosec B101 - asserts are appropriate in unit tests
