import asyncio

import httpx
import openai
import pytest

from release_notifier.llm.translate import (
    CALL_FAILED,
    INVALID_INPUT,
    MAX_RETRIES_REACHED,
    NO_RESPONSE,
    SENTINELS,
    Translator,
    build_prompt,
)


def _openai_error(cls, status):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return cls(f"status {status}", response=httpx.Response(status, request=request), body=None)


def _translator(client, **kwargs):
    kwargs.setdefault("backoff_base", 0)
    return Translator(client=client, model="gpt-test", language="Japanese", **kwargs)


def test_prompt_embeds_description_and_language():
    prompt = build_prompt("Cloud Run supports {gpu} now.", "Japanese")
    assert "Cloud Run supports {gpu} now." in prompt
    assert "Japanese" in prompt


@pytest.mark.asyncio
async def test_translate_success(mock_llm):
    result = await _translator(mock_llm).translate("Cloud Run supports GPUs.")
    assert result == "翻訳された要約"
    prompt, model = mock_llm.complete.call_args.args
    assert "Cloud Run supports GPUs." in prompt
    assert model == "gpt-test"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   \n"])
async def test_empty_input_skips_upstream(mock_llm, text):
    """
    WHY: There is nothing to translate and the call would only cost tokens.
    HOW: Translate an empty / whitespace description.
    EXPECTED: The "invalid input" sentinel and no upstream call.
    """
    assert await _translator(mock_llm).translate(text) == INVALID_INPUT
    mock_llm.complete.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_completion_is_no_response(mock_llm):
    mock_llm.complete.return_value = ""
    assert await _translator(mock_llm).translate("text") == NO_RESPONSE


@pytest.mark.asyncio
async def test_transient_status_is_retried(mock_llm):
    mock_llm.complete.side_effect = [_openai_error(openai.RateLimitError, 429), "要約"]
    assert await _translator(mock_llm).translate("text") == "要約"
    assert mock_llm.complete.await_count == 2


@pytest.mark.asyncio
async def test_exhausted_retries_sentinel(mock_llm):
    """
    WHY: A service that keeps answering 503 must not stall the batch or raise.
    HOW: Every call raises InternalServerError(503).
    EXPECTED: "max retries reached" after exactly 3 calls.
    """
    mock_llm.complete.side_effect = _openai_error(openai.InternalServerError, 503)
    assert await _translator(mock_llm).translate("text") == MAX_RETRIES_REACHED
    assert mock_llm.complete.await_count == 3


@pytest.mark.asyncio
async def test_permanent_status_not_retried(mock_llm):
    mock_llm.complete.side_effect = _openai_error(openai.AuthenticationError, 401)
    assert await _translator(mock_llm).translate("text") == CALL_FAILED
    assert mock_llm.complete.await_count == 1


@pytest.mark.asyncio
async def test_unexpected_exception_is_absorbed(mock_llm):
    mock_llm.complete.side_effect = RuntimeError("socket closed")
    assert await _translator(mock_llm).translate("text") == CALL_FAILED


@pytest.mark.asyncio
async def test_hung_call_times_out(mock_llm):
    async def hang(*args):
        await asyncio.sleep(10)

    mock_llm.complete.side_effect = hang
    assert await _translator(mock_llm, timeout=0.01).translate("text") == NO_RESPONSE
    assert mock_llm.complete.await_count == 1


@pytest.mark.asyncio
async def test_translate_note_keeps_original(mock_llm, make_note):
    note = make_note()
    translated = await _translator(mock_llm).translate_note(note)
    assert translated.translated_description == "翻訳された要約"
    assert translated.content == note.content
    assert "翻訳された要約" not in SENTINELS


def test_missing_prompt_template_raises():
    from release_notifier.llm.prompts import load_prompt

    with pytest.raises(FileNotFoundError):
        load_prompt("no_such_template")
