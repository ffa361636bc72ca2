from unittest.mock import MagicMock

import pytest
import requests

from passgen.config import Settings
from passgen.enhance import EnhancementClient, EnhancementResult
from passgen.errors import EnhancementError


def make_client(response=None, side_effect=None):
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = response
    settings = Settings(enhance_url="http://enhance.test/flow", enhance_timeout=3.0)
    return EnhancementClient(settings, session=session), session


def fake_response(payload=None, status=200, json_error=False):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    if json_error:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


GOOD = {
    "enhancedPassword": "Blue-Otter!Sings42",
    "strengthScore": 0.92,
    "explanation": "Longer, mixed classes, memorable words.",
}


def test_enhance_success():
    client, session = make_client(fake_response(GOOD))
    result = client.enhance("otter42")

    assert result == EnhancementResult("Blue-Otter!Sings42", 0.92, "Longer, mixed classes, memorable words.")
    session.post.assert_called_once_with(
        "http://enhance.test/flow", json={"password": "otter42"}, timeout=3.0
    )


def test_enhance_accepts_wrapped_result():
    client, _ = make_client(fake_response({"result": GOOD}))
    assert client.enhance("otter42").enhanced_password == "Blue-Otter!Sings42"


def test_integer_score_is_converted_to_float():
    client, _ = make_client(fake_response({**GOOD, "strengthScore": 1}))
    assert client.enhance("x").strength_score == 1.0


def test_empty_password_rejected_without_request():
    client, session = make_client(fake_response(GOOD))
    with pytest.raises(EnhancementError):
        client.enhance("")
    session.post.assert_not_called()


def test_http_error_wrapped():
    client, _ = make_client(fake_response(status=503))
    with pytest.raises(EnhancementError) as exc:
        client.enhance("otter42")
    assert isinstance(exc.value.__cause__, requests.HTTPError)


def test_network_error_wrapped():
    client, _ = make_client(side_effect=requests.ConnectionError("refused"))
    with pytest.raises(EnhancementError):
        client.enhance("otter42")


def test_invalid_json_wrapped():
    client, _ = make_client(fake_response(json_error=True))
    with pytest.raises(EnhancementError):
        client.enhance("otter42")


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {**GOOD, "enhancedPassword": None},
        {**GOOD, "strengthScore": "high"},
        {**GOOD, "strengthScore": True},
        {k: v for k, v in GOOD.items() if k != "explanation"},
    ],
)
def test_malformed_payload_rejected(payload):
    client, _ = make_client(fake_response(payload))
    with pytest.raises(EnhancementError):
        client.enhance("otter42")


def test_close_closes_session():
    client, session = make_client(fake_response(GOOD))
    client.close()
    session.close.assert_called_once()
