from unittest import mock

import pytest
import requests

from teambalancer.config import OptimizerConfig
from teambalancer.domain.entities.team import FeaturePayload
from teambalancer.domain.errors import OptimizerError, OptimizerFault
from teambalancer.domain.value_objects.types import Position
from teambalancer.infrastructure.adapters.http_optimizer import HttpOptimizerClient

PAYLOAD = [FeaturePayload("P1", Position.MID, Position.FILL, tier_score=4.75, win_rate=0.5)]

BODY = {
    "results": [
        {
            "rank": 1,
            "teamA": [{"summonerName": "P1", "assignedPosition": "MID", "hiddenMmr": 5.5}],
            "teamB": [{"summonerName": "P2", "assignedPosition": "WHATEVER", "hiddenMmr": 5.2}],
            "teamAWinRate": 0.51,
            "teamBWinRate": 0.49,
            "balanceScore": 0.95,
        }
    ]
}


def _with_team_a(team_a) -> dict:
    return {"results": [{**BODY["results"][0], "teamA": team_a}]}


def _client(response=None, error=None) -> HttpOptimizerClient:
    session = mock.Mock()
    session.headers = {}
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response
    return HttpOptimizerClient(OptimizerConfig(base_url="http://engine:8000", timeout_s=30), session)


def _response(status_code: int, body=None) -> mock.Mock:
    resp = mock.Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = body
    return resp


def test_posts_camel_case_payload_and_parses_candidates() -> None:
    client = _client(_response(200, BODY))

    [candidate] = client.optimize(PAYLOAD, 30)

    call = client._session.post.call_args
    assert call.args[0] == "http://engine:8000/team/balance"
    assert call.kwargs["timeout"] == 30
    assert call.kwargs["json"]["players"][0]["tierScore"] == 4.75
    assert call.kwargs["json"]["players"][0]["primaryPosition"] == "MID"
    assert candidate.team_a[0].hidden_mmr == 5.5
    assert candidate.team_b[0].assigned_position == Position.FILL
    assert candidate.balance_score == 0.95


@pytest.mark.parametrize(
    "kwargs,fault",
    [
        ({"error": requests.Timeout("slow")}, OptimizerFault.TIMEOUT),
        ({"error": requests.ConnectionError("refused")}, OptimizerFault.UNAVAILABLE),
        ({"response": _response(503, {})}, OptimizerFault.UNAVAILABLE),
        ({"response": _response(200, {"oops": []})}, OptimizerFault.BAD_RESPONSE),
        ({"response": _response(200, {"results": []})}, OptimizerFault.BAD_RESPONSE),
        ({"response": _response(200, {"results": BODY["results"] * 4})}, OptimizerFault.BAD_RESPONSE),
        ({"response": _response(200, _with_team_a([["P1", "MID"]]))}, OptimizerFault.BAD_RESPONSE),
    ],
)
def test_failures_are_classified(kwargs, fault) -> None:
    with pytest.raises(OptimizerError) as exc_info:
        _client(**kwargs).optimize(PAYLOAD, 30)
    assert exc_info.value.kind == fault


def test_non_string_position_is_fill() -> None:
    body = _with_team_a([{"summonerName": "P1", "assignedPosition": 3, "hiddenMmr": 5.5}])

    [candidate] = _client(_response(200, body)).optimize(PAYLOAD, 30)

    assert candidate.team_a[0].assigned_position == Position.FILL
