from unittest import mock

import pytest
import requests

from riftdata.config import RiotConfig
from riftdata.riot_client import RiotApiClient, RiotApiError, find_participant
from teambalancer.domain.errors import UpstreamError, UpstreamFailure
from teambalancer.domain.value_objects.types import MatchId, Puuid, SummonerId
from teambalancer.infrastructure.adapters.riot_data_provider import RiotDataProvider

MATCH = {
    "info": {
        "gameDuration": 1740,
        "participants": [
            {"puuid": "other", "championName": "Zed"},
            {
                "puuid": "puuid-faker",
                "summonerName": "Faker",
                "championName": "Azir",
                "teamPosition": "MIDDLE",
                "kills": 7,
                "deaths": 1,
                "assists": 9,
                "totalMinionsKilled": 280,
                "neutralMinionsKilled": 12,
                "visionScore": 31,
                "win": True,
                "dragonKills": 0,
                "baronKills": 1,
            },
        ],
    }
}


def _response(status_code: int, body=None) -> mock.Mock:
    resp = mock.Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = body
    return resp


def _client(*responses) -> RiotApiClient:
    client = RiotApiClient(RiotConfig(api_key="RGAPI-test"))
    client.session = mock.Mock()
    client.session.get.side_effect = list(responses)
    return client


def test_client_sends_token_header() -> None:
    client = RiotApiClient(RiotConfig(api_key="RGAPI-test"))
    assert client.session.headers["X-Riot-Token"] == "RGAPI-test"


def test_client_url_encodes_names_and_passes_queue() -> None:
    client = _client(_response(200, {"puuid": "p"}), _response(200, ["KR_1"]))

    client.get_summoner_by_name("Hide on bush")
    client.get_match_ids("p", count=20, queue_id=420)

    first, second = client.session.get.call_args_list
    assert first.args[0].endswith("/lol/summoner/v4/summoners/by-name/Hide%20on%20bush")
    assert first.kwargs["timeout"] == 10.0
    assert second.args[0].startswith("https://asia.api.riotgames.com")
    assert second.kwargs["params"] == {"count": 20, "queue": 420}


@pytest.mark.parametrize("status", [401, 403, 404, 429, 500])
def test_client_maps_status_codes(status: int) -> None:
    client = _client(_response(status))
    with pytest.raises(RiotApiError) as exc_info:
        client.get_summoner_by_name("x")
    assert exc_info.value.status_code == status


def test_transport_error_is_server_fault() -> None:
    client = _client(requests.ConnectionError("reset"))
    with pytest.raises(RiotApiError) as exc_info:
        client.get_league_entries("sid")
    assert exc_info.value.status_code == 500


def test_find_participant_injects_duration() -> None:
    participant = find_participant(MATCH, "puuid-faker")
    assert participant is not None
    assert participant["gameDuration"] == 1740
    assert find_participant(MATCH, "missing") is None


def test_provider_maps_entities() -> None:
    client = _client(
        _response(200, {"id": "sid", "puuid": "puuid-faker", "name": "Faker", "summonerLevel": 512, "profileIconId": 6}),
        _response(200, [{"queueType": "RANKED_SOLO_5x5", "tier": "CHALLENGER", "rank": "I",
                         "leaguePoints": 1200, "wins": 300, "losses": 200, "hotStreak": True}]),
        _response(200, ["KR_1"]),
        _response(200, MATCH),
    )
    provider = RiotDataProvider(client)

    identity = provider.get_identity("Faker")
    [entry] = provider.get_rank_entries(SummonerId(identity.summoner_id))
    match_ids = provider.get_recent_match_ids(Puuid(identity.puuid), 20, 420)
    participation = provider.get_match_participant(MatchId("KR_1"), Puuid("puuid-faker"))

    assert identity.summoner_id == "sid"
    assert identity.level == 512
    assert entry.tier == "CHALLENGER"
    assert entry.hot_streak is True
    assert entry.win_rate == 0.6
    assert match_ids == ["KR_1"]
    assert participation is not None
    assert participation.role == "MIDDLE"
    assert participation.duration_seconds == 1740
    assert participation.baron_kills == 1


def test_provider_raises_upstream_error() -> None:
    provider = RiotDataProvider(_client(_response(404)))
    with pytest.raises(UpstreamError) as exc_info:
        provider.get_identity("Nobody")
    assert exc_info.value.failure == UpstreamFailure.NOT_FOUND
    assert exc_info.value.message == "Summoner not found."
