import pytest

from tbabot.bot.commands import (
    COMMANDS,
    HttpCat,
    Lmgtfy,
    Ping,
    TbaEventsFor,
    TbaTeam,
    TbaUnknown,
    parse_command,
)


def tba_data(sub, value="254"):
    return {
        "name": "tba",
        "options": [{"name": sub, "type": 1, "options": [{"name": "teamnumber", "type": 3, "value": value}]}],
    }


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"name": "ping"}, Ping()),
        ({"name": "lmgtfy", "options": [{"name": "search", "type": 3, "value": "cats"}]}, Lmgtfy("cats")),
        ({"name": "httpcat", "options": [{"name": "statuscode", "type": 4, "value": 404}]}, HttpCat(404)),
        (tba_data("team"), TbaTeam("254")),
        (tba_data("eventsfor", "1678"), TbaEventsFor("1678")),
        (tba_data("matches"), TbaUnknown("matches")),
    ],
)
def test_parse_command(data, expected):
    assert parse_command(data) == expected


@pytest.mark.parametrize("data", [None, {}, {"name": "dance"}])
def test_parse_unknown_command(data):
    assert parse_command(data) is None


def test_parse_missing_option():
    with pytest.raises(ValueError):
        parse_command({"name": "lmgtfy", "options": []})


def test_command_names_in_order():
    assert [c.name for c in COMMANDS] == ["ping", "lmgtfy", "tba", "httpcat"]


def test_tba_payload():
    payload = next(c for c in COMMANDS if c.name == "tba").to_payload()

    assert payload["type"] == 1
    assert [o["name"] for o in payload["options"]] == ["eventsfor", "team"]
    for sub in payload["options"]:
        assert sub["type"] == 1
        assert "required" not in sub
        assert sub["options"] == [
            {"name": "teamnumber", "description": "The number of the team", "type": 3, "required": True}
        ]


def test_httpcat_payload():
    payload = next(c for c in COMMANDS if c.name == "httpcat").to_payload()
    assert payload["options"] == [
        {"name": "statuscode", "description": "The HTTP status code", "type": 4, "required": True}
    ]


def test_ping_payload_has_no_options():
    assert COMMANDS[0].to_payload() == {"name": "ping", "description": "Ping the bot", "type": 1, "options": []}
