"""Tests for the command-line tool and the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from blind_poker.scripts import compare_hands
from blind_poker.scripts.compare_hands import (
    EXIT_INVALID,
    EXIT_OK,
    main,
    parse_hand_arg,
)
from blind_poker import compare
from blind_poker.rules import check_hand, deal_hand, format_cards
from blind_poker.scripts.serve import ServerConfig, app
from blind_poker.utils.seeding import make_rng, resolve_seed


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def recorded_console(monkeypatch):
    console = compare_hands.Console(record=True, width=120)
    monkeypatch.setattr(compare_hands, "console", console)
    return console


class TestParseHandArg:
    def test_symbols(self):
        assert parse_hand_arg("A 3 5 J K") == [1, 3, 5, 11, 13]

    def test_numbers_and_commas(self):
        assert parse_hand_arg("1,10,11,12,13") == [1, 10, 11, 12, 13]

    def test_bad_symbol(self):
        with pytest.raises(ValueError):
            parse_hand_arg("A 3 Z 7 9")


class TestCommandLine:
    def test_player_b_wins(self, recorded_console):
        assert main(["--hand-a", "A 3 5 7 9", "--hand-b", "A 3 5 7 7"]) == EXIT_OK
        output = recorded_console.export_text()
        assert "Player B wins" in output
        assert "Pair" in output

    def test_category_labels(self, recorded_console):
        assert main(["--hand-a", "A A A A 9", "--hand-b", "7 7 7 3 5"]) == EXIT_OK
        output = recorded_console.export_text()
        assert "Four of a kind" in output
        assert "Three of a kind" in output
        assert "Of A Kind" not in output

    def test_tie(self, recorded_console):
        assert main(["--hand-a", "9 9 9 2 2", "--hand-b", "9 9 9 K K"]) == EXIT_OK
        assert "Tie" in recorded_console.export_text()

    def test_invalid_hand(self, recorded_console):
        assert main(["--hand-a", "A A A A A", "--hand-b", "2 3 4 5 6"]) == EXIT_INVALID
        assert "Invalid hand" in recorded_console.export_text()

    def test_unparseable_hand(self, recorded_console):
        assert main(["--hand-a", "A 3 Z 7 9", "--hand-b", "2 3 4 5 6"]) == EXIT_INVALID

    def test_random_deals(self, recorded_console):
        assert main(["--random", "3", "--seed", "5"]) == EXIT_OK
        output = recorded_console.export_text()
        assert "Showdown 3/3" in output
        assert "Summary" in output

    def test_missing_hands(self, recorded_console):
        with pytest.raises(SystemExit) as excinfo:
            main(["--hand-a", "A 3 5 7 9"])
        assert excinfo.value.code == 2


class TestSeeding:
    def test_explicit_seed_kept(self):
        assert resolve_seed(5) == 5

    def test_fresh_seed_is_reusable(self):
        seed = resolve_seed()
        assert isinstance(seed, int)
        assert seed >= 0
        first = [deal_hand(make_rng(seed)) for _ in range(3)]
        second = [deal_hand(make_rng(seed)) for _ in range(3)]
        assert first == second

    def test_seed_drives_random_deals(self, recorded_console):
        """The seed alone decides the dealt hands."""
        assert main(["--random", "4", "--seed", "9"]) == EXIT_OK
        output = recorded_console.export_text()

        rng = make_rng(9)
        for _ in range(4):
            hand_a = format_cards(check_hand(deal_hand(rng)).cards)
            hand_b = format_cards(check_hand(deal_hand(rng)).cards)
            assert hand_a in output
            assert hand_b in output


class TestServerConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BLIND_POKER_HOST", raising=False)
        monkeypatch.delenv("BLIND_POKER_PORT", raising=False)
        assert ServerConfig.from_env() == ServerConfig(host="0.0.0.0", port=8000)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BLIND_POKER_HOST", "127.0.0.1")
        monkeypatch.setenv("BLIND_POKER_PORT", "9000")
        assert ServerConfig.from_env() == ServerConfig(host="127.0.0.1", port=9000)


class TestHttpApi:
    def test_compare(self, client):
        response = client.post(
            "/api/compare", json={"hand_a": [1, 1, 9, 9, 9], "hand_b": [10, 10, 1, 1, 1]}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["result"] == 1
        assert body["winner"] == "player_a"
        assert body["hand_a"]["category"] == "FULL_HOUSE"
        assert body["hand_a"]["rank"] == 5
        assert body["hand_a"]["groups"] == [{"value": 1, "count": 2}, {"value": 9, "count": 3}]
        assert body["detail"] is None

    def test_invalid_hand(self, client):
        response = client.post(
            "/api/compare", json={"hand_a": [1, 2, 3, 4], "hand_b": [1, 2, 3, 4, 5]}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["result"] == -1
        assert body["winner"] == "invalid"
        assert body["hand_a"] is None
        assert "5 cards" in body["detail"]

    def test_non_integer_cards_rejected(self, client):
        """Cards the comparator would reject must not be coerced into ints."""
        loose = [True, "3", 5.0, 7, 9]
        assert compare(loose, [1, 3, 5, 7, 7]) == -1

        response = client.post("/api/compare", json={"hand_a": loose, "hand_b": [1, 3, 5, 7, 7]})
        assert response.status_code == 422

    @pytest.mark.parametrize("card", [True, "3", 5.0])
    def test_each_loose_card_rejected(self, client, card):
        response = client.post(
            "/api/compare", json={"hand_a": [1, 3, 5, 7, 9], "hand_b": [card, 4, 6, 8, 10]}
        )
        assert response.status_code == 422

    def test_malformed_body(self, client):
        response = client.post("/api/compare", json={"hand_a": "A 2 3 4 5"})
        assert response.status_code == 422

    def test_categories(self, client):
        response = client.get("/api/categories")
        assert response.status_code == 200
        categories = response.json()["categories"]
        assert [c["rank"] for c in categories] == list(range(7))
        assert categories[-1]["name"] == "FOUR_OF_A_KIND"
