"""Integration tests for the games API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from crazyeights.cards import Card, Rank, Suit, full_deck
from crazyeights.errors import SetupError
from crazyeights.state import GameState, GameStatus
from crazyeights.web.app import create_app
from crazyeights.web.dependencies import get_store
from crazyeights.web.store import GameStore


def make_card(rank: str, suit: str) -> Card:
    """Helper to create cards."""
    return Card(rank=Rank(rank), suit=Suit(suit))


def make_state(player_hand: tuple, ai_hand: tuple, top: Card, deck: tuple = ()) -> GameState:
    used = set(player_hand) | set(ai_hand) | set(deck) | {top}
    rest = tuple(c for c in full_deck() if c not in used)
    return GameState(
        deck=deck,
        discard_pile=(top,) + rest,
        player_hand=player_hand,
        ai_hand=ai_hand,
        current_suit=top.suit,
        current_rank=top.rank,
        status=GameStatus.PLAYER_TURN,
    )


@pytest.fixture
def store() -> GameStore:
    return GameStore()


@pytest.fixture
def client(store: GameStore) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_new_game(client, store):
    response = client.post("/api/games")

    assert response.status_code == 201
    body = response.json()
    assert body["version"] == 1
    assert body["state"]["status"] == "player_turn"
    assert len(body["state"]["player_hand"]) == 8
    assert body["state"]["ai_hand_size"] == 8
    assert body["state"]["deck_size"] == 35
    assert "ai_hand" not in body["state"]
    assert len(store) == 1


def test_new_game_setup_error(client, store):
    with patch(
        "crazyeights.web.routes.games.initialize",
        side_effect=SetupError("No non-8 card available to start the discard pile"),
    ):
        response = client.post("/api/games")

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Failed to start game")
    assert len(store) == 0


def test_get_game(client):
    game_id = client.post("/api/games").json()["game_id"]

    response = client.get(f"/api/games/{game_id}")

    assert response.status_code == 200
    assert response.json()["game_id"] == game_id


def test_unknown_game(client):
    assert client.get("/api/games/nope").status_code == 404
    assert client.post("/api/games/nope/draw", json={"version": 1}).status_code == 404


def test_full_turn_cycle(client, store):
    """Player plays, the computer draws, the player finishes with an 8."""
    state = make_state(
        (make_card("5", "hearts"), make_card("8", "clubs")),
        (make_card("2", "spades"),),
        top=make_card("K", "hearts"),
        deck=(make_card("9", "clubs"),),
    )
    game = store.create(state)
    url = f"/api/games/{game.game_id}"

    body = client.post(f"{url}/play", json={"version": 1, "card": make_card("5", "hearts").index}).json()
    assert body["version"] == 2
    assert body["state"]["status"] == "ai_turn"
    assert body["state"]["top_card"]["rank"] == "5"

    body = client.post(f"{url}/computer-turn", json={"version": 2}).json()
    assert body["state"]["status"] == "player_turn"
    assert body["state"]["ai_hand_size"] == 2
    assert body["state"]["playable"] == [make_card("8", "clubs").index]

    body = client.post(f"{url}/play", json={"version": 3, "card": make_card("8", "clubs").index}).json()
    assert body["state"]["status"] == "selecting_suit"
    assert body["state"]["current_rank"] == "8"

    body = client.post(f"{url}/suit", json={"version": 4, "suit": "spades"}).json()
    assert body["state"]["status"] == "game_over"
    assert body["state"]["winner"] == "player"


def test_duplicate_computer_turn_conflicts(client, store):
    state = make_state(
        (make_card("5", "hearts"), make_card("2", "clubs")),
        (make_card("2", "spades"), make_card("3", "spades")),
        top=make_card("K", "hearts"),
        deck=(make_card("9", "clubs"), make_card("10", "clubs")),
    )
    game = store.create(state)
    url = f"/api/games/{game.game_id}"
    client.post(f"{url}/play", json={"version": 1, "card": make_card("5", "hearts").index})

    first = client.post(f"{url}/computer-turn", json={"version": 2})
    second = client.post(f"{url}/computer-turn", json={"version": 2})

    assert first.status_code == 200
    assert second.status_code == 409
    assert store.get(game.game_id).version == 3


def test_computer_turn_outside_ai_turn(client):
    game_id = client.post("/api/games").json()["game_id"]

    response = client.post(f"/api/games/{game_id}/computer-turn", json={"version": 1})

    assert response.status_code == 400
    assert response.json()["detail"] == "Move not allowed"


def test_illegal_play_rejected(client, store):
    state = make_state(
        (make_card("2", "clubs"), make_card("5", "hearts")),
        (make_card("2", "spades"),),
        top=make_card("K", "hearts"),
    )
    game = store.create(state)

    response = client.post(
        f"/api/games/{game.game_id}/play",
        json={"version": 1, "card": make_card("2", "clubs").index},
    )

    assert response.status_code == 400
    assert store.get(game.game_id).state is state


@pytest.mark.parametrize("payload", [
    {"version": 1, "card": 52},
    {"version": 1, "card": -1},
    {"version": 1},
])
def test_invalid_play_payload(client, payload):
    game_id = client.post("/api/games").json()["game_id"]

    assert client.post(f"/api/games/{game_id}/play", json=payload).status_code == 422


def test_invalid_suit_payload(client):
    game_id = client.post("/api/games").json()["game_id"]

    response = client.post(f"/api/games/{game_id}/suit", json={"version": 1, "suit": "stars"})

    assert response.status_code == 422


def test_draw(client):
    game_id = client.post("/api/games").json()["game_id"]

    body = client.post(f"/api/games/{game_id}/draw", json={"version": 1}).json()

    assert len(body["state"]["player_hand"]) == 9
    assert body["state"]["deck_size"] == 34


def test_abandon_game(client, store):
    game_id = client.post("/api/games").json()["game_id"]

    assert client.delete(f"/api/games/{game_id}").status_code == 204
    assert len(store) == 0
    assert client.get(f"/api/games/{game_id}").status_code == 404


def test_get_game_debug_reveals_computer_hand(client):
    game_id = client.post("/api/games").json()["game_id"]

    hidden = client.get(f"/api/games/{game_id}").json()["state"]
    revealed = client.get(f"/api/games/{game_id}", params={"debug": "true"}).json()["state"]

    assert "ai_hand" not in hidden
    assert len(revealed["ai_hand"]) == 8
    assert revealed["ai_hand_size"] == 8
