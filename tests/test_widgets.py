"""Tests for the roster renderers and widgets."""
import dash_bootstrap_components as dbc
import pytest
from dash import dcc, html

from src.components.widgets import (
    NewPlayerFormWidget,
    PlayerDetailsWidget,
    PlayerListWidget,
    WidgetConfig,
    build_player_payload,
    render_all_players,
    render_new_player_form,
    render_single_player,
)
from src.components.widgets.player_details import DETAILS_CONTAINER_ID, MODAL_CLOSE_ID, MODAL_ID
from src.components.widgets.player_form import FORM_ID
from src.components.widgets.player_list import (
    DETAILS_BUTTON_TYPE,
    EMPTY_MESSAGE,
    PLAYERS_CONTAINER_ID,
    REMOVE_BUTTON_TYPE,
    REMOVE_CONFIRM_ID,
)
from src.core.models import Player, Team


class TestRenderAllPlayers:
    @pytest.mark.parametrize("players", [[], None])
    def test_empty_or_absent_renders_message(self, players, walk, texts):
        rendered = render_all_players(players)

        assert texts(rendered) == [EMPTY_MESSAGE]
        assert not [c for c in walk(rendered) if getattr(c, "className", None) == "player-card"]

    def test_single_card(self, walk, texts):
        rendered = render_all_players([Player(id=1, name="Rex", image_url="u")])

        cards = [c for c in walk(rendered) if getattr(c, "className", None) == "player-card"]
        assert len(cards) == 1

        card_texts = texts(cards[0])
        assert "Rex" in card_texts
        assert any("1" in t for t in card_texts if t.startswith("Player ID"))

        [image] = [c for c in walk(cards[0]) if isinstance(c, html.Img)]
        assert image.alt == "Rex"
        assert image.src == "u"

        buttons = [c for c in walk(cards[0]) if isinstance(c, html.Button)]
        assert len(buttons) == 2
        assert {b.id["type"] for b in buttons} == {DETAILS_BUTTON_TYPE, REMOVE_BUTTON_TYPE}
        assert all(b.id["index"] == 1 for b in buttons)

    def test_one_card_per_player_in_order(self, sample_players, walk):
        players = [Player.from_api(p) for p in sample_players]

        rendered = render_all_players(players)

        headings = [c.children for c in walk(rendered) if isinstance(c, html.H2)]
        assert headings == ["Rex", "Fido"]

    def test_raw_api_record(self, walk, texts):
        rendered = render_all_players([{"id": 1, "name": "Rex", "imageUrl": "u"}])

        cards = [c for c in walk(rendered) if getattr(c, "className", None) == "player-card"]
        assert len(cards) == 1
        assert "Rex" in texts(cards[0])
        assert "Player ID: 1" in texts(cards[0])

        [image] = [c for c in walk(cards[0]) if isinstance(c, html.Img)]
        assert image.alt == "Rex"
        buttons = [c for c in walk(cards[0]) if isinstance(c, html.Button)]
        assert [b.id["index"] for b in buttons] == [1, 1]


class TestRenderSinglePlayer:
    def test_unassigned_team(self, texts):
        player = Player(id=2, name="Fido", breed="Lab", image_url="u", team=None)

        rendered_texts = texts(render_single_player(player))

        assert "Team: Unassigned" in rendered_texts
        assert "Fido" in rendered_texts
        assert "Player ID: 2" in rendered_texts
        assert "Breed: Lab" in rendered_texts

    def test_team_name(self, texts):
        player = Player(id=2, name="Fido", breed="Lab", image_url="u", team=Team(name="Alpha"))

        rendered_texts = texts(render_single_player(player))

        assert "Team: Alpha" in rendered_texts
        assert "Team: Unassigned" not in rendered_texts

    def test_image_and_status(self, walk, texts):
        player = Player(id=3, name="Max", image_url="img", status="bench")

        rendered = render_single_player(player)

        [image] = [c for c in walk(rendered) if isinstance(c, html.Img)]
        assert image.alt == "Max"
        assert "Status: bench" in texts(rendered)

    @pytest.mark.parametrize(
        "team,label",
        [(None, "Team: Unassigned"), ({"name": "Alpha"}, "Team: Alpha")],
    )
    def test_raw_api_record(self, team, label, texts):
        record = {"id": 2, "name": "Fido", "breed": "Lab", "imageUrl": "u", "team": team}

        rendered_texts = texts(render_single_player(record))

        assert label in rendered_texts
        assert "Breed: Lab" in rendered_texts


class TestNewPlayerForm:
    def test_three_required_inputs_and_submit(self, walk):
        rendered = render_new_player_form()

        inputs = [c for c in walk(rendered) if isinstance(c, dbc.Input)]
        assert [i.type for i in inputs] == ["text", "text", "url"]
        assert all(i.required for i in inputs)
        assert len([c for c in walk(rendered) if isinstance(c, dbc.Label)]) == 3

        [submit] = [c for c in walk(rendered) if isinstance(c, dbc.Button)]
        assert submit.type == "submit"

    def test_payload_keeps_values_as_entered(self):
        payload = build_player_payload(" Bolt ", "Husky", "https://img.test/bolt.png")

        assert payload.to_payload() == {
            "name": " Bolt ",
            "breed": "Husky",
            "imageUrl": "https://img.test/bolt.png",
        }

    def test_payload_tolerates_missing_values(self):
        assert build_player_payload(None, None, None).to_payload() == {
            "name": "",
            "breed": "",
            "imageUrl": "",
        }


class TestWidgets:
    def test_list_widget_mounts_container_and_confirm(self, walk):
        widget = PlayerListWidget(WidgetConfig(id="list", title="Roster", widget_type="player_list"))

        components = list(walk(widget.render()))

        [main] = [c for c in components if isinstance(c, html.Main)]
        assert main.id == PLAYERS_CONTAINER_ID
        [confirm] = [c for c in components if isinstance(c, dcc.ConfirmDialog)]
        assert confirm.id == REMOVE_CONFIRM_ID

    def test_details_widget_mounts_hidden_modal(self, walk):
        widget = PlayerDetailsWidget(WidgetConfig(id="details", title="Details", widget_type="player_details"))

        components = list(walk(widget.render()))

        [modal] = [c for c in components if isinstance(c, dbc.Modal)]
        assert modal.id == MODAL_ID
        assert modal.is_open is False
        ids = [getattr(c, "id", None) for c in components]
        assert DETAILS_CONTAINER_ID in ids
        [close] = [c for c in components if getattr(c, "id", None) == MODAL_CLOSE_ID]
        assert close.className == "close"

    def test_form_widget_mounts_form(self, walk):
        widget = NewPlayerFormWidget(WidgetConfig(id="form", title="Add", widget_type="new_player_form"))

        [form] = [c for c in walk(widget.render()) if isinstance(c, dbc.Form)]

        assert form.id == FORM_ID
        assert form.prevent_default_on_submit is True
