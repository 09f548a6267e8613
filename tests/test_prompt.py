from unittest.mock import patch

import click
import pytest

from api_scaffold.errors import PromptError
from api_scaffold.prompt import ClickPrompter, _parse_selection

ITEMS = ["GET", "POST", "PUT", "DELETE"]


class TestParseSelection:
    def test_numbers(self):
        assert _parse_selection("1,2", ITEMS) == ["GET", "POST"]

    def test_labels_case_insensitive(self):
        assert _parse_selection("delete post", ITEMS) == ["POST", "DELETE"]

    def test_keeps_item_order_and_drops_duplicates(self):
        assert _parse_selection("4, 1, 4", ITEMS) == ["GET", "DELETE"]

    def test_empty(self):
        assert _parse_selection("", ITEMS) == []

    def test_unknown_token(self):
        with pytest.raises(click.BadParameter):
            _parse_selection("PATCH", ITEMS)

    def test_out_of_range_number(self):
        with pytest.raises(click.BadParameter):
            _parse_selection("5", ITEMS)


class TestClickPrompter:
    @patch("api_scaffold.prompt.click.prompt", side_effect=click.Abort())
    def test_choose_abort_becomes_prompt_error(self, mock_prompt):
        with pytest.raises(PromptError):
            ClickPrompter().choose("Pick", ITEMS)

    @patch("api_scaffold.prompt.click.prompt", side_effect=click.Abort())
    def test_text_abort_becomes_prompt_error(self, mock_prompt):
        with pytest.raises(PromptError):
            ClickPrompter().text("Name")

    @patch("api_scaffold.prompt.click.prompt", return_value="3")
    def test_text_passes_default(self, mock_prompt):
        assert ClickPrompter().text("How many?", default="2") == "3"
        mock_prompt.assert_called_once_with("How many?", default="2", type=str)
