# tests/core/test_menus.py
"""
Тесты для постраничных меню.
"""

from __future__ import annotations

import pytest

from src.common.exceptions import OutOfRangeError, ValidationError
from src.core.dialog.menus import build_menu, paginate, parse_selection, resolve_index


class TestPaginate:
    """Тесты для функции paginate."""

    @pytest.mark.parametrize(
        "total, page, size, expected_len, has_more",
        [
            (0, 1, 6, 0, False),
            (6, 1, 6, 6, False),
            (7, 1, 6, 6, True),
            (7, 2, 6, 1, False),
            (13, 2, 6, 6, True),
            (13, 3, 6, 1, False),
            (5, 4, 6, 0, False),
        ],
    )
    def test_sizes(self, total: int, page: int, size: int, expected_len: int, has_more: bool) -> None:
        """Длина страницы min(size, max(0, total - (page-1)*size))."""
        result = paginate(list(range(total)), page, size)

        assert len(result.items) == expected_len
        assert result.has_more is has_more
        assert result.total == total

    def test_slice(self) -> None:
        assert paginate(list("abcdefgh"), 2, 3).items == ["d", "e", "f"]


class TestBuildMenu:
    """Тесты для функции build_menu."""

    def test_with_more(self) -> None:
        text = build_menu(["A", "B", "C"], page=1, page_size=2, title="Select town:")

        assert text == "Select town:\n1. A\n2. B\n0. More"

    def test_last_page_numbers_from_one(self) -> None:
        text = build_menu(["A", "B", "C"], page=2, page_size=2, title="Select town:")

        assert text == "Select town:\n1. C"

    def test_exact_fit_has_no_more(self) -> None:
        assert "0. More" not in build_menu(["A", "B"], page=1, page_size=2)

    def test_empty_renders_title_only(self) -> None:
        assert build_menu([], page=1, page_size=6, title="Select PICK-UP town:") == "Select PICK-UP town:"

    def test_deterministic(self) -> None:
        labels = ["Soweto", "Sandton", "Roodepoort"]
        assert build_menu(labels, 1, 2, "T") == build_menu(labels, 1, 2, "T")


class TestParseSelection:
    """Тесты для функции parse_selection."""

    def test_digits(self) -> None:
        assert parse_selection(" 3 ") == 3

    @pytest.mark.parametrize("text", ["", "abc", "1a", "-1", "1.5", "٣"])
    def test_rejects_non_numeric(self, text: str) -> None:
        with pytest.raises(ValidationError):
            parse_selection(text)


class TestResolveIndex:
    """Тесты для функции resolve_index."""

    def test_first_page(self) -> None:
        assert resolve_index(page=1, page_size=6, selection=1, total=7) == 0

    def test_second_page(self) -> None:
        assert resolve_index(page=2, page_size=6, selection=1, total=7) == 6

    def test_injective_within_page(self) -> None:
        indexes = {resolve_index(2, 4, selection, 20) for selection in range(1, 5)}
        assert indexes == {4, 5, 6, 7}

    @pytest.mark.parametrize(
        "page, selection, total",
        [
            (1, 0, 7),
            (1, 7, 7),
            (2, 2, 7),
            (1, 1, 0),
            (3, 1, 7),
        ],
    )
    def test_out_of_range(self, page: int, selection: int, total: int) -> None:
        with pytest.raises(OutOfRangeError):
            resolve_index(page, 6, selection, total)
