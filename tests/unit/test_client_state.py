"""Tests for the client-side catalog state, run against the API app."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport

from moviecatalog.client.api import CatalogClient, CatalogClientError
from moviecatalog.client.state import CatalogState, FilterCriteria, MovieForm


def fill_form(state: CatalogState, **overrides: object) -> None:
    values = {
        "titulo": "Inception",
        "año": "2010",
        "duracion": "148",
        "calificacion": "8.8",
        "id_genero": "1",
        "id_director": "1",
    }
    values.update(overrides)
    state.update_form(**values)


@pytest.fixture
def state(test_app: FastAPI) -> CatalogState:
    client = CatalogClient(base_url="http://test", transport=ASGITransport(app=test_app))
    return CatalogState(client)


@pytest.fixture
def seeded(fake_gateway) -> None:
    fake_gateway.add(title="Oppenheimer", release_year=2023, genre_id=2)
    fake_gateway.add(title="The Dark Knight", release_year=2008)
    fake_gateway.add(title="Barbie", release_year=2023, genre_id=3, director_id=2)


# ---------------------------------------------------------------------------
# Initial load
# ---------------------------------------------------------------------------


class TestLoad:
    async def test_populates_movies_and_lookups(self, state: CatalogState, seeded) -> None:
        await state.load()

        assert [m["titulo"] for m in state.movies] == ["Barbie", "Oppenheimer", "The Dark Knight"]
        assert len(state.genres) == 3
        assert len(state.directors) == 2
        assert state.filtered_movies == state.movies
        assert state.error == ""
        assert state.loading is False

    async def test_first_failure_leaves_lists_empty(self) -> None:
        client = MagicMock()
        client.list_movies = AsyncMock(return_value=[{"titulo": "Heat"}])
        client.list_genres = AsyncMock(side_effect=CatalogClientError("genres down"))
        client.list_directors = AsyncMock(side_effect=CatalogClientError("directors down"))
        state = CatalogState(client)

        await state.load()

        assert state.error == "genres down"
        assert state.movies == []
        assert state.genres == []
        assert state.directors == []

    async def test_reports_failure_that_happens_first(self) -> None:
        async def slow_genres() -> list:
            await asyncio.sleep(0.05)
            raise CatalogClientError("genres down")

        client = MagicMock()
        client.list_movies = AsyncMock(return_value=[])
        client.list_genres = slow_genres
        client.list_directors = AsyncMock(side_effect=CatalogClientError("directors down"))
        state = CatalogState(client)

        await state.load()

        assert state.error == "directors down"
        assert state.loading is False

    async def test_failed_reload_empties_previous_lists(
        self, state: CatalogState, seeded, fake_gateway
    ) -> None:
        await state.load()
        assert state.movies

        fake_gateway.fail = True
        await state.load()

        assert state.error == "Internal server error"
        assert state.movies == []
        assert state.filtered_movies == []
        assert state.genres == []
        assert state.directors == []


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


class TestFilters:
    async def test_empty_filters_return_base_list_unchanged(self, state: CatalogState, seeded) -> None:
        await state.load()
        state.set_filters(title="", genre_id="", year="")

        assert state.filtered_movies is state.movies

    async def test_title_filter_is_case_insensitive(self, state: CatalogState, seeded) -> None:
        await state.load()
        state.set_filters(title="DARK")

        assert [m["titulo"] for m in state.filtered_movies] == ["The Dark Knight"]
        assert state.visible_count == 1

    async def test_genre_filter_matches_exact_id(self, state: CatalogState, seeded) -> None:
        await state.load()
        state.set_filters(genre_id="2")

        assert all(m["id_genero"] == 2 for m in state.filtered_movies)
        assert [m["titulo"] for m in state.filtered_movies] == ["Oppenheimer"]

    async def test_filters_are_conjunctive(self, state: CatalogState, seeded) -> None:
        await state.load()
        state.set_filters(year=2023, title="b")

        assert [m["titulo"] for m in state.filtered_movies] == ["Barbie"]

    async def test_clear_filters_restores_full_list(self, state: CatalogState, seeded) -> None:
        await state.load()
        state.set_filters(year="1999")
        assert state.filtered_movies == []

        state.clear_filters()

        assert state.filters == FilterCriteria()
        assert state.visible_count == 3

    async def test_filters_reapply_when_list_changes(self, state: CatalogState, fake_gateway, seeded) -> None:
        await state.load()
        state.set_filters(year="2010")
        assert state.filtered_movies == []

        fake_gateway.add(title="Inception", release_year=2010)
        await state.refresh_movies()

        assert [m["titulo"] for m in state.filtered_movies] == ["Inception"]

    def test_unknown_filter_is_rejected(self, state: CatalogState) -> None:
        with pytest.raises(TypeError):
            state.set_filters(director="Nolan")


# ---------------------------------------------------------------------------
# Form validation and edit mode
# ---------------------------------------------------------------------------


class TestForm:
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"titulo": "  "}, "Title is required"),
            ({"año": "1700"}, "Invalid year"),
            ({"año": str(date.today().year + 6)}, "Invalid year"),
            ({"duracion": "0"}, "Invalid duration"),
            ({"calificacion": "10.5"}, "Invalid rating"),
            ({"id_genero": ""}, "Select a genre"),
            ({"id_director": ""}, "Select a director"),
        ],
    )
    async def test_submit_stops_on_validation_error(
        self, state: CatalogState, fake_gateway, overrides: dict, message: str
    ) -> None:
        fill_form(state, **overrides)

        assert await state.submit() is False
        assert state.error == message
        assert fake_gateway.rows == {}

    def test_start_edit_copies_movie_into_form(self, state: CatalogState) -> None:
        movie = {
            "id_pelicula": 7,
            "titulo": "Heat",
            "año_lanzamiento": 1995,
            "duracion_minutos": 170,
            "sinopsis": None,
            "calificacion": 8.3,
            "id_genero": 2,
            "id_director": 1,
            "poster_url": None,
        }

        state.start_edit(movie)

        assert state.editing_id == 7
        assert state.show_form is True
        assert state.form.titulo == "Heat"
        assert state.form.sinopsis == ""
        assert state.form.to_payload()["año"] == 1995

    def test_cancel_edit_clears_draft(self, state: CatalogState) -> None:
        state.editing_id = 3
        state.show_form = True
        fill_form(state)

        state.cancel_edit()

        assert state.editing_id is None
        assert state.show_form is False
        assert state.form == MovieForm()


# ---------------------------------------------------------------------------
# Submit and delete
# ---------------------------------------------------------------------------


class TestMutations:
    async def test_create_resets_form_and_refetches(self, state: CatalogState) -> None:
        await state.load()
        state.open_form()
        fill_form(state, titulo="  Inception ")

        assert await state.submit() is True

        assert [m["titulo"] for m in state.movies] == ["Inception"]
        assert state.success.startswith('Movie "  Inception " added with ID')
        assert state.form == MovieForm()
        assert state.show_form is False
        assert state.editing_id is None

    async def test_edit_updates_existing_movie(self, state: CatalogState, seeded) -> None:
        await state.load()
        knight = next(m for m in state.movies if m["titulo"] == "The Dark Knight")
        state.start_edit(knight)
        state.update_form(calificacion="9.0")

        assert await state.submit() is True

        updated = next(m for m in state.movies if m["id_pelicula"] == knight["id_pelicula"])
        assert updated["calificacion"] == 9.0
        assert state.editing_id is None

    async def test_server_error_is_surfaced_and_list_kept(self, state: CatalogState, seeded) -> None:
        await state.load()
        before = list(state.movies)
        fill_form(state, id_genero="99")

        assert await state.submit() is False

        assert state.error == "Invalid genre or director"
        assert state.movies == before

    async def test_delete_requires_confirmation(self, state: CatalogState, seeded, fake_gateway) -> None:
        await state.load()
        prompts: list[str] = []

        def decline(prompt: str) -> bool:
            prompts.append(prompt)
            return False

        assert await state.delete(1, "Oppenheimer", decline) is False
        assert prompts == ['Delete "Oppenheimer"?']
        assert 1 in fake_gateway.rows

    async def test_confirmed_delete_refetches_list(self, state: CatalogState, seeded) -> None:
        await state.load()

        assert await state.delete(1, "Oppenheimer", lambda prompt: True) is True

        assert "Oppenheimer" not in {m["titulo"] for m in state.movies}
        assert state.success == 'Movie "Oppenheimer" deleted'

    async def test_delete_failure_keeps_state(self, state: CatalogState, seeded, fake_gateway) -> None:
        await state.load()
        fake_gateway.fail = True

        assert await state.delete(1, "Oppenheimer", lambda prompt: True) is False

        assert state.error == "Internal server error"
        assert len(state.movies) == 3
