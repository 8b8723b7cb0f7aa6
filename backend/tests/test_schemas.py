import pytest
from pydantic import ValidationError

from quicksearch.models import ItemKind
from quicksearch.schemas.search import LookupResponse, Suggestion
from quicksearch.schemas.workspace import ItemCreate, ItemUpdate, ViewCreate
from quicksearch.search import QuickSearch, SearchState
from quicksearch.workspace import Workspace


class TestWorkspaceSchemas:
    """Test workspace request schemas."""

    def test_item_create_defaults(self):
        item = ItemCreate(name="alpha")
        assert item.kind == ItemKind.JOB
        assert item.display_name is None
        assert item.parent is None

    def test_item_create_folder(self):
        item = ItemCreate(name="folder", kind="folder", parent="outer")
        assert item.kind == ItemKind.FOLDER
        assert item.parent == "outer"

    @pytest.mark.parametrize("name", ["", "   ", "a/b"])
    def test_item_create_invalid_name(self, name):
        with pytest.raises(ValidationError):
            ItemCreate(name=name)

    def test_item_create_invalid_kind(self):
        with pytest.raises(ValidationError):
            ItemCreate(name="alpha", kind="pipeline")

    def test_item_update_tracks_set_fields(self):
        update = ItemUpdate(disabled=True)
        assert update.model_dump(exclude_unset=True) == {"disabled": True}

    def test_view_create(self):
        view = ViewCreate(name="mine")
        assert view.members == []
        assert view.primary is False
        with pytest.raises(ValidationError):
            ViewCreate(name="a/b")


class TestSearchSchemas:
    """Test search response schemas."""

    def test_suggestion_from_item(self):
        workspace = Workspace()
        workspace.create_folder("folder1").create_job("myjob")
        item = workspace.get_search_index().suggest("myjob")[0]

        suggestion = Suggestion.from_item(item, "/api/v1")
        assert suggestion.name == "myjob"
        assert suggestion.url == "/api/v1/job/folder1/job/myjob/"
        assert suggestion.path == "folder1 » myjob"

    def test_lookup_from_outcome(self):
        workspace = Workspace()
        workspace.create_job("alpha")
        quick_search = QuickSearch(workspace)

        resolved = LookupResponse.from_outcome(quick_search.lookup("alpha"), "/api/v1")
        assert resolved.state == SearchState.RESOLVED
        assert resolved.url == "/api/v1/job/alpha/"

        suggested = LookupResponse.from_outcome(quick_search.lookup("alp"), "/api/v1")
        assert suggested.state == SearchState.SUGGESTIONS_RETURNED
        assert suggested.url is None
        assert [s.name for s in suggested.suggestions] == ["alpha"]
