from fastapi.testclient import TestClient


class TestSearchEndpoint:
    """Test the exact search endpoint."""

    def test_failure(self, client: TestClient):
        """Test that no exact match answers 404."""
        response = client.get("/api/v1/search", params={"q": "no-such-thing"})
        assert response.status_code == 404

    def test_missing_query(self, client: TestClient):
        """Test that a search without a query answers 404."""
        response = client.get("/api/v1/search")
        assert response.status_code == 404

    def test_xss(self, client: TestClient, create_item):
        """Test that a markup query is not found and not reflected."""
        create_item("alpha")
        query = "<script>alert('script');</script>"

        response = client.get("/api/v1/search", params={"q": query})

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/json")
        assert "<script>" not in response.text
        assert "alert(" not in response.text

    def test_search_by_project_name(self, client: TestClient, create_item):
        """Test that searching a job name leads to the job page."""
        create_item("testSearchByProjectName")

        response = client.get("/api/v1/search", params={"q": "testSearchByProjectName"})

        assert response.status_code == 200
        assert response.json()["name"] == "testSearchByProjectName"

    def test_search_redirects(self, client: TestClient, create_item):
        """Test that a match answers with a redirect to the item url."""
        create_item("alpha")

        response = client.get(
            "/api/v1/search", params={"q": "alpha"}, follow_redirects=False
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/api/v1/job/alpha/"

    def test_search_by_display_name(self, client: TestClient, create_item):
        """Test that searching a display name leads to the job page."""
        display_name = "displayName9999999"
        create_item("testSearchByDisplayName")
        client.patch(
            "/api/v1/job/testSearchByDisplayName/", json={"display_name": display_name}
        )

        response = client.get("/api/v1/search", params={"q": display_name})

        assert response.status_code == 200
        assert response.json()["display_name"] == display_name

    def test_search_two_projects_with_same_display_name(self, client: TestClient, create_item):
        """Test that one of the jobs sharing a display name is returned."""
        display_name = "displayNameFoo"
        create_item("projectName1", display_name=display_name)
        create_item("projectName2", display_name=display_name)
        create_item("projectName3", display_name="otherDisplayName")

        response = client.get("/api/v1/search", params={"q": display_name})

        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == display_name
        assert "otherDisplayName" not in response.text

    def test_project_name_precedes_display_name(self, client: TestClient, create_item):
        """Test that the job named foo wins over the job displayed as foo."""
        create_item("foo", display_name="project1DisplayName")
        create_item("project2Name", display_name="foo")
        create_item("project3Name", display_name="project3DisplayName")

        response = client.get("/api/v1/search", params={"q": "foo"})

        assert response.status_code == 200
        assert response.json()["display_name"] == "project1DisplayName"
        assert "project2Name" not in response.text
        assert "project3Name" not in response.text
        assert "project3DisplayName" not in response.text

    def test_disabled_job_resolves(self, client: TestClient, create_item):
        """Test that a disabled job can still be searched."""
        create_item("foo-bar")
        response = client.patch("/api/v1/job/foo-bar/", json={"disabled": True})
        assert response.json()["disabled"] is True

        response = client.get("/api/v1/search", params={"q": "foo-bar"})
        assert response.status_code == 200
        assert response.json()["disabled"] is True

    def test_search_within_folders(self, client: TestClient, create_item):
        """Test that a job two folders deep can be reached from the root."""
        create_item("outer", kind="folder")
        create_item("inner", kind="folder", parent="outer")
        create_item("deepjob", parent="outer/inner")

        response = client.get("/api/v1/search", params={"q": "deepjob"})

        assert response.status_code == 200
        assert response.json()["full_name"] == "outer/inner/deepjob"

    def test_search_view(self, client: TestClient):
        """Test that a view can be searched by name."""
        client.post("/api/v1/views", json={"name": "release"})

        response = client.get("/api/v1/search", params={"q": "release"})

        assert response.status_code == 200
        assert response.json()["name"] == "release"
        assert response.json()["url"] == "view/release/"


class TestSuggestEndpoint:
    """Test the suggestion endpoint."""

    def test_get_suggestions_has_both_names_and_display_names(self, client: TestClient, create_item):
        """Test that a job matching by name and display name is suggested twice."""
        create_item("project name", display_name="display name")

        response = client.get("/api/v1/search/suggest", params={"query": "name"})

        assert response.status_code == 200
        suggestions = response.json()["suggestions"]
        assert len(suggestions) == 2
        names = {suggestion["name"] for suggestion in suggestions}
        assert names == {"project name", "display name"}
        assert {suggestion["url"] for suggestion in suggestions} == {"/api/v1/job/project%20name/"}

    def test_disabled_job_should_be_suggested(self, client: TestClient, create_item):
        """Test that disabling a job keeps it in the suggestions."""
        create_item("foo-bar")
        before = client.get("/api/v1/search/suggest", params={"query": "foo"}).json()
        client.patch("/api/v1/job/foo-bar/", json={"disabled": True})
        after = client.get("/api/v1/search/suggest", params={"query": "foo"}).json()

        assert [s["name"] for s in before["suggestions"]] == ["foo-bar"]
        assert [s["name"] for s in after["suggestions"]] == ["foo-bar"]

    def test_completion_outside_view(self, client: TestClient, create_item):
        """Test that jobs outside every view, including the primary one, are suggested."""
        create_item("foo-bar")
        client.post("/api/v1/views", json={"name": "empty1"})
        client.post("/api/v1/views", json={"name": "empty2", "primary": True})

        views = client.get("/api/v1/views").json()
        assert views["primary_view"] == "empty2"
        assert all(view["members"] == [] for view in views["views"])

        response = client.get("/api/v1/search/suggest", params={"query": "foo"})
        assert [s["name"] for s in response.json()["suggestions"]] == ["foo-bar"]

    def test_search_within_folders(self, client: TestClient, create_item):
        """Test that same named jobs in two folders are both suggested."""
        create_item("folder1", kind="folder")
        create_item("myjob", parent="folder1")
        create_item("folder2", kind="folder")
        create_item("myjob", parent="folder2")

        response = client.get("/api/v1/search/suggest", params={"query": "myjob"})

        suggestions = response.json()["suggestions"]
        assert {s["url"] for s in suggestions} == {
            "/api/v1/job/folder1/job/myjob/",
            "/api/v1/job/folder2/job/myjob/",
        }
        assert {s["path"] for s in suggestions} == {"folder1 » myjob", "folder2 » myjob"}

    def test_shared_display_name_suggests_both(self, client: TestClient, create_item):
        """Test that two jobs with the same display name are not collapsed."""
        create_item("projectName1", display_name="displayNameFoo")
        create_item("projectName2", display_name="displayNameFoo")

        response = client.get("/api/v1/search/suggest", params={"query": "displayNameFoo"})

        suggestions = response.json()["suggestions"]
        assert [s["url"] for s in suggestions] == [
            "/api/v1/job/projectName1/",
            "/api/v1/job/projectName2/",
        ]

    def test_empty_suggestions(self, client: TestClient, create_item):
        """Test that no match is an empty list, not an error."""
        create_item("alpha")
        response = client.get("/api/v1/search/suggest", params={"query": "zzz"})
        assert response.status_code == 200
        assert response.json() == {"suggestions": []}

    def test_markup_query_returns_inert_data(self, client: TestClient, create_item):
        """Test that a markup-like name comes back as JSON text."""
        create_item("<b>bold")
        response = client.get("/api/v1/search/suggest", params={"query": "<b>"})

        assert response.headers["content-type"].startswith("application/json")
        assert response.json()["suggestions"][0]["name"] == "<b>bold"

    def test_max_parameter(self, client: TestClient, create_item):
        """Test capping the number of suggestions."""
        for i in range(5):
            create_item(f"job{i}")
        response = client.get("/api/v1/search/suggest", params={"query": "job", "max": 2})
        assert len(response.json()["suggestions"]) == 2

    def test_invalid_max_parameter(self, client: TestClient):
        """Test that a non-positive max is rejected."""
        response = client.get("/api/v1/search/suggest", params={"query": "job", "max": 0})
        assert response.status_code == 422


class TestLookupEndpoint:
    """Test the lookup endpoint."""

    def test_lookup_resolved(self, client: TestClient, create_item):
        create_item("alpha")
        data = client.get("/api/v1/search/lookup", params={"q": "alpha"}).json()
        assert data["state"] == "resolved"
        assert data["url"] == "/api/v1/job/alpha/"
        assert data["suggestions"] == []

    def test_lookup_suggestions(self, client: TestClient, create_item):
        create_item("alpha")
        data = client.get("/api/v1/search/lookup", params={"q": "alp"}).json()
        assert data["state"] == "suggestions_returned"
        assert data["url"] is None
        assert [s["name"] for s in data["suggestions"]] == ["alpha"]
