"""
Tests for selection state.
"""

from selection_ui.state import MAX_SELECTED, SelectionState


class TestAdd:
    """Adding companies."""

    def test_appends_new_company(self, sample_companies):
        state = SelectionState(catalog=sample_companies, selected=sample_companies[:1])

        assert state.add(sample_companies[2]) is True
        assert state.selected == (sample_companies[0], sample_companies[2])

    def test_duplicate_id_is_ignored(self, sample_companies):
        """A company with the same id, even a different copy, is rejected."""
        state = SelectionState(selected=sample_companies[:2])

        assert state.add({"id": 2, "name": "Globex (copy)", "logo": ""}) is False
        assert state.selected == tuple(sample_companies[:2])

    def test_full_selection_is_unchanged(self, big_catalog):
        state = SelectionState(catalog=big_catalog, selected=big_catalog[:MAX_SELECTED])

        assert state.is_full
        assert state.add(big_catalog[MAX_SELECTED]) is False
        assert len(state.selected) == MAX_SELECTED
        assert state.can_add is False

    def test_selection_keeps_copies(self, sample_companies):
        """Changing the caller's dict afterwards does not alter the selection."""
        state = SelectionState()
        company = dict(sample_companies[0])
        state.add(company)

        company["name"] = "Renamed"

        assert state.selected[0]["name"] == "Acme"

    def test_capacity_is_configurable(self, sample_companies):
        state = SelectionState(capacity=2)
        for company in sample_companies:
            state.add(company)

        assert [c["id"] for c in state.selected] == [1, 2]


class TestRemove:
    """Removing companies."""

    def test_removes_by_id(self, sample_companies):
        state = SelectionState(selected=sample_companies)

        assert state.remove(2) is True
        assert [c["id"] for c in state.selected] == [1, 3, 4]

    def test_removes_every_entry_with_the_id(self):
        """Server data is loaded as‑is and may hold duplicates."""
        state = SelectionState(selected=[{"id": 1}, {"id": 2}, {"id": 1}])

        state.remove(1)

        assert state.selected == ({"id": 2},)

    def test_unknown_id_is_a_no_op(self, sample_companies):
        state = SelectionState(selected=sample_companies[:2])

        assert state.remove(99) is False
        assert state.selected == tuple(sample_companies[:2])


class TestFilterCatalog:
    """Picker search."""

    def test_case_insensitive_substring(self, sample_companies):
        state = SelectionState(catalog=sample_companies)

        assert [c["name"] for c in state.filter_catalog("O")] == ["Globex", "Umbrella Corp"]
        assert [c["name"] for c in state.filter_catalog("tech")] == ["Initech"]

    def test_empty_query_returns_whole_catalog(self, sample_companies):
        state = SelectionState(catalog=sample_companies)

        assert state.filter_catalog("") == sample_companies

    def test_no_match(self, sample_companies):
        state = SelectionState(catalog=sample_companies)

        assert state.filter_catalog("zzz") == []

    def test_entries_without_name_match_string_form(self):
        state = SelectionState(catalog=["Hooli", {"id": 5, "name": "Pied Piper"}])

        assert state.filter_catalog("hoo") == ["Hooli"]

    def test_empty_name_matches_only_empty_query(self):
        """The search looks at the name alone, never at other fields."""
        nameless = {"id": 1, "name": "", "logo": "x"}
        state = SelectionState(catalog=[nameless, {"id": 2, "name": "Globex", "logo": ""}])

        assert state.filter_catalog("id") == []
        assert state.filter_catalog("x") == []
        assert state.filter_catalog("") == [nameless, {"id": 2, "name": "Globex", "logo": ""}]



class TestLookup:
    def test_find_and_contains(self, sample_companies):
        state = SelectionState(catalog=sample_companies, selected=sample_companies[:1])

        assert state.find(3) == sample_companies[2]
        assert state.find(42) is None
        assert state.contains(1)
        assert not state.contains(3)
