from core.filtering import clean_filter, filter_rows, get_filtered_data


def serials(result):
    return [row[0] for row in result["rows"]]


def test_no_filter_returns_present_rows_padded(store, config):
    result = get_filtered_data(store, config, {})

    assert serials(result) == ["1", "2", "3", "4", "5", "6"]
    widths = {len(row) for row in result["rows"]}
    assert widths == {10}
    assert result["rows"][0][7:] == ["", "", ""]


def test_field_filters_are_trimmed_and_case_insensitive(store, config):
    result = get_filtered_data(store, config, {"filter": {"engineer": "a kumar "}})
    assert serials(result) == ["1", "2", "6"]

    result = get_filtered_data(store, config, {"filter": {"gp": "gp1"}})
    assert serials(result) == ["1", "6"]


def test_field_filters_combine(store, config):
    result = get_filtered_data(store, config, {"filter": {"work": "ROAD", "year": "2024"}})
    assert serials(result) == ["3", "6"]


def test_blank_filter_fields_are_ignored(store, config):
    result = get_filtered_data(store, config, {"filter": {"engineer": "", "status": "  "}})
    assert serials(result) == ["1", "2", "3", "4", "5", "6"]


def test_search_matches_any_column(store, config):
    result = get_filtered_data(store, config, {"filter": {"search": "gp1"}})
    # GP column on 1 and 6, a trailing note column on 3
    assert serials(result) == ["1", "3", "6"]


def test_userid_restricts_to_granted_panchayats(store, config):
    result = get_filtered_data(store, config, {"userid": "RAVJE1201"})
    assert serials(result) == ["1", "3", "6"]

    result = get_filtered_data(store, config, {"userid": "meena devi"})
    assert serials(result) == ["2"]


def test_unknown_userid_applies_no_restriction(store, config):
    result = get_filtered_data(store, config, {"userid": "nobody"})
    assert serials(result) == ["1", "2", "3", "4", "5", "6"]


def test_userid_gate_and_filter_together(store, config):
    result = get_filtered_data(store, config, {
        "userid": "ravje1201",
        "filter": {"year": "2024"},
    })
    assert serials(result) == ["3", "6"]


def test_filtering_is_idempotent(store, config):
    filters = {"work": "road", "search": "complete"}
    first = get_filtered_data(store, config, {"filter": filters})["rows"]
    again = filter_rows(first, clean_filter(filters), [], config)
    assert again == first


def test_empty_sheet_returns_no_rows(empty_store, config):
    assert get_filtered_data(empty_store, config, {"filter": {"gp": "GP1"}}) == {"rows": []}


def test_clean_filter_ignores_non_dict():
    assert clean_filter(None) == {}
    assert clean_filter("gp1") == {}
    assert clean_filter({"gp": " GP1 ", "year": None}) == {"gp": "GP1"}
