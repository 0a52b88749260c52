from core.records import pad_rows, present_rows, same_text, split_panchayats, unique


def test_present_rows_need_a_first_column():
    rows = [["1", "a"], ["  ", "b"], [], ["2"]]
    assert present_rows(rows) == [["1", "a"], ["2"]]


def test_pad_rows_to_widest():
    assert pad_rows([["1"], ["2", "x", "y"]]) == [["1", "", ""], ["2", "x", "y"]]
    assert pad_rows([]) == []


def test_split_panchayats():
    assert split_panchayats(" GP1 ,GP2,, ,GP3") == ["GP1", "GP2", "GP3"]
    assert split_panchayats("") == []
    assert split_panchayats(None) == []


def test_unique_keeps_first_seen_exact_values():
    assert unique(["b", "a", "", "b", "B"]) == ["b", "a", "B"]


def test_same_text():
    assert same_text(" Ravi ", "ravi")
    assert not same_text("ravi", "ravi k")
    assert same_text(None, "")
