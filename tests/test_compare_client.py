from scripts.compare_client import build_request, compare_local, main, parse_args


def test_build_request_pairs_owners_with_hands():
    request = build_request(["Bob", "John"], ["2C 3H 4S 8C AH", "2H 3D 5S 9C KD"])
    assert request == {
        "type": "compare",
        "hands": [
            {"owner": "Bob", "cards": "2C 3H 4S 8C AH"},
            {"owner": "John", "cards": "2H 3D 5S 9C KD"},
        ],
    }


def test_compare_local():
    outcome = compare_local(["Bob", "John"], ["2C 3H 4S 8C AH", "2H 3D 5S 9C KD"])
    assert outcome == "Bob wins with high card: ace"


def test_random_hands_are_repeatable_and_disjoint():
    first = parse_args(["--random", "--seed", "5"]).hands
    second = parse_args(["--random", "--seed", "5"]).hands
    assert first == second
    assert len(first) == 2
    assert not set(first[0].split()) & set(first[1].split())


def test_main_local_prints_outcome(capsys):
    code = main(["--local", "--owners", "Bob", "John", "2H 3D 5S 9C KD", "2D 3H 5C 9S KH"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "Tie"


def test_main_local_reports_malformed_hand(capsys):
    code = main(["--local", "2H 3D 5S 9C", "2D 3H 5C 9S KH"])
    assert code == 1
    assert capsys.readouterr().out == ""
